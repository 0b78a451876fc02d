"""Models package for GroceryStore."""
from .base import Base
from .storage_entry import StorageEntry

__all__ = ['Base', 'StorageEntry']
