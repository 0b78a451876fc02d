"""Error types for GroceryStore."""
from typing import Optional, List, Dict, Any


class InventoryError(Exception):
    """Base class for inventory errors."""
    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.metadata = metadata or {}
        super().__init__(message)


class ProductValidationError(InventoryError):
    """A product record is missing fields or holds invalid values."""
    pass


class StorageError(InventoryError):
    """Reading from or writing to the key-value storage failed."""
    pass
