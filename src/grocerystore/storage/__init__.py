"""Key-value storage backends for GroceryStore."""
from typing import Optional

from grocerystore.config.settings import GroceryStoreSettings, get_settings
from grocerystore.db.session import create_db_engine
from .base import KeyValueStorage
from .memory import MemoryStorage
from .json_file import JsonFileStorage
from .sqlite import SqliteStorage


def create_storage(settings: Optional[GroceryStoreSettings] = None) -> KeyValueStorage:
    """Build the storage backend selected by ``STORAGE_BACKEND``."""
    settings = settings or get_settings()
    if settings.STORAGE_BACKEND == "memory":
        return MemoryStorage()
    if settings.STORAGE_BACKEND == "json":
        return JsonFileStorage(settings.JSON_STORAGE_PATH)

    return SqliteStorage(create_db_engine(settings.DB_URL, settings.DB_ECHO))


__all__ = [
    'KeyValueStorage',
    'MemoryStorage',
    'JsonFileStorage',
    'SqliteStorage',
    'create_storage'
]
