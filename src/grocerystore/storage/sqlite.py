"""Key-value storage backed by a SQL database through SQLAlchemy."""
from typing import Optional
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from grocerystore.db.session import get_session_factory, init_db, session_scope
from grocerystore.domain.errors import StorageError
from grocerystore.models import StorageEntry
from .base import KeyValueStorage


class SqliteStorage(KeyValueStorage):
    """Each key is one row of the ``local_storage`` table."""

    def __init__(self, engine: Engine):
        self.engine = engine
        init_db(engine)
        self._factory = get_session_factory(engine)

    def get_item(self, key: str) -> Optional[str]:
        try:
            with session_scope(self._factory) as session:
                entry = session.get(StorageEntry, key)
                return entry.value if entry else None
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot read key '{key}'", metadata={"key": key}) from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with session_scope(self._factory) as session:
                entry = session.get(StorageEntry, key)
                if entry is None:
                    session.add(StorageEntry(key=key, value=value))
                else:
                    entry.value = value
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot write key '{key}'", metadata={"key": key}) from e

    def remove_item(self, key: str) -> None:
        try:
            with session_scope(self._factory) as session:
                entry = session.get(StorageEntry, key)
                if entry is not None:
                    session.delete(entry)
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot remove key '{key}'", metadata={"key": key}) from e
