"""Key-value storage kept in a single JSON file."""
import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from grocerystore.domain.errors import StorageError
from grocerystore.utils.logger import get_logger
from .base import KeyValueStorage

logger = get_logger(__name__)


class JsonFileStorage(KeyValueStorage):
    """Stores all keys as one JSON object: ``{"key": "value", ...}``."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read_all(self) -> Dict[str, str]:
        # Missing, empty or corrupted file reads as an empty storage
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise StorageError(
                f"Cannot read storage file {self.path}",
                metadata={"path": str(self.path)}
            ) from e
        if text == "":
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Storage file is not valid JSON, ignoring it", path=str(self.path))
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file is not a JSON object, ignoring it", path=str(self.path))
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        # Write to a sibling temp file, then swap it in
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(
                f"Cannot write storage file {self.path}",
                metadata={"path": str(self.path)}
            ) from e

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)
