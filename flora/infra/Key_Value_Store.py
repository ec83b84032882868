"""Device-local key-value storage (string keys, string values).

Two implementations share the same surface (get / set / remove):
  * JsonFileKeyValueStore: one JSON object on disk, rewritten atomically on
    every change and guarded by a lock so two writes never interleave.
  * MemoryKeyValueStore: dict-backed, for tests and ephemeral runs.
"""
import json
import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from threading import RLock
from typing import Dict, Optional

from flora.domain.errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Value stored under `key`, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete `key`; absent keys are ignored."""


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = RLock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise StorageWriteError(f"Value for '{key}' must be a string")
        with self._lock:
            self._data[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = RLock()

    # --- File helpers -------------------------------------------------------
    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageReadError(f"Cannot read {self.path.name}: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadError(f"Unexpected content in {self.path.name}")
        return data

    def _atomic_write(self, data: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".store_", suffix=".json")
        except OSError as e:
            raise StorageWriteError(f"Cannot write {self.path.name}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(data, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        except OSError as e:
            raise StorageWriteError(f"Cannot write {self.path.name}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.warning(f"Could not clean up temp file {tmp_path}")

    def _load_for_update(self) -> Dict[str, str]:
        try:
            return self._read_all()
        except StorageReadError as e:
            # Unreadable content can't be merged into; keep a copy before the rewrite replaces it
            backup = self.path.with_name(self.path.name + ".corrupt")
            try:
                shutil.copy2(self.path, backup)
            except OSError as copy_error:
                raise StorageWriteError(
                    f"Cannot back up unreadable {self.path.name}: {copy_error}") from e
            logger.error(f"{e}. Copied it to {backup.name}, starting from an empty store.")
            return {}

    # --- Public surface ---------------------------------------------------------
    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise StorageWriteError(f"Value for '{key}' must be a string")
        with self._lock:
            data = self._load_for_update()
            data[key] = value
            self._atomic_write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._load_for_update()
            if key not in data:
                return
            del data[key]
            self._atomic_write(data)
