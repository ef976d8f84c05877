"""
JSON file implementation of KeyValueStore.

Part of ALT-4: Inject persistence into the completion store

Keeps every key in one JSON object on local disk, the way the mobile
client keeps its preferences. Each write (or batch of writes) goes to a
unique temp file in the same directory, which then replaces the state
file atomically via os.replace.

Store instances are created per request, so the lock that serializes
read-modify-write cycles is shared per resolved file path.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from application.errors import ParseError, StorageError

logger = logging.getLogger(__name__)

# Resolved state file path -> lock shared by every store on that file
_PATH_LOCKS: Dict[Path, threading.RLock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = path.resolve()
    with _PATH_LOCKS_GUARD:
        lock = _PATH_LOCKS.get(key)
        if lock is None:
            lock = _PATH_LOCKS[key] = threading.RLock()
        return lock


class JsonFileKeyValueStore:
    """File-backed implementation of the KeyValueStore protocol."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize with the state file location.

        The file and its parent directory are created on first write.

        Args:
            path: Path of the JSON state file
        """
        self._path = Path(path)
        self._lock = _lock_for(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def lock(self) -> threading.RLock:
        """Process-wide lock for this state file."""
        return self._lock

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.error(f"Failed to read {self._path}: {e}")
            raise StorageError(f"Failed to read local storage: {e}") from e
        except ValueError as e:
            raise ParseError(f"Local storage file {self._path} is corrupt: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(f"Local storage file {self._path} must hold a JSON object")
        return data

    def _dump(self, data: Dict[str, Any]) -> None:
        tmp_path = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=str(self._path.parent),
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as tmp_file:
                tmp_path = tmp_file.name
                json.dump(data, tmp_file, indent=2, sort_keys=True)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())

            os.replace(tmp_path, self._path)
        except OSError as e:
            logger.error(f"Failed to write {self._path}: {e}")
            # Clean up temp file if replace failed
            try:
                if tmp_path is not None:
                    os.unlink(tmp_path)
            except OSError:
                pass
            raise StorageError(f"Failed to write local storage: {e}") from e

    def get(self, key: str) -> Optional[Any]:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, Any]) -> None:
        """Merge the values into the file and replace it in one step."""
        with self._lock:
            data = self._load()
            data.update(values)
            self._dump(data)
        logger.debug(f"Committed {len(values)} keys to {self._path}")
