# src/taskpad/storage/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when the durable slot could not be written."""


class JsonFileSlotStore:
    """
    Key-value slots kept in a single JSON object file.

    Writes are atomic from the caller's perspective:
    - serialize the whole mapping to <path>.tmp
    - os.replace() it over the real file

    Reads are forgiving: a missing, unreadable or non-object file is treated as empty.
    """

    def __init__(self, path: str | Path = ".local/taskpad/state.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileSlotStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Slot file %s is unreadable; treating as empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Slot file %s does not hold a JSON object; treating as empty.", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Failed to write {self._path}: {e}") from e

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Slot written key=%s bytes=%d", key, len(value))

    def delete(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is None:
            return
        self._write_all(data)


class MemorySlotStore:
    """Dict-backed slot for ephemeral sessions (nothing survives the process)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
