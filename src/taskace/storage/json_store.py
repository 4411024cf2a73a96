# src/taskace/storage/json_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..errors import PersistenceWriteError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    Key-value store kept as one JSON object on disk.

    Writes go to a .tmp sibling and are moved into place with os.replace.
    A missing or corrupt file reads as empty (best-effort).
    """

    def __init__(self, path: str | Path = "store.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileKeyValueStore ready path=%s keys=%d", self._path, self.count_keys())

    def close(self) -> None:
        return

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except Exception:
            logger.exception("Failed to read key-value file %s; treating as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Key-value file %s is not an object; treating as empty.", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def count_keys(self) -> int:
        return len(self._read_all())

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp = self._path.with_suffix(".tmp")
        try:
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistenceWriteError(key, str(e)) from e
        logger.debug("kv set key=%s bytes=%d", key, len(value))
