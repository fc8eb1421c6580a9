# data/data_manager.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional

from bill_maker import config

logger = logging.getLogger(__name__)


class MemoryStore:
    """In-process key-value store; nothing survives the session."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    One file per key under data_dir (<key>.json).
    Writes go through a .tmp file and replace(), so a crash mid-write
    never leaves a half-written store behind.
    """

    def __init__(self, data_dir: Path | str | None = None):
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            raw = path.read_text(encoding="utf-8").strip()
        except OSError:
            logger.warning("Could not read %s", path, exc_info=True)
            return None
        return raw or None

    def set(self, key: str, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)
