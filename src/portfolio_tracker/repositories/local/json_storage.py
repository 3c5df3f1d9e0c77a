"""JSON-file implementation of ClientStorage."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    Client storage mirrored to a single JSON object on disk.

    The whole file is rewritten on every mutation (last writer wins). An
    unreadable file is treated as empty storage.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._items: dict[str, str] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if absent."""
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store a value and flush to disk."""
        self._items[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        """Remove a key and flush to disk if it was present."""
        if self._items.pop(key, None) is not None:
            self._flush()

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable client state at %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring client state at %s: not a JSON object", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Write to a sibling temp file, then swap it in
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._items, f, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
