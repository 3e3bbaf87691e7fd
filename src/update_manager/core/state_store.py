"""Read-only access to persisted key/value state."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class StateStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        ...


class JsonStateStore:
    """Key/value state kept in a single JSON object file."""

    def __init__(self, path: Path):
        self.path = path
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data
        data: Any = {}
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError):
                logger.debug("Corrupt state file %s, ignoring", self.path, exc_info=True)
                data = {}
        self._data = data if isinstance(data, dict) else {}
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)
