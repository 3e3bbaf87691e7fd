"""Load the available-updates snapshot from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import yaml

from update_manager.models.project import Project

logger = logging.getLogger(__name__)

# Prefer the C-accelerated YAML loader when available.
_YamlLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)


class SnapshotProvider(Protocol):
    def get_available(self) -> dict[str, Project]:
        ...


def projects_from_dict(data: dict | None) -> dict[str, Project]:
    """Build projects from either ``{projects: {...}}`` or a bare name mapping."""
    if not data or not isinstance(data, dict):
        return {}
    raw = data.get("projects", data)
    if not isinstance(raw, dict):
        return {}
    projects: dict[str, Project] = {}
    for name, entry in raw.items():
        if not isinstance(entry, dict):
            logger.debug("Ignoring malformed snapshot entry %s", name)
            continue
        try:
            projects[str(name)] = Project.from_dict(str(name), entry)
        except (AttributeError, TypeError):
            logger.debug("Ignoring malformed snapshot entry %s", name, exc_info=True)
    return projects


class FileSnapshotProvider:
    """Reads a YAML (or JSON) snapshot file on every call."""

    def __init__(self, path: Path):
        self.path = path

    def get_available(self) -> dict[str, Project]:
        if not self.path.exists():
            logger.debug("Snapshot %s does not exist", self.path)
            return {}
        try:
            data = yaml.load(self.path.read_text(encoding="utf-8"), Loader=_YamlLoader)
        except Exception:
            logger.debug("Failed to parse snapshot at %s", self.path, exc_info=True)
            return {}
        return projects_from_dict(data)
