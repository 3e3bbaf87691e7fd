"""Application configuration and defaults."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path


def _default_home_dir() -> Path:
    """Return the data directory for the current platform.

    UPDATE_MANAGER_HOME wins over the platform default.
    """
    home = os.environ.get("UPDATE_MANAGER_HOME", "")
    if home:
        return Path(home)
    system = platform.system()
    if system == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "update-manager"
        return Path.home() / "AppData" / "Roaming" / "update-manager"
    # Linux / macOS
    xdg = os.environ.get("XDG_DATA_HOME", "")
    if xdg:
        return Path(xdg) / "update-manager"
    return Path.home() / ".local" / "share" / "update-manager"


def _env_path(var: str) -> Path | None:
    value = os.environ.get(var, "")
    return Path(value) if value else None


@dataclass
class Settings:
    home_dir: Path = field(default_factory=_default_home_dir)
    snapshot_override: Path | None = field(default_factory=lambda: _env_path("UPDATE_MANAGER_SNAPSHOT"))
    state_override: Path | None = field(default_factory=lambda: _env_path("UPDATE_MANAGER_STATE"))
    download_override: Path | None = field(default_factory=lambda: _env_path("UPDATE_MANAGER_DOWNLOAD_DIR"))
    core_major: str | None = field(default_factory=lambda: os.environ.get("UPDATE_MANAGER_CORE_MAJOR") or None)
    default_output: str = "table"
    last_check_key: str = "update.last_check"

    @property
    def snapshot_file(self) -> Path:
        return self.snapshot_override or self.home_dir / "available.yaml"

    @property
    def state_file(self) -> Path:
        return self.state_override or self.home_dir / "state.json"

    @property
    def download_dir(self) -> Path:
        return self.download_override or self.home_dir / "downloads"


# Global singleton
settings = Settings()
