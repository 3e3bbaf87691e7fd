"""Data models for Update Manager."""

from __future__ import annotations

import enum


class StatusCode(enum.Enum):
    CURRENT = "current"
    NOT_SECURE = "not-secure"
    REVOKED = "revoked"
    NOT_SUPPORTED = "not-supported"
    UNKNOWN = "unknown"
    NOT_FETCHED = "not-fetched"
    NOT_CHECKED = "not-checked"
    NOT_CURRENT = "not-current"

    @classmethod
    def from_value(cls, value: object) -> StatusCode | None:
        """Parse a status given as its name or as the numeric update constant.

        Returns None for anything unrecognized (e.g. -4, "fetch pending").
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return _NUMERIC_STATUS.get(value)
        if isinstance(value, str):
            s = value.strip().lower()
            for member in cls:
                if member.value == s:
                    return member
            try:
                return _NUMERIC_STATUS.get(int(s))
            except ValueError:
                return None
        return None


_NUMERIC_STATUS: dict[int, StatusCode] = {
    1: StatusCode.NOT_SECURE,
    2: StatusCode.REVOKED,
    3: StatusCode.NOT_SUPPORTED,
    4: StatusCode.NOT_CURRENT,
    5: StatusCode.CURRENT,
    -1: StatusCode.NOT_CHECKED,
    -2: StatusCode.UNKNOWN,
    -3: StatusCode.NOT_FETCHED,
}


class ProjectKind(enum.Enum):
    MODULE = "module"
    THEME = "theme"
    MODULE_DISABLED = "module-disabled"
    THEME_DISABLED = "theme-disabled"
    CORE = "core"

    @classmethod
    def from_str(cls, s: str) -> ProjectKind | None:
        for member in cls:
            if member.value == s:
                return member
        return None

    @property
    def is_theme(self) -> bool:
        return self in (ProjectKind.THEME, ProjectKind.THEME_DISABLED)


class Bucket(enum.Enum):
    SECURITY = "security"
    UNSUPPORTED = "unsupported"
    RECOMMENDED = "recommended"
    MANUAL = "manual"
    NOT_COMPATIBLE = "not-compatible"


class Group(enum.Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"
    MANUAL = "manual"
    NOT_COMPATIBLE = "not-compatible"
