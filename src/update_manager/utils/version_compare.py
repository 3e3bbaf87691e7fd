"""Version string helpers."""

from __future__ import annotations

import re

from packaging.version import InvalidVersion, Version

# Contributed projects may carry a core compatibility prefix, e.g. "8.x-2.1".
_CORE_PREFIX = re.compile(r"^\d+\.x-(?=\d)")


def parse_version(v: str) -> Version | None:
    """Parse a version string, returning None on failure."""
    try:
        return Version(v)
    except InvalidVersion:
        # Try stripping leading 'v'
        if v.startswith("v"):
            try:
                return Version(v[1:])
            except InvalidVersion:
                pass
    return None


def strip_core_prefix(v: str) -> str:
    return _CORE_PREFIX.sub("", v.strip())


def major_version(v: str) -> str:
    """Return the major version of a release string as a normalized string.

    Handles "2.1.0", "8.x-2.1", "3.x-dev" and "v1.2". Returns "" when no
    major version can be found.
    """
    if not v:
        return ""
    stripped = strip_core_prefix(str(v))
    parsed = parse_version(stripped)
    if parsed is not None:
        return str(parsed.major)
    match = re.match(r"^v?(\d+)", stripped)
    if match:
        return str(int(match.group(1)))
    return ""


def normalize_major(value: object) -> str:
    """Normalize an installed major given as int or string ("01" -> "1")."""
    if value is None:
        return ""
    s = str(value).strip()
    if s.isdigit():
        return str(int(s))
    return s
