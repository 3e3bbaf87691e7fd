"""Project and release models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from update_manager.models import ProjectKind, StatusCode
from update_manager.utils.version_compare import major_version, normalize_major


@dataclass
class Release:
    version: str = ""
    release_link: str = ""
    download_link: str = ""
    core_compatible: bool | None = None
    core_compatibility_message: str = ""

    @property
    def major_version(self) -> str:
        return major_version(self.version)

    @property
    def is_compatible(self) -> bool:
        # An absent flag means compatibility could not be determined.
        return self.core_compatible is None or bool(self.core_compatible)

    @classmethod
    def from_dict(cls, d: dict, version: str = "") -> Release:
        if not d:
            return cls(version=version)
        return cls(
            version=str(d.get("version", version) or version),
            release_link=d.get("release_link", ""),
            download_link=d.get("download_link", ""),
            core_compatible=d.get("core_compatible"),
            core_compatibility_message=d.get("core_compatibility_message", "") or "",
        )


@dataclass
class Project:
    name: str = ""
    title: str = ""
    link: str = ""
    info_name: str = ""
    kind: ProjectKind | None = None
    raw_kind: Any = None
    existing_version: str = ""
    existing_major: str = ""
    status: StatusCode | None = None
    raw_status: Any = None
    releases: dict[str, Release] = field(default_factory=dict)
    recommended: str = ""

    @property
    def recommended_release(self) -> Release | None:
        if not self.recommended:
            return None
        return self.releases.get(self.recommended)

    @property
    def installed_major(self) -> str:
        if self.existing_major:
            return normalize_major(self.existing_major)
        return major_version(self.existing_version)

    @classmethod
    def from_dict(cls, name: str, d: dict) -> Project:
        if not d:
            return cls(name=name)
        releases_raw = d.get("releases") or {}
        info = d.get("info") or {}
        existing_major = d.get("existing_major", "")
        recommended = d.get("recommended", "")
        return cls(
            name=name,
            title=d.get("title", "") or "",
            link=d.get("link", "") or "",
            info_name=info.get("name", "") or "",
            kind=ProjectKind.from_str(d.get("project_type", "")),
            raw_kind=d.get("project_type"),
            existing_version=str(d.get("existing_version", "") or ""),
            existing_major="" if existing_major in (None, "") else str(existing_major),
            status=StatusCode.from_value(d.get("status")),
            raw_status=d.get("status"),
            releases={
                str(key): Release.from_dict(rel, version=str(key))
                for key, rel in releases_raw.items()
            },
            recommended="" if recommended in (None, "") else str(recommended),
        )
