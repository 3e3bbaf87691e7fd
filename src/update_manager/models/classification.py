"""Update classification result models."""

from __future__ import annotations

from dataclasses import dataclass, field

from update_manager.models import Bucket, Group
from update_manager.models.project import Release

MAJOR_UPDATE_WARNING_TITLE = "Major upgrade warning"
MAJOR_UPDATE_WARNING = (
    "This update is a major version update which means that it may not be "
    "backwards compatible with your currently running version. It is "
    "recommended that you read the release notes and proceed at your own risk."
)

BUCKET_ORDER: tuple[Bucket, ...] = (
    Bucket.SECURITY,
    Bucket.UNSUPPORTED,
    Bucket.RECOMMENDED,
    Bucket.MANUAL,
    Bucket.NOT_COMPATIBLE,
)


@dataclass
class ClassificationEntry:
    """One table row: a project that has an update worth showing."""

    name: str
    title: str
    installed_version: str
    release: Release
    bucket: Bucket
    group: Group
    link: str = ""
    release_notes_title: str = ""
    major_update: bool = False
    requires_checkbox: bool = True
    compatibility_message: str | None = None
    weight: int = 0

    @property
    def recommended_version(self) -> str:
        return self.release.version

    @property
    def major_update_warning(self) -> str | None:
        return MAJOR_UPDATE_WARNING if self.major_update else None


@dataclass
class ClassificationResult:
    entries: list[ClassificationEntry] = field(default_factory=list)
    downloads: dict[str, str] = field(default_factory=dict)

    @property
    def has_updates(self) -> bool:
        return bool(self.entries)

    @property
    def has_selectable(self) -> bool:
        return any(e.requires_checkbox for e in self.entries)

    @property
    def buckets(self) -> dict[Bucket, list[ClassificationEntry]]:
        """Non-empty buckets in display priority order."""
        grouped: dict[Bucket, list[ClassificationEntry]] = {}
        for bucket in BUCKET_ORDER:
            rows = [e for e in self.entries if e.bucket == bucket]
            if rows:
                grouped[bucket] = rows
        return grouped

    def group(self, group: Group) -> list[ClassificationEntry]:
        return [e for e in self.entries if e.group == group]

    def get(self, name: str) -> ClassificationEntry | None:
        for e in self.entries:
            if e.name == name:
                return e
        return None
