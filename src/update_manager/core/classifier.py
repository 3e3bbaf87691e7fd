"""Sort projects with pending updates into the tables an administrator sees."""

from __future__ import annotations

import logging
from typing import Mapping

from update_manager.models import Bucket, Group, ProjectKind, StatusCode
from update_manager.models.classification import ClassificationEntry, ClassificationResult
from update_manager.models.project import Project
from update_manager.utils.version_compare import normalize_major

logger = logging.getLogger(__name__)

SECURITY_SUFFIX = "(Security update)"
UNSUPPORTED_SUFFIX = "(Unsupported)"
THEME_SUFFIX = "(Theme)"

# status -> (bucket, title suffix, row weight)
_STATUS_BUCKETS: dict[StatusCode, tuple[Bucket, str, int]] = {
    StatusCode.NOT_SECURE: (Bucket.SECURITY, SECURITY_SUFFIX, -2),
    StatusCode.REVOKED: (Bucket.SECURITY, SECURITY_SUFFIX, -2),
    StatusCode.NOT_SUPPORTED: (Bucket.UNSUPPORTED, UNSUPPORTED_SUFFIX, -1),
    StatusCode.UNKNOWN: (Bucket.RECOMMENDED, "", 0),
    StatusCode.NOT_FETCHED: (Bucket.RECOMMENDED, "", 0),
    StatusCode.NOT_CHECKED: (Bucket.RECOMMENDED, "", 0),
    StatusCode.NOT_CURRENT: (Bucket.RECOMMENDED, "", 0),
}

_KIND_GROUPS: dict[ProjectKind, Group] = {
    ProjectKind.MODULE: Group.ENABLED,
    ProjectKind.THEME: Group.ENABLED,
    ProjectKind.MODULE_DISABLED: Group.DISABLED,
    ProjectKind.THEME_DISABLED: Group.DISABLED,
}


def display_title(name: str, project: Project) -> str:
    """Pick the best available name for a project row."""
    if project.title:
        title = project.title
    elif project.info_name:
        title = project.info_name
    else:
        title = name
    if project.kind is not None and project.kind.is_theme:
        title = f"{title} {THEME_SUFFIX}"
    return title


def classify_projects(
    projects: Mapping[str, Project],
    core_major: str | int | None = None,
) -> ClassificationResult:
    """Classify every project that is not up to date.

    Rows keep the iteration order of ``projects``. Projects without a usable
    recommendation or with an unrecognized status are left out. ``core_major``
    stands in for the installed major version of projects that report none.
    """
    result = ClassificationResult()
    fallback_major = normalize_major(core_major)

    for name, project in projects.items():
        if project.status == StatusCode.CURRENT:
            continue

        title = display_title(name, project)

        release = project.recommended_release
        if release is None:
            # Nothing we can reliably suggest upgrading to.
            if project.recommended:
                logger.debug(
                    "Recommended release %s missing for %s, skipping",
                    project.recommended, name,
                )
            continue

        installed_major = project.installed_major or fallback_major
        major_update = release.major_version != installed_major

        mapped = _STATUS_BUCKETS.get(project.status) if project.status is not None else None
        if mapped is None:
            logger.debug("Unrecognized status %r for %s, skipping", project.raw_status, name)
            continue
        bucket, suffix, weight = mapped
        if suffix:
            title = f"{title} {suffix}"

        entry = ClassificationEntry(
            name=name,
            title=title,
            installed_version=project.existing_version,
            release=release,
            bucket=bucket,
            group=Group.ENABLED,
            link=project.link if project.title else "",
            release_notes_title=f"Release notes for {project.title}",
            major_update=major_update,
            weight=weight,
        )

        if project.kind == ProjectKind.CORE:
            _remove_checkbox(entry, Bucket.MANUAL, Group.MANUAL)
        elif not release.is_compatible:
            _remove_checkbox(entry, Bucket.NOT_COMPATIBLE, Group.NOT_COMPATIBLE)
            if release.core_compatibility_message:
                entry.compatibility_message = release.core_compatibility_message
        else:
            group = _KIND_GROUPS.get(project.kind) if project.kind is not None else None
            if group is None:
                logger.debug("Unrecognized project type %r for %s, skipping", project.raw_kind, name)
                continue
            entry.group = group
            result.downloads[name] = release.download_link

        result.entries.append(entry)

    return result


def _remove_checkbox(entry: ClassificationEntry, bucket: Bucket, group: Group) -> None:
    """Move a row into one of the plain tables that offer no checkbox."""
    entry.bucket = bucket
    entry.group = group
    entry.requires_checkbox = False
    entry.weight = 0
