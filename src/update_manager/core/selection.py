"""Submission-time checks on the project checkboxes."""

from __future__ import annotations

from typing import Any, Mapping

PROJECTS_FIELD = "projects"
DISABLED_PROJECTS_FIELD = "disabled_projects"
NO_SELECTION_MESSAGE = "You must select at least one project to update."

Selection = Mapping[str, Any]


def _checked(selection: Selection | None) -> list[str]:
    if not selection:
        return []
    return [name for name, value in selection.items() if value]


def selected_projects(
    enabled: Selection | None,
    disabled: Selection | None,
) -> list[str]:
    """Return the checked project names, enabled table first."""
    return _checked(enabled) + _checked(disabled)


def validate_selection(
    enabled: Selection | None,
    disabled: Selection | None,
) -> dict[str, str]:
    """Return field errors keyed by field name; empty when the selection is valid."""
    if not _checked(enabled) and not _checked(disabled):
        return {PROJECTS_FIELD: NO_SELECTION_MESSAGE}
    return {}
