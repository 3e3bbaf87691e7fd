"""Build, validate and submit the "available updates" form."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from update_manager.config.settings import Settings
from update_manager.core.classifier import classify_projects
from update_manager.core.download_job import build_download_job
from update_manager.core.selection import (
    DISABLED_PROJECTS_FIELD,
    PROJECTS_FIELD,
    selected_projects,
    validate_selection,
)
from update_manager.core.snapshot import SnapshotProvider
from update_manager.core.state_store import StateStore
from update_manager.exceptions import SelectionError
from update_manager.models import Group
from update_manager.models.batch import BatchJob
from update_manager.models.classification import ClassificationEntry
from update_manager.models.form import FormTable, UpdateForm

logger = logging.getLogger(__name__)

NO_BACKEND_MESSAGE = (
    "Your server does not support updating modules and themes from this "
    "interface. Instead, update modules and themes by uploading the new "
    "versions directly to the server."
)
DATA_UNAVAILABLE_MESSAGE = "There was a problem getting update information. Try again later."
NOTHING_TO_UPDATE_MESSAGE = "All of your projects are up to date."
SUBMIT_LABEL = "Download these updates"

MANUAL_TABLE = "manual_updates"
NOT_COMPATIBLE_TABLE = "not_compatible"


class UpdateManagerForm:
    """Lists pending updates and turns a selection into a download job."""

    def __init__(self, snapshots: SnapshotProvider, state: StateStore, settings: Settings):
        self.snapshots = snapshots
        self.state = state
        self.settings = settings

    def build(self) -> UpdateForm:
        form = UpdateForm(last_check=self._last_check())

        if not self._download_backend_available():
            form.message = NO_BACKEND_MESSAGE
            return form

        available = self.snapshots.get_available()
        if not available:
            form.message = DATA_UNAVAILABLE_MESSAGE
            return form

        result = classify_projects(available, core_major=self.settings.core_major)
        form.result = result
        if not result.has_updates:
            form.message = NOTHING_TO_UPDATE_MESSAGE
            return form

        enabled = _by_weight(result.group(Group.ENABLED))
        disabled = _by_weight(result.group(Group.DISABLED))
        manual = result.group(Group.MANUAL)
        not_compatible = result.group(Group.NOT_COMPATIBLE)

        if enabled:
            form.tables.append(FormTable(
                key=PROJECTS_FIELD,
                rows=enabled,
                selectable=True,
                heading="Enabled" if disabled else "",
            ))
        if disabled:
            form.tables.append(FormTable(
                key=DISABLED_PROJECTS_FIELD,
                rows=disabled,
                selectable=True,
                heading="Disabled",
            ))
        if result.has_selectable:
            form.submit_label = SUBMIT_LABEL
        if manual:
            form.tables.append(FormTable(
                key=MANUAL_TABLE,
                rows=manual,
                heading="Manual updates required",
                note="Automatic updates of core are not supported at this time.",
            ))
        if not_compatible:
            form.tables.append(FormTable(
                key=NOT_COMPATIBLE_TABLE,
                rows=not_compatible,
                heading="Not compatible",
            ))
        return form

    def validate(self, values: Mapping[str, Any]) -> dict[str, str]:
        return validate_selection(values.get(PROJECTS_FIELD), values.get(DISABLED_PROJECTS_FIELD))

    def submit(self, values: Mapping[str, Any], form: UpdateForm) -> BatchJob:
        """Validate the checkbox values and describe the download job.

        ``values`` maps each checkbox table key to ``{project: checked}``.
        """
        errors = self.validate(values)
        if errors:
            raise SelectionError(errors)
        selected = selected_projects(values.get(PROJECTS_FIELD), values.get(DISABLED_PROJECTS_FIELD))
        logger.debug("Queueing downloads for %s", ", ".join(selected))
        return build_download_job(selected, form.downloads)

    def _last_check(self) -> int:
        raw = self.state.get(self.settings.last_check_key)
        try:
            return int(raw or 0)
        except (TypeError, ValueError):
            logger.debug("Ignoring unreadable last check value %r", raw)
            return 0

    def _download_backend_available(self) -> bool:
        target = self.settings.download_dir
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.debug("Cannot create download directory %s", target, exc_info=True)
            return False
        return os.access(target, os.W_OK)


def _by_weight(rows: list[ClassificationEntry]) -> list[ClassificationEntry]:
    # sorted() is stable: rows of equal weight keep snapshot order.
    return sorted(rows, key=lambda e: e.weight)
