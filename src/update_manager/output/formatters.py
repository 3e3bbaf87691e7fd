"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
import time
from typing import Any

import yaml
from rich.console import Console

from update_manager.models.batch import BatchJob
from update_manager.models.classification import ClassificationEntry
from update_manager.models.form import FormTable, UpdateForm

console = Console()

_INTERVAL_UNITS: tuple[tuple[str, str, int], ...] = (
    ("year", "years", 31536000),
    ("month", "months", 2592000),
    ("week", "weeks", 604800),
    ("day", "days", 86400),
    ("hour", "hours", 3600),
    ("min", "min", 60),
    ("sec", "sec", 1),
)


def format_interval(seconds: int, granularity: int = 2) -> str:
    """Format a duration using its two largest units, e.g. "3 hours 5 min"."""
    parts: list[str] = []
    remaining = max(int(seconds), 0)
    for singular, plural, size in _INTERVAL_UNITS:
        if remaining >= size:
            count = remaining // size
            parts.append(f"{count} {singular if count == 1 else plural}")
            remaining %= size
            granularity -= 1
        elif parts:
            # Only adjacent units count toward the granularity.
            granularity -= 1
        if granularity <= 0:
            break
    return " ".join(parts) if parts else "0 sec"


def last_check_text(last_check: int, now: float | None = None) -> str:
    if not last_check:
        return "Last checked: never"
    now = time.time() if now is None else now
    return f"Last checked: {format_interval(int(now) - int(last_check))} ago"


def _entry_to_dict(e: ClassificationEntry, downloads: dict[str, str]) -> dict[str, Any]:
    return {
        "name": e.name,
        "title": e.title,
        "link": e.link,
        "installed_version": e.installed_version,
        "recommended_version": e.recommended_version,
        "release_link": e.release.release_link,
        "release_notes_title": e.release_notes_title,
        "bucket": e.bucket.value,
        "group": e.group.value,
        "requires_checkbox": e.requires_checkbox,
        "major_update": e.major_update,
        "compatibility_message": e.compatibility_message,
        "download": downloads.get(e.name),
    }


def _table_to_dict(t: FormTable, downloads: dict[str, str]) -> dict[str, Any]:
    return {
        "key": t.key,
        "heading": t.heading,
        "note": t.note,
        "selectable": t.selectable,
        "rows": [_entry_to_dict(e, downloads) for e in t.rows],
    }


def form_to_dict(form: UpdateForm) -> dict[str, Any]:
    return {
        "last_check": form.last_check,
        "message": form.message,
        "tables": [_table_to_dict(t, form.downloads) for t in form.tables],
        "submit": form.submit_label,
    }


def output_form(form: UpdateForm, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(form_to_dict(form), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(form_to_dict(form), default_flow_style=False, sort_keys=False), markup=False, soft_wrap=True)
    else:
        from update_manager.output.tables import form_table
        console.print(f"[dim]{last_check_text(form.last_check)}[/dim]")
        if form.message:
            console.print(form.message)
            return
        for table in form.tables:
            console.print(form_table(table))
        if form.submit_label:
            console.print(
                f"\n[cyan]{form.submit_label}:[/cyan] upm download <project> [<project> ...]"
            )


def output_batch_job(job: BatchJob, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(job.to_dict(), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(job.to_dict(), default_flow_style=False, sort_keys=False), markup=False, soft_wrap=True)
    else:
        from update_manager.output.tables import batch_job_panel
        console.print(batch_job_panel(job))
