"""Shared CLI options."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import typer

from update_manager.config.settings import Settings, settings
from update_manager.core.snapshot import FileSnapshotProvider
from update_manager.core.state_store import JsonStateStore
from update_manager.core.update_form import UpdateManagerForm

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
SnapshotOption = typer.Option(None, "--snapshot", help="Available-updates snapshot file (YAML or JSON)")
StateOption = typer.Option(None, "--state", help="State file holding the last check time")
DownloadDirOption = typer.Option(None, "--download-dir", help="Directory downloads are written to")


def build_update_form(
    snapshot: Path | None = None,
    state: Path | None = None,
    download_dir: Path | None = None,
) -> tuple[UpdateManagerForm, Settings]:
    """Wire the update form to file-backed collaborators, honoring CLI overrides."""
    cfg = replace(
        settings,
        snapshot_override=snapshot or settings.snapshot_override,
        state_override=state or settings.state_override,
        download_override=download_dir or settings.download_override,
    )
    form = UpdateManagerForm(
        FileSnapshotProvider(cfg.snapshot_file),
        JsonStateStore(cfg.state_file),
        cfg,
    )
    return form, cfg
