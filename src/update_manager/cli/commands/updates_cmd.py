"""upm updates - List available updates."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from update_manager.cli.options import (
    DownloadDirOption,
    OutputOption,
    SnapshotOption,
    StateOption,
    build_update_form,
)
from update_manager.output.formatters import output_form

app = typer.Typer()


@app.callback(invoke_without_command=True)
def updates(
    output: str = OutputOption,
    snapshot: Optional[Path] = SnapshotOption,
    state: Optional[Path] = StateOption,
    download_dir: Optional[Path] = DownloadDirOption,
) -> None:
    """Show projects with available updates, grouped the way they can be applied."""
    form_builder, _ = build_update_form(snapshot, state, download_dir)
    form = form_builder.build()
    output_form(form, output)
