"""upm download - Queue downloads for selected updates."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
import yaml

from update_manager.cli.options import (
    DownloadDirOption,
    OutputOption,
    SnapshotOption,
    StateOption,
    build_update_form,
)
from update_manager.exceptions import SelectionError
from update_manager.output.formatters import output_batch_job

app = typer.Typer()


@app.callback(invoke_without_command=True)
def download(
    project: List[str] = typer.Option([], "--project", "-p", help="Project to update (repeatable)"),
    select_all: bool = typer.Option(False, "--all", help="Select every project that can be downloaded"),
    output: str = OutputOption,
    job_file: Optional[Path] = typer.Option(None, "--job-file", help="Also write the batch job as YAML"),
    snapshot: Optional[Path] = SnapshotOption,
    state: Optional[Path] = StateOption,
    download_dir: Optional[Path] = DownloadDirOption,
) -> None:
    """Validate the selection and print the download batch job."""
    form_builder, _ = build_update_form(snapshot, state, download_dir)
    form = form_builder.build()

    selectable = [t for t in form.tables if t.selectable]
    if not selectable:
        typer.echo(form.message or "No updates can be downloaded automatically.", err=True)
        raise typer.Exit(code=1)

    wanted = set(project)
    values: dict[str, dict[str, str | int]] = {}
    known: set[str] = set()
    for table in selectable:
        values[table.key] = {
            e.name: (e.name if select_all or e.name in wanted else 0) for e in table.rows
        }
        known.update(e.name for e in table.rows)

    for name in project:
        if name not in known:
            typer.echo(f"Project '{name}' has no downloadable update, ignoring.", err=True)

    try:
        job = form_builder.submit(values, form)
    except SelectionError as e:
        for message in e.errors.values():
            typer.echo(message, err=True)
        raise typer.Exit(code=1)

    if job_file:
        job_file.write_text(yaml.dump(job.to_dict(), default_flow_style=False, sort_keys=False), encoding="utf-8")

    output_batch_job(job, output)
