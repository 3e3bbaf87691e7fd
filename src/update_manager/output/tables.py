"""Rich table builders for the update form."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from update_manager.models.batch import BatchJob
from update_manager.models.classification import MAJOR_UPDATE_WARNING_TITLE, ClassificationEntry
from update_manager.models.form import TABLE_HEADERS, FormTable
from update_manager.output.themes import bucket_row_style, styled_bucket


def _title_cell(entry: ClassificationEntry) -> Text:
    return Text(entry.title, style=Style(link=entry.link) if entry.link else "")


def _recommended_cell(entry: ClassificationEntry) -> Text:
    text = Text(entry.recommended_version)
    if entry.release.release_link:
        text.append(" (")
        text.append("Release notes", style=Style(link=entry.release.release_link))
        text.append(")")
    if entry.major_update_warning:
        text.append(f"\n{MAJOR_UPDATE_WARNING_TITLE}:", style="yellow")
        text.append(f" {entry.major_update_warning}", style="dim")
    if entry.compatibility_message:
        text.append(f"\n{entry.compatibility_message}", style="dim")
    return text


def form_table(table: FormTable) -> Table:
    t = Table(title=table.heading or None, caption=table.note or None, expand=True)
    if table.selectable:
        t.add_column("", width=3, no_wrap=True)
    name, installed, recommended = TABLE_HEADERS
    t.add_column(name, style="bold white")
    t.add_column(installed, style="dim", no_wrap=True)
    t.add_column(recommended, max_width=60)
    t.add_column("Type", no_wrap=True)

    for entry in table.rows:
        cells = [
            _title_cell(entry),
            escape(entry.installed_version),
            _recommended_cell(entry),
            styled_bucket(entry.bucket),
        ]
        if table.selectable:
            cells.insert(0, "[ ]")
        t.add_row(*cells, style=bucket_row_style(entry.bucket) or None)
    return t


def batch_job_panel(job: BatchJob) -> Panel:
    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Project", style="bold")
    table.add_column("Download", style="dim")

    for i, op in enumerate(job.operations, 1):
        project, url = (list(op.args) + [None, None])[:2]
        table.add_row(str(i), op.callback, str(project), url or "-")

    return Panel(
        table,
        title=f"[bold]{job.title}[/bold]",
        subtitle=f"[dim]{job.init_message}[/dim]",
        border_style="blue",
    )
