"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="upm",
    help="Update Manager - Review available project updates and queue downloads.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from update_manager.cli.commands.updates_cmd import app as updates_app
    from update_manager.cli.commands.download_cmd import app as download_app

    app.add_typer(updates_app, name="updates", help="List available updates")
    app.add_typer(download_app, name="download", help="Queue downloads for selected updates")


_register_commands()


def main() -> None:
    app()
