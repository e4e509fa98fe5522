# src/frame_mover/cli.py
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import typer

from frame_mover.commands.move import register as register_move
from frame_mover.core.config import get_settings

app = typer.Typer(help="FrameMover CLI")

register_move(app)


@app.command("version", help="Print the installed version.")
def version_cmd() -> None:
    try:
        typer.echo(version("frame-mover"))
    except PackageNotFoundError:
        # Source checkout, not installed
        typer.echo(get_settings().VERSION)


if __name__ == "__main__":
    app()
