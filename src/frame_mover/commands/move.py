# src/frame_mover/commands/move.py
"""
'move' command: move suffix-matched images from a source tree into a
destination tree, skipping content that is already there.

Missing arguments are prompted for. The engine runs on a worker thread while
this thread renders a Rich progress bar; Ctrl+C asks the worker to stop after
the current file. Exit code is 1 when the run reports any error.
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import typer
from rich.console import Console

from frame_mover.commands.common import (
    prompt_dest_dir,
    prompt_existing_dir,
    resolve_dry_run,
)
from frame_mover.core.config import get_settings
from frame_mover.core.logging import configure_logging
from frame_mover.core.rich_progress import RichPhaseProgressSink, make_phase_progress
from frame_mover.modules.suffix_move.jobs import MoveJob
from frame_mover.modules.suffix_move.schemas import MoveRequest, RunResult

__all__ = ["register"]

_POLL_SECONDS = 0.1


class _MoveRunner:
    def __init__(
        self,
        source: Path,
        dest: Path,
        suffixes: str,
        dry_run: bool,
        verbose: bool,
    ) -> None:
        self.source = source
        self.dest = dest
        self.suffixes = suffixes
        self.dry_run = dry_run
        self.verbose = verbose
        self.console = Console()

    def _drive(self, job: MoveJob, sink: RichPhaseProgressSink) -> RunResult | None:
        cancel_sent = False
        job.start()
        while job.running:
            try:
                job.wait(timeout=_POLL_SECONDS)
            except KeyboardInterrupt:
                if not cancel_sent:
                    job.cancel()
                    cancel_sent = True
                    self.console.print("Cancel requested; finishing current file…")
            last = job.snapshot().last_event
            if last is not None:
                sink(last)
        last = job.snapshot().last_event
        if last is not None:
            sink(last)
        return job.wait()

    def run(self) -> RunResult | None:
        req = MoveRequest(
            source_dir=self.source,
            dest_dir=self.dest,
            suffixes=self.suffixes,
            dry_run=self.dry_run,
            verbose=self.verbose,
        )
        job = MoveJob(req)
        progress, sink = make_phase_progress(self.console)

        t0 = time.perf_counter()
        with progress:
            result = self._drive(job, sink)
        elapsed = time.perf_counter() - t0

        if result is None:
            self.console.print("Run ended without a result.", style="bold red")
            return None

        action = "PLAN" if self.dry_run else "APPLY"
        verb = "would move" if self.dry_run else "moved"
        style = "bold red" if result.errors else "bold green"
        self.console.print(
            f"[{action}] matched={result.matched} {verb}={result.moved} "
            f"duplicates={result.skipped_duplicates} errors={result.errors} "
            f"in {elapsed:.2f}s",
            style=style,
            markup=False,
        )
        return result


def register(app: typer.Typer) -> None:
    """Attach the move command to the given Typer app."""

    @app.command(
        "move",
        help="Move images whose filename ends with one of the given numbers.",
    )
    def move_cmd(
        source: Path | None = typer.Argument(None, help="Source folder."),
        dest: Path | None = typer.Argument(
            None, help="Destination folder (created if missing)."
        ),
        suffixes: str | None = typer.Option(
            None,
            "--suffixes",
            "-s",
            help="Suffix numbers, comma/space/newline separated (e.g. '7612, 7608').",
        ),
        dry_run: bool | None = typer.Option(
            None,
            "--dry-run/--apply",
            help="Only classify files (default from FM_DRY_RUN_DEFAULT).",
        ),
        verbose: bool = typer.Option(
            False, "--verbose", "-v", help="Print per-file diagnostics to stderr."
        ),
    ) -> None:
        settings = get_settings()
        configure_logging(
            logging.DEBUG if verbose else settings.LOG_LEVEL,
            json=settings.LOG_JSON,
            stream=sys.stderr,
        )

        try:
            src_root = prompt_existing_dir(source, "source")
            dst_root = prompt_dest_dir(dest, "dest")
        except typer.BadParameter as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e

        if suffixes is None:
            suffixes = typer.prompt("suffixes (e.g. 7612, 7608)")

        result = _MoveRunner(
            source=src_root,
            dest=dst_root,
            suffixes=suffixes,
            dry_run=resolve_dry_run(dry_run, settings.DRY_RUN_DEFAULT),
            verbose=verbose,
        ).run()

        if result is None or result.errors > 0:
            raise typer.Exit(code=1)
