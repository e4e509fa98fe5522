# src/frame_mover/core/rich_progress.py
from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

from frame_mover.core.progress import Phase, ProgressEvent

_DETAIL_WIDTH = 60


def shorten(label: str, width: int = _DETAIL_WIDTH) -> str:
    """Keep the tail of long paths: the filename is the useful part."""
    if len(label) <= width:
        return label
    return "..." + label[-(width - 3) :]


class RichPhaseProgressSink:
    """Renders the engine's progress events as a single Rich task."""

    def __init__(self, progress: Progress) -> None:
        self.progress = progress
        self.task_id: int | None = None
        self.labels = {
            Phase.scanning_source: "Scanning",
            Phase.indexing_destination: "Indexing",
            Phase.moving: "Moving",
            Phase.done: "Done",
        }

    def __call__(self, event: ProgressEvent) -> None:
        label = self.labels.get(event.phase, str(event.phase.value).title())
        counters = (
            f"moved: {event.moved} dup: {event.skipped_duplicates} "
            f"err: {event.errors}"
        )
        detail = counters
        if event.current_file:
            detail = f"{counters} | {shorten(event.current_file)}"

        if self.task_id is None:
            self.task_id = self.progress.add_task(label, total=100.0, detail=detail)
        self.progress.update(
            self.task_id, description=label, completed=event.percent, detail=detail
        )


def make_phase_progress(console: Console) -> tuple[Progress, RichPhaseProgressSink]:
    """Standardized Rich progress layout + sink instance."""
    progress = Progress(
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TextColumn("•"),
        TimeRemainingColumn(),
        TextColumn("• {task.fields[detail]}"),
        console=console,
    )
    return progress, RichPhaseProgressSink(progress)
