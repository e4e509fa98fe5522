# src/frame_mover/modules/suffix_move/schemas.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from frame_mover.core.progress import ProgressEvent


class MoveRequest(BaseModel):
    source_dir: Path = Field(
        ...,
        description="Root folder scanned recursively for matching images.",
        examples=["/data/camera"],
    )
    dest_dir: Path = Field(
        ...,
        description="Destination root; the source's folder structure is mirrored under it.",
        examples=["/data/selected"],
    )
    suffixes: str = Field(
        ...,
        description=(
            "Suffix numbers separated by commas, spaces or newlines. A file is "
            "selected when its name (without extension) ends with one of them."
        ),
        examples=["7612, 7608 7605"],
    )
    dry_run: bool = Field(
        False,
        description="If true, files are only classified (would move / duplicate); nothing is changed.",
        examples=[False],
    )
    verbose: bool = Field(
        False,
        description="Write diagnostics for setup, scan and per-file errors to stderr.",
        examples=[False],
    )


class RunResult(BaseModel):
    """Final counters of one run. A nonzero `errors` is the only failure signal."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    scanned: int = Field(0, ge=0)
    matched: int = Field(0, ge=0)
    moved: int = Field(0, ge=0)
    skipped_duplicates: int = Field(0, ge=0)
    errors: int = Field(0, ge=0)

    @classmethod
    def from_event(cls, event: ProgressEvent) -> RunResult:
        return cls(
            scanned=event.scanned,
            matched=event.matched,
            moved=event.moved,
            skipped_duplicates=event.skipped_duplicates,
            errors=event.errors,
        )


class JobStatus(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    running: bool = Field(..., examples=[True])
    cancel_requested: bool = Field(False, examples=[False])
    dry_run: bool = Field(False, examples=[False])
    last_event: Optional[ProgressEvent] = Field(  # noqa: UP045
        None, description="Most recent progress snapshot, if any was emitted."
    )
    result: Optional[RunResult] = Field(  # noqa: UP045
        None, description="Final counters; present once the run reached 'done'."
    )
