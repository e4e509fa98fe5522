# src/frame_mover/core/progress.py
from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Phase(str, Enum):
    """Run phases, strictly ordered; a run never moves backwards."""

    scanning_source = "scanning_source"
    indexing_destination = "indexing_destination"
    moving = "moving"
    done = "done"


class ProgressEvent(BaseModel):
    """Snapshot of a run, emitted by the engine and never retained by it."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    phase: Phase
    current_file: str | None = None
    scanned: int = Field(0, ge=0)
    matched: int = Field(0, ge=0)
    moved: int = Field(0, ge=0)
    skipped_duplicates: int = Field(0, ge=0)
    errors: int = Field(0, ge=0)
    percent: float = Field(0.0, ge=0.0, le=100.0)


@runtime_checkable
class ProgressSink(Protocol):
    def __call__(self, event: ProgressEvent) -> None: ...


class NoOpSink:
    def __call__(self, event: ProgressEvent) -> None:
        pass
