# src/frame_mover/modules/suffix_move/engine.py
"""
Move engine: scan the source for suffix matches, index the destination by
content hash, then move each match unless its content is already there.

Phases run strictly in order (scanning_source -> indexing_destination ->
moving -> done) on the calling thread. Cancellation is cooperative: the
token is polled before indexing, and at the top of every indexing and moving
iteration. A cancelled run ends in `done` with whatever counters it reached;
that is not an error.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from frame_mover.core.cancel import CancelFlag, NeverCancelled
from frame_mover.core.config import Settings, get_settings
from frame_mover.core.errors import ConfigurationError, SetupError
from frame_mover.core.logging import get_logger
from frame_mover.core.paths import dest_path_for, display_path
from frame_mover.core.progress import NoOpSink, Phase, ProgressEvent, ProgressSink

from .hasher import hash_file
from .mover import Moved, SkippedDuplicate, move_file
from .scanner import ImageEntry, list_images_under, scan_source_for_suffixes
from .schemas import RunResult
from .suffixes import parse_suffixes

__all__ = ["MoveEngine", "run_move"]

log = get_logger(__name__)

# Percent bands per phase.
_SCAN_DONE = 5.0
_INDEX_DONE = 20.0
_COMPLETE = 100.0


@dataclass
class _Counters:
    scanned: int = 0
    matched: int = 0
    moved: int = 0
    skipped_duplicates: int = 0
    errors: int = 0


class MoveEngine:
    """One run over a source/destination pair. Not reusable across runs."""

    def __init__(
        self,
        source_dir: Path,
        dest_dir: Path,
        suffix_input: str,
        *,
        dry_run: bool = False,
        verbose: bool = False,
        cancel: CancelFlag | None = None,
        progress: ProgressSink | None = None,
        diagnostics: TextIO | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.source_dir = Path(source_dir)
        self.dest_dir = Path(dest_dir)
        self.suffix_input = suffix_input
        self.dry_run = dry_run
        self.verbose = verbose
        self.cancel = cancel or NeverCancelled()
        self.progress = progress or NoOpSink()
        self.diagnostics = diagnostics
        self.settings = settings or get_settings()
        self.counters = _Counters()
        self.index: set[str] = set()

    # ---- public API ----------------------------------------------------------
    def run(self) -> RunResult:
        try:
            suffixes = self._parse_suffixes()
            self._prepare_destination()
            self._emit(Phase.scanning_source, 0.0)
            candidates = self._scan(suffixes)
        except (ConfigurationError, SetupError) as err:
            log.error("Run aborted: %s", err)
            self._diag(str(err))
            self.counters.errors += 1
            return self._finish()

        # Fixed for the rest of the run.
        self.counters.scanned = self.counters.matched = len(candidates)
        log.info("Matched %d file(s) under %s", len(candidates), self.source_dir)
        self._emit(Phase.indexing_destination, _SCAN_DONE)

        if self._cancelled():
            return self._finish()

        self._build_index()
        if self._cancelled():
            return self._finish()

        self._emit(Phase.moving, _INDEX_DONE)
        self._move_all(candidates)
        return self._finish()

    # ---- phases --------------------------------------------------------------
    def _parse_suffixes(self) -> frozenset[int]:
        suffixes = parse_suffixes(self.suffix_input)
        if not suffixes:
            raise ConfigurationError(
                f"No valid suffix numbers in input: {self.suffix_input!r}"
            )
        return suffixes

    def _prepare_destination(self) -> None:
        try:
            self.dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SetupError(f"Destination create error: {e}") from e

    def _scan(self, suffixes: frozenset[int]) -> list[ImageEntry]:
        log.info("Scanning %s for suffixes %s", self.source_dir, sorted(suffixes))
        try:
            return scan_source_for_suffixes(self.source_dir, suffixes)
        except OSError as e:
            raise SetupError(f"Scan error: {e}") from e

    def _build_index(self) -> None:
        try:
            existing = list_images_under(self.dest_dir)
        except OSError as e:
            # Best effort: dedup against whatever we could enumerate (nothing).
            log.warning("Destination list error: %s", e)
            self._diag(f"Destination list error: {e}")
            existing = []

        total = len(existing)
        every = self.settings.INDEX_PROGRESS_EVERY
        log.info("Indexing %d existing image(s) under %s", total, self.dest_dir)
        for i, path in enumerate(existing):
            if self._cancelled():
                break
            if i % every == 0 or i == total - 1:
                pct = _SCAN_DONE + (i / max(total, 1)) * (_INDEX_DONE - _SCAN_DONE)
                self._emit(
                    Phase.indexing_destination, pct, current_file=display_path(path)
                )
            try:
                self.index.add(hash_file(path, self.settings.HASH_CHUNK_SIZE))
            except OSError as e:
                log.debug("Not indexed (%s): %s", e, path)

    def _move_all(self, candidates: list[ImageEntry]) -> None:
        total = max(len(candidates), 1)
        for i, entry in enumerate(candidates):
            if self._cancelled():
                break
            src = entry.path
            dest = dest_path_for(self.source_dir, self.dest_dir, src)
            pct = _INDEX_DONE + (i / total) * (_COMPLETE - _INDEX_DONE)
            self._emit(Phase.moving, pct, current_file=display_path(src))

            if self.dry_run:
                self._classify(src, dest)
            else:
                self._move_one(src, dest)

    # ---- per file ------------------------------------------------------------
    def _classify(self, src: Path, dest: Path) -> None:
        """Dry run: index lookup only, no collision simulation, no mutation."""
        try:
            digest = hash_file(src, self.settings.HASH_CHUNK_SIZE)
        except OSError as e:
            self.counters.errors += 1
            log.warning("Hash error %s: %s", src, e)
            self._diag(f"Hash error {src}: {e}")
            return

        if digest in self.index:
            self.counters.skipped_duplicates += 1
            self._diag(f"[dry-run] duplicate, would skip {src}")
        else:
            self.counters.moved += 1
            self._diag(f"[dry-run] would move {src} -> {dest}")

    def _move_one(self, src: Path, dest: Path) -> None:
        chunk = self.settings.HASH_CHUNK_SIZE
        try:
            outcome = move_file(src, dest, self.index, chunk)
        except OSError as e:
            self.counters.errors += 1
            log.warning("Move error %s -> %s: %s", src, dest, e)
            self._diag(f"Move error {src} -> {dest}: {e}")
            return

        if isinstance(outcome, Moved):
            self.counters.moved += 1
            try:
                self.index.add(hash_file(outcome.path, chunk))
            except OSError as e:
                # The move itself succeeded; only later dedup is weakened.
                log.debug("Could not re-hash moved file %s: %s", outcome.path, e)
        elif isinstance(outcome, SkippedDuplicate):
            self.counters.skipped_duplicates += 1

    # ---- helpers -------------------------------------------------------------
    def _cancelled(self) -> bool:
        if self.cancel.is_cancelled():
            log.info("Cancellation requested; finishing early")
            return True
        return False

    def _event(
        self, phase: Phase, percent: float, current_file: str | None = None
    ) -> ProgressEvent:
        c = self.counters
        return ProgressEvent(
            phase=phase,
            current_file=current_file,
            scanned=c.scanned,
            matched=c.matched,
            moved=c.moved,
            skipped_duplicates=c.skipped_duplicates,
            errors=c.errors,
            percent=min(max(percent, 0.0), _COMPLETE),
        )

    def _emit(
        self, phase: Phase, percent: float, current_file: str | None = None
    ) -> None:
        self.progress(self._event(phase, percent, current_file))

    def _finish(self) -> RunResult:
        final = self._event(Phase.done, _COMPLETE)
        self.progress(final)
        result = RunResult.from_event(final)
        log.info(
            "Done: matched=%d moved=%d skipped_duplicates=%d errors=%d%s",
            result.matched,
            result.moved,
            result.skipped_duplicates,
            result.errors,
            " (dry run)" if self.dry_run else "",
        )
        return result

    def _diag(self, message: str) -> None:
        if not self.verbose:
            return
        stream = self.diagnostics or sys.stderr
        print(message, file=stream)


def run_move(
    source_dir: Path,
    dest_dir: Path,
    suffix_input: str,
    *,
    dry_run: bool = False,
    verbose: bool = False,
    cancel: CancelFlag | None = None,
    progress: ProgressSink | None = None,
    diagnostics: TextIO | None = None,
) -> RunResult:
    """Run one move pass; see `MoveEngine`."""
    return MoveEngine(
        source_dir,
        dest_dir,
        suffix_input,
        dry_run=dry_run,
        verbose=verbose,
        cancel=cancel,
        progress=progress,
        diagnostics=diagnostics,
    ).run()
