# src/frame_mover/modules/suffix_move/jobs.py
from __future__ import annotations

import threading
from collections.abc import Callable

from frame_mover.core.cancel import CancellationToken
from frame_mover.core.errors import Conflict, NotFound
from frame_mover.core.logging import get_logger
from frame_mover.core.progress import ProgressEvent

from .engine import run_move
from .schemas import JobStatus, MoveRequest, RunResult

__all__ = ["JobManager", "MoveJob"]

log = get_logger(__name__)


class MoveJob:
    """
    Runs one engine pass on a worker thread so the caller never blocks.

    The caller talks to the worker only through the cancellation token and
    the latest progress snapshot.
    """

    def __init__(
        self,
        request: MoveRequest,
        on_progress: Callable[[ProgressEvent], None] | None = None,
    ) -> None:
        self.request = request
        self.token = CancellationToken()
        self._on_progress = on_progress
        self._lock = threading.Lock()
        self._last_event: ProgressEvent | None = None
        self._result: RunResult | None = None
        self._thread = threading.Thread(
            target=self._run, name="frame-mover-worker", daemon=True
        )
        self._started = False

    # ---- worker side ---------------------------------------------------------
    def _record(self, event: ProgressEvent) -> None:
        with self._lock:
            self._last_event = event
        if self._on_progress is not None:
            self._on_progress(event)

    def _run(self) -> None:
        req = self.request
        log.info("Job started: %s -> %s", req.source_dir, req.dest_dir)
        result = run_move(
            req.source_dir,
            req.dest_dir,
            req.suffixes,
            dry_run=req.dry_run,
            verbose=req.verbose,
            cancel=self.token,
            progress=self._record,
        )
        with self._lock:
            self._result = result

    # ---- caller side ---------------------------------------------------------
    def start(self) -> MoveJob:
        if self._started:
            raise RuntimeError("Job already started")
        self._started = True
        self._thread.start()
        return self

    def cancel(self) -> None:
        self.token.cancel()

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def wait(self, timeout: float | None = None) -> RunResult | None:
        if self._started:
            self._thread.join(timeout)
        with self._lock:
            return self._result

    def snapshot(self) -> JobStatus:
        # Read liveness first: once the worker exits, its result is already set.
        running = self.running
        with self._lock:
            last, result = self._last_event, self._result
        return JobStatus(
            running=running,
            cancel_requested=self.token.is_cancelled(),
            dry_run=self.request.dry_run,
            last_event=last,
            result=result,
        )


class JobManager:
    """Holds at most one current job; a new one may start once it finishes."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._job: MoveJob | None = None

    def start(self, request: MoveRequest) -> MoveJob:
        with self._lock:
            if self._job is not None and self._job.running:
                raise Conflict("A move is already in progress")
            self._job = MoveJob(request).start()
            return self._job

    def current(self) -> MoveJob:
        with self._lock:
            if self._job is None:
                raise NotFound("No move has been started")
            return self._job

    def cancel(self) -> MoveJob:
        job = self.current()
        job.cancel()
        return job

    def status(self) -> JobStatus:
        return self.current().snapshot()
