"""
Tests for MoveJob / JobManager: the worker-thread wrapper around the engine.
"""
import threading

import pytest

from frame_mover.core.errors import Conflict, NotFound
from frame_mover.core.progress import Phase
from frame_mover.modules.suffix_move import jobs as jobs_mod
from frame_mover.modules.suffix_move.jobs import JobManager, MoveJob
from frame_mover.modules.suffix_move.schemas import MoveRequest, RunResult
from conftest import write

WAIT = 10.0


@pytest.fixture
def request_for(src_root, dest_root):
    def make(**overrides):
        data = dict(source_dir=src_root, dest_dir=dest_root, suffixes="5")
        data.update(overrides)
        return MoveRequest(**data)

    return make


@pytest.fixture
def blocking_engine(monkeypatch):
    """Replace the engine with one that waits until released."""
    release = threading.Event()
    entered = threading.Event()

    def fake_run_move(*args, cancel=None, progress=None, **kwargs):
        entered.set()
        release.wait(WAIT)
        return RunResult(errors=0)

    monkeypatch.setattr(jobs_mod, "run_move", fake_run_move)
    yield entered, release
    release.set()


class TestMoveJob:
    def test_runs_to_completion_on_worker_thread(self, request_for, src_root, dest_root):
        write(src_root / "a_5.jpg", b"a")
        seen = []
        job = MoveJob(request_for(), on_progress=seen.append).start()

        result = job.wait(WAIT)

        assert result == RunResult(scanned=1, matched=1, moved=1)
        assert (dest_root / "a_5.jpg").exists()
        assert seen[-1].phase == Phase.done
        status = job.snapshot()
        assert status.running is False
        assert status.result == result
        assert status.last_event == seen[-1]

    def test_start_twice_raises(self, request_for):
        job = MoveJob(request_for()).start()
        with pytest.raises(RuntimeError):
            job.start()
        job.wait(WAIT)

    def test_wait_before_start_returns_none(self, request_for):
        assert MoveJob(request_for()).wait(0) is None

    def test_cancel_sets_token(self, request_for):
        job = MoveJob(request_for())
        job.cancel()
        assert job.token.is_cancelled()
        assert job.snapshot().cancel_requested is True

    def test_cancelled_job_moves_nothing(self, request_for, src_root):
        write(src_root / "a_5.jpg", b"a")
        job = MoveJob(request_for())
        job.cancel()
        result = job.start().wait(WAIT)
        assert result.moved == 0
        assert (src_root / "a_5.jpg").exists()

    def test_snapshot_never_reports_finished_without_result(self, request_for):
        job = MoveJob(request_for())

        class FinishesWhenPolled:
            def is_alive(self):
                # The worker stores its result and exits right as we look.
                job._result = RunResult(moved=1)
                return False

        job._thread = FinishesWhenPolled()
        status = job.snapshot()
        assert status.running is False
        assert status.result == RunResult(moved=1)


class TestJobManager:
    def test_status_without_job_is_not_found(self):
        with pytest.raises(NotFound):
            JobManager().status()

    def test_cancel_without_job_is_not_found(self):
        with pytest.raises(NotFound):
            JobManager().cancel()

    def test_second_start_while_running_conflicts(self, request_for, blocking_engine):
        entered, release = blocking_engine
        manager = JobManager()
        manager.start(request_for())
        assert entered.wait(WAIT)

        with pytest.raises(Conflict):
            manager.start(request_for())

        release.set()
        manager.current().wait(WAIT)

    def test_new_job_after_finish_gets_fresh_token(self, request_for, blocking_engine):
        _entered, release = blocking_engine
        release.set()
        manager = JobManager()
        first = manager.start(request_for())
        manager.cancel()
        first.wait(WAIT)

        second = manager.start(request_for())
        second.wait(WAIT)
        assert second is not first
        assert not second.token.is_cancelled()
