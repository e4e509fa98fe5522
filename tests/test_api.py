"""
Tests for the HTTP router: start / status / cancel of a background move.
"""
import time

import pytest
from fastapi.testclient import TestClient

from frame_mover.api.deps import get_job_manager
from frame_mover.api.main import create_app
from frame_mover.modules.suffix_move.jobs import JobManager
from frame_mover.modules.suffix_move.router import router
from conftest import write


@pytest.fixture
def manager():
    return JobManager()


@pytest.fixture
def client(manager):
    app = create_app(routers=[router])
    app.dependency_overrides[get_job_manager] = lambda: manager
    with TestClient(app) as c:
        yield c


def _wait_done(client, timeout=10.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        body = client.get("/api/move/status").json()
        if not body["running"] and body["result"] is not None:
            return body
        time.sleep(0.02)
    raise AssertionError("move did not finish in time")


class TestMoveApi:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_status_before_any_run_is_404(self, client):
        assert client.get("/api/move/status").status_code == 404

    def test_cancel_before_any_run_is_404(self, client):
        assert client.post("/api/move/cancel").status_code == 404

    def test_start_and_poll_until_done(self, client, src_root, dest_root):
        write(src_root / "a_IMG_5.jpg", b"a")
        write(src_root / "b_IMG_15.jpg", b"b")

        res = client.post(
            "/api/move",
            json={"source_dir": str(src_root), "dest_dir": str(dest_root), "suffixes": "5"},
        )
        assert res.status_code == 202

        body = _wait_done(client)
        assert body["result"] == {
            "scanned": 2,
            "matched": 2,
            "moved": 2,
            "skippedDuplicates": 0,
            "errors": 0,
        }
        assert body["lastEvent"]["phase"] == "done"
        assert body["lastEvent"]["percent"] == 100.0
        assert (dest_root / "a_IMG_5.jpg").exists()

    def test_dry_run_flag_is_honoured(self, client, src_root, dest_root):
        write(src_root / "a_IMG_5.jpg", b"a")
        client.post(
            "/api/move",
            json={"source_dir": str(src_root), "dest_dir": str(dest_root),
                  "suffixes": "5", "dry_run": True},
        )
        body = _wait_done(client)
        assert body["dryRun"] is True
        assert body["result"]["moved"] == 1
        assert (src_root / "a_IMG_5.jpg").exists()

    def test_source_must_be_a_directory(self, client, tmp_path, dest_root):
        res = client.post(
            "/api/move",
            json={"source_dir": str(tmp_path / "nope"), "dest_dir": str(dest_root),
                  "suffixes": "5"},
        )
        assert res.status_code == 400

    def test_destination_must_not_be_a_file(self, client, tmp_path, src_root):
        blocker = write(tmp_path / "blocker", b"x")
        res = client.post(
            "/api/move",
            json={"source_dir": str(src_root), "dest_dir": str(blocker), "suffixes": "5"},
        )
        assert res.status_code == 400

    def test_missing_field_is_rejected(self, client, src_root):
        res = client.post("/api/move", json={"source_dir": str(src_root)})
        assert res.status_code == 422

    def test_cancel_after_run_reports_flag(self, client, src_root, dest_root):
        client.post(
            "/api/move",
            json={"source_dir": str(src_root), "dest_dir": str(dest_root), "suffixes": "5"},
        )
        _wait_done(client)
        body = client.post("/api/move/cancel").json()
        assert body["cancelRequested"] is True
