"""
Shared fixtures: isolated source/destination trees under pytest's tmp_path.
"""
import os
from pathlib import Path

import pytest

from frame_mover.core.config import get_settings

running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0


def write(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Settings are cached process-wide; isolate tests from the host env."""
    for key in list(os.environ):
        if key.startswith("FM_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def src_root(tmp_path) -> Path:
    root = tmp_path / "source"
    root.mkdir()
    return root


@pytest.fixture
def dest_root(tmp_path) -> Path:
    # Deliberately not created: the engine creates it.
    return tmp_path / "dest"


@pytest.fixture
def camera_tree(src_root) -> dict[str, Path]:
    """
    A source tree with:
    - two matches for suffix 5 (one nested)
    - one non-match with an image extension
    - one match by name but with a non-image extension
    - one extension-less file whose stem would match
    """
    files = {
        "a5": write(src_root / "a_IMG_5.jpg", b"alpha"),
        "b15": write(src_root / "trip" / "b_IMG_15.jpg", b"bravo"),
        "c7": write(src_root / "c_IMG_7.png", b"charlie"),
        "txt5": write(src_root / "notes_5.txt", b"delta"),
        "bare5": write(src_root / "raw_5", b"echo"),
    }
    return files
