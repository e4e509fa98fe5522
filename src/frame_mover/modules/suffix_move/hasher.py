# src/frame_mover/modules/suffix_move/hasher.py
from __future__ import annotations

import hashlib
from pathlib import Path

DEFAULT_CHUNK = 64 * 1024


def hash_file(p: Path, chunk: int = DEFAULT_CHUNK) -> str:
    """SHA-256 of the file's bytes as lowercase hex. Raises OSError on I/O failure."""
    h = hashlib.sha256()
    with Path(p).open("rb") as f:
        for part in iter(lambda: f.read(chunk), b""):
            h.update(part)
    return h.hexdigest()
