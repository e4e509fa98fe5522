# src/frame_mover/modules/suffix_move/mover.py
from __future__ import annotations

import os
import shutil
from collections.abc import Set
from dataclasses import dataclass
from pathlib import Path

from frame_mover.core.logging import get_logger
from frame_mover.core.paths import with_collision_index

from .hasher import DEFAULT_CHUNK, hash_file

__all__ = ["Moved", "MoveOutcome", "SkippedDuplicate", "move_file"]

log = get_logger(__name__)


@dataclass(frozen=True)
class Moved:
    """File was moved; `path` is where it landed (may carry a -N suffix)."""

    path: Path


@dataclass(frozen=True)
class SkippedDuplicate:
    pass


MoveOutcome = Moved | SkippedDuplicate


def move_file(
    src: Path, dest: Path, index: Set[str], chunk: int = DEFAULT_CHUNK
) -> MoveOutcome:
    """
    Move `src` to `dest` unless its content is already in the destination.

    - content hash in `index`             -> SkippedDuplicate, nothing touched
    - `dest` exists with the same content -> SkippedDuplicate, nothing touched
    - `dest` exists with other content    -> move to 'stem-1.ext', 'stem-2.ext', …

    Raises OSError when hashing or relocation fails; `src` is then left in place.
    """
    src, dest = Path(src), Path(dest)
    src_hash = hash_file(src, chunk)

    if src_hash in index:
        log.debug("Duplicate by index: %s", src)
        return SkippedDuplicate()

    target = dest
    if dest.exists():
        try:
            same = hash_file(dest, chunk) == src_hash
        except OSError:
            same = False
        if same:
            log.debug("Duplicate of existing %s: %s", dest, src)
            return SkippedDuplicate()
        target = _next_free_path(dest)

    target.parent.mkdir(parents=True, exist_ok=True)
    _relocate(src, target, src_hash, chunk)
    log.debug("Moved %s -> %s", src, target)
    return Moved(target)


def _next_free_path(dest: Path) -> Path:
    n = 1
    while True:
        candidate = with_collision_index(dest, n)
        if not candidate.exists():
            return candidate
        n += 1


def _relocate(src: Path, dst: Path, src_hash: str, chunk: int) -> None:
    """Atomic rename when possible, else copy + fsync + verify + unlink."""
    try:
        os.rename(src, dst)
        return
    except OSError as e:
        log.debug("rename failed (%s); copying %s -> %s", e, src, dst)

    _copy_synced(src, dst, chunk)
    try:
        copied = hash_file(dst, chunk)
    except OSError:
        _discard(dst)
        raise
    if copied != src_hash:
        _discard(dst)
        raise OSError(f"Hash mismatch after copy: {src} -> {dst}")
    # Both copies exist until this unlink returns.
    try:
        os.unlink(src)
    except OSError:
        # Source stays; the destination must not keep an unindexed copy.
        _discard(dst)
        raise


def _copy_synced(src: Path, dst: Path, chunk: int) -> None:
    with src.open("rb") as fsrc:
        # "x": never clobber a file that appeared since the collision check.
        fdst = dst.open("xb")
        try:
            with fdst:
                shutil.copyfileobj(fsrc, fdst, chunk)
                fdst.flush()
                os.fsync(fdst.fileno())
        except OSError:
            _discard(dst)
            raise
    try:
        shutil.copystat(src, dst)
    except OSError as e:
        log.debug("Could not copy metadata to %s: %s", dst, e)


def _discard(p: Path) -> None:
    try:
        p.unlink(missing_ok=True)
    except OSError as e:
        log.warning("Could not remove partial copy %s: %s", p, e)
