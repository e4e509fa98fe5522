# src/frame_mover/modules/suffix_move/scanner.py
from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Set
from dataclasses import dataclass
from pathlib import Path

from frame_mover.core.logging import get_logger
from frame_mover.core.media_types import IMAGE_EXTS

__all__ = [
    "ImageEntry",
    "is_image",
    "list_images_under",
    "scan_source_for_suffixes",
    "stem_ends_with_suffix",
]

log = get_logger(__name__)


@dataclass(frozen=True)
class ImageEntry:
    path: Path


def is_image(p: Path, exts: Set[str] = IMAGE_EXTS) -> bool:
    return bool(p.suffix) and p.suffix.lower() in exts


def stem_ends_with_suffix(stem: str, suffixes: Iterable[int]) -> bool:
    """
    String test on the decimal digits: suffix 12 matches 'IMG_0012' and also
    'IMG_112'. Not a numeric comparison.
    """
    return any(stem.endswith(str(n)) for n in suffixes)


def _skip(err: OSError) -> None:
    log.debug("Skipping unreadable path during walk: %s", err)


def _iter_regular_files(root: Path) -> Iterator[Path]:
    # os.walk does not follow directory links and reports errors to onerror,
    # so an unreadable subtree is skipped instead of aborting the walk.
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_skip):
        base = Path(dirpath)
        for name in filenames:
            p = base / name
            try:
                if p.is_symlink() or not p.is_file():
                    continue
            except OSError as err:
                _skip(err)
                continue
            yield p


def _require_dir(root: Path) -> Path:
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")
    return root


def scan_source_for_suffixes(
    root: Path, suffixes: Set[int], exts: Set[str] = IMAGE_EXTS
) -> list[ImageEntry]:
    """
    Image files under `root` whose stem ends with one of `suffixes`.
    Order is unspecified. Raises NotADirectoryError if `root` itself is unusable.
    """
    root = _require_dir(root)
    out: list[ImageEntry] = []
    for p in _iter_regular_files(root):
        if is_image(p, exts) and stem_ends_with_suffix(p.stem, suffixes):
            out.append(ImageEntry(path=p))
    return out


def list_images_under(root: Path, exts: Set[str] = IMAGE_EXTS) -> list[Path]:
    """Every image file under `root`, used to seed the destination index."""
    root = _require_dir(root)
    return [p for p in _iter_regular_files(root) if is_image(p, exts)]
