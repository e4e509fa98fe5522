from __future__ import annotations

import os
from pathlib import Path


def display_path(path: Path | str) -> str:
    """
    Printable form of a filesystem path.

    Names that are not valid UTF-8 come back from the OS as lone surrogates,
    which JSON and terminals reject; those bytes become U+FFFD instead.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def dest_path_for(source_root: Path, dest_root: Path, file_path: Path) -> Path:
    """
    Mirror `file_path`'s position under `source_root` onto `dest_root`.

    A file outside `source_root` is joined as-is, which for an absolute path
    yields the path itself.
    """
    try:
        rel = Path(file_path).relative_to(source_root)
    except ValueError:
        rel = Path(file_path)
    return Path(dest_root) / rel


def with_collision_index(path: Path, n: int) -> Path:
    """
    'IMG_1.jpg' -> 'IMG_1-<n>.jpg'; extension-less names get '-<n>' appended.
    """
    stem, ext = path.stem, path.suffix
    return path.with_name(f"{stem}-{n}{ext}")
