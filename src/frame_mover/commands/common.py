# src/frame_mover/commands/common.py
from __future__ import annotations

from pathlib import Path

import typer


def resolve_dry_run(dry_run: bool | None, default: bool) -> bool:
    """
    Standardize dry-run across commands.
    - --dry-run => classify only
    - --apply   => move files
    - neither   => `default` (settings.DRY_RUN_DEFAULT)
    """
    return default if dry_run is None else dry_run


def prompt_existing_dir(maybe_root: Path | None, prompt_label: str = "root") -> Path:
    root = maybe_root or Path(typer.prompt(f"{prompt_label} (folder)")).expanduser()
    if not root.exists() or not root.is_dir():
        raise typer.BadParameter(
            f"{prompt_label} does not exist or is not a directory: {root}"
        )
    return root


def prompt_dest_dir(maybe_dest: Path | None, prompt_label: str = "dest") -> Path:
    """Destination may be missing (it is created), but not a file."""
    dest = maybe_dest or Path(typer.prompt(f"{prompt_label} (folder)")).expanduser()
    if dest.exists() and not dest.is_dir():
        raise typer.BadParameter(
            f"{prompt_label} exists and is not a directory: {dest}"
        )
    return dest
