# src/frame_mover/core/logging.py
from __future__ import annotations

import logging
import sys
from typing import TextIO


def configure_logging(
    level: int | str = logging.INFO, json: bool = False, stream: TextIO | None = None
) -> None:
    """
    Configure the root logger (and uvicorn's, when served).

    The CLI passes stderr so log lines stay out of the progress bar's stream.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handlers = [logging.StreamHandler(stream or sys.stdout)]

    fmt = (
        '{"level":"%(levelname)s","time":"%(asctime)s","name":"%(name)s",'
        '"message":"%(message)s","module":"%(module)s","line":%(lineno)d}'
        if json
        else "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )
    # force: the CLI and the app factory may both configure in one process.
    logging.basicConfig(level=level, handlers=handlers, format=fmt, force=True)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or "frame_mover")
