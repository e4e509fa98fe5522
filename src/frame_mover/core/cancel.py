# src/frame_mover/core/cancel.py
from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable


@runtime_checkable
class CancelFlag(Protocol):
    def is_cancelled(self) -> bool: ...


class CancellationToken:
    """
    Advisory stop flag shared between a caller and one worker thread.

    Any thread may call `cancel()`; the worker polls `is_cancelled()` between
    units of work, so a run stops soon after, not exactly at, the request.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()


class NeverCancelled:
    def is_cancelled(self) -> bool:
        return False
