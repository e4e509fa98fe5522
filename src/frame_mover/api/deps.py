# src/frame_mover/api/deps.py
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from frame_mover.modules.suffix_move.jobs import JobManager


@lru_cache(maxsize=1)
def get_job_manager() -> JobManager:
    """One manager per process, so at most one move runs at a time."""
    return JobManager()


JobManagerDep = Annotated[JobManager, Depends(get_job_manager)]
