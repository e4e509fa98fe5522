# src/frame_mover/modules/suffix_move/router.py
from pathlib import Path

from fastapi import APIRouter, status

from frame_mover.api.deps import JobManagerDep
from frame_mover.core.errors import BadRequest, to_http

from .schemas import JobStatus, MoveRequest

router = APIRouter(prefix="/move", tags=["move"])


def _validate(req: MoveRequest) -> None:
    if not Path(req.source_dir).is_dir():
        raise BadRequest(f"Source is not a directory: {req.source_dir}")
    dest = Path(req.dest_dir)
    if dest.exists() and not dest.is_dir():
        raise BadRequest(f"Destination exists and is not a directory: {dest}")


@router.post(
    path="",
    response_model=JobStatus,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start moving suffix-matched images",
    description=(
        "Scan `source_dir` for images whose name (without extension) ends with one "
        "of `suffixes`, and move them under `dest_dir`, mirroring folders. Files "
        "whose content already exists anywhere under `dest_dir` are skipped.\n\n"
        "The run happens in the background; poll `/move/status` for progress. "
        "With `dry_run` **true** nothing is moved, files are only classified."
    ),
)
def start_move(req: MoveRequest, jobs: JobManagerDep) -> JobStatus:
    try:
        _validate(req)
        return jobs.start(req).snapshot()
    except Exception as err:
        raise to_http(err) from err


@router.post(
    path="/cancel",
    response_model=JobStatus,
    summary="Request cancellation of the current run",
    description="Cancellation is cooperative: the run stops after the file it is working on.",
)
def cancel_move(jobs: JobManagerDep) -> JobStatus:
    try:
        return jobs.cancel().snapshot()
    except Exception as err:
        raise to_http(err) from err


@router.get(
    path="/status",
    response_model=JobStatus,
    summary="Latest progress snapshot of the current (or last) run",
)
def move_status(jobs: JobManagerDep) -> JobStatus:
    try:
        return jobs.status()
    except Exception as err:
        raise to_http(err) from err
