"""Job status scheduler control endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from jobboard.core.logging import get_logger
from jobboard.core.time import utcnow
from jobboard.dependencies import get_job_scheduler
from jobboard.scheduling import JobStatusScheduler
from jobboard.schemas.job import SchedulerStatusResponse, SweepResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


def _status(scheduler: JobStatusScheduler) -> SchedulerStatusResponse:
    running = scheduler.is_running()
    return SchedulerStatusResponse(
        is_running=running,
        message="Scheduler is running" if running else "Scheduler is stopped",
        next_run=scheduler.next_scheduled_run(),
    )


@router.get("/status", response_model=SchedulerStatusResponse)
def scheduler_status(
    scheduler: JobStatusScheduler = Depends(get_job_scheduler),
) -> SchedulerStatusResponse:
    return _status(scheduler)


@router.post("/start", response_model=SchedulerStatusResponse)
def start_scheduler(
    scheduler: JobStatusScheduler = Depends(get_job_scheduler),
) -> SchedulerStatusResponse:
    scheduler.start(run_immediately=False)
    return _status(scheduler)


@router.post("/stop", response_model=SchedulerStatusResponse)
def stop_scheduler(
    scheduler: JobStatusScheduler = Depends(get_job_scheduler),
) -> SchedulerStatusResponse:
    scheduler.stop()
    return _status(scheduler)


@router.post("/run-now", response_model=SweepResponse)
def run_now(scheduler: JobStatusScheduler = Depends(get_job_scheduler)):
    """Run the status sweep immediately and report how many job roles were closed."""
    try:
        result = scheduler.run_now()
    except Exception as exc:
        logger.exception("Error running manual job role status sweep")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Error running job check",
                "error": str(exc),
            },
        )
    return SweepResponse(
        success=True,
        message="Job check completed successfully",
        updated_count=result.updated_count,
        timestamp=utcnow(),
    )
