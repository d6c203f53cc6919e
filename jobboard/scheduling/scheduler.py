"""In-process recurring trigger for the job role status sweep."""

from __future__ import annotations

import threading
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.base import BaseTrigger
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.core.logging import get_logger
from jobboard.core.metrics import record_sweep, set_scheduler_running
from jobboard.core.time import today_in
from jobboard.domain.jobs import SweepResult
from jobboard.services.job_service import JobService

logger = get_logger(__name__)

SWEEP_JOB_ID = "close-expired-job-roles"
STARTUP_JOB_ID = "close-expired-job-roles-startup"


class SchedulerState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class JobStatusScheduler:
    """Runs the status sweep on a cron (or fixed interval) schedule.

    Each instance owns its own background scheduler; nothing is shared at
    module level. Scheduled ticks never raise: failures are logged and the
    schedule keeps running. ``run_now`` and ``sweep_once`` raise normally.

    At most one scheduled sweep runs at a time. ``run_now`` does not take the
    tick lock, so a manual run may overlap a scheduled one; the sweep is a
    single conditional UPDATE, so the overlap closes nothing twice.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        cron_expression: Optional[str] = None,
        timezone: Optional[str] = None,
        interval_seconds: Optional[int] = None,
    ) -> None:
        self.session_factory = session_factory
        self.cron_expression = cron_expression or settings.job_scheduler_cron_expression
        self.timezone = timezone or settings.job_scheduler_timezone
        self.interval_seconds = (
            interval_seconds
            if interval_seconds is not None
            else settings.job_scheduler_interval_seconds
        )
        self.state = SchedulerState.STOPPED
        self._scheduler: Optional[BackgroundScheduler] = None
        self._state_lock = threading.Lock()
        self._tick_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Control surface

    def start(self, run_immediately: bool = True) -> None:
        """Register the recurring trigger; optionally queue one immediate sweep."""
        with self._state_lock:
            if self.state is SchedulerState.RUNNING:
                logger.warning("JobStatusScheduler is already running")
                return

            scheduler = BackgroundScheduler(timezone=self.timezone)
            scheduler.start()
            scheduler.add_job(
                self._tick,
                trigger=self._build_trigger(),
                id=SWEEP_JOB_ID,
                kwargs={"trigger": "scheduled"},
                max_instances=1,
                coalesce=True,
                replace_existing=True,
            )
            if run_immediately:
                scheduler.add_job(self._tick, id=STARTUP_JOB_ID, kwargs={"trigger": "startup"})

            self._scheduler = scheduler
            self.state = SchedulerState.RUNNING

        set_scheduler_running(True)
        logger.info(
            "Started JobStatusScheduler (%s)",
            self.describe_schedule(),
            extra={"timezone": self.timezone, "run_immediately": run_immediately},
        )

    def stop(self) -> None:
        """Cancel future ticks; a sweep already in progress is left to finish."""
        with self._state_lock:
            if self.state is SchedulerState.STOPPED:
                return
            scheduler, self._scheduler = self._scheduler, None
            self.state = SchedulerState.STOPPED

        if scheduler is not None:
            scheduler.shutdown(wait=False)
        set_scheduler_running(False)
        logger.info("JobStatusScheduler stopped")

    def run_now(self) -> SweepResult:
        """Run one sweep immediately in the caller's thread; errors propagate."""
        logger.info("Manually triggering job role status sweep")
        return self._run("manual")

    def is_running(self) -> bool:
        return self.state is SchedulerState.RUNNING

    def next_scheduled_run(self) -> Optional[datetime]:
        scheduler = self._scheduler
        if not self.is_running() or scheduler is None:
            return None
        job = scheduler.get_job(SWEEP_JOB_ID)
        return job.next_run_time if job else None

    def describe_schedule(self) -> str:
        if self.interval_seconds:
            return f"every {self.interval_seconds}s"
        return f"cron '{self.cron_expression}' {self.timezone}"

    # ------------------------------------------------------------------
    # Sweep entry points

    def sweep_once(self) -> SweepResult:
        """Open a session, run the sweep for today in this scheduler's timezone."""
        session = self.session_factory()
        try:
            return JobService(session).close_expired_job_roles(today=today_in(self.timezone))
        finally:
            session.close()

    def _run(self, trigger: str) -> SweepResult:
        try:
            result = self.sweep_once()
        except Exception:
            record_sweep(trigger, success=False)
            raise
        record_sweep(trigger, success=True, closed=result.updated_count)
        return result

    def _tick(self, trigger: str = "scheduled") -> Optional[SweepResult]:
        if not self._tick_lock.acquire(blocking=False):
            logger.warning("Skipping %s sweep: previous sweep still running", trigger)
            return None
        try:
            return self._run(trigger)
        except Exception:
            logger.exception("Error in %s job role status sweep", trigger)
            return None
        finally:
            self._tick_lock.release()

    def _build_trigger(self) -> BaseTrigger:
        if self.interval_seconds:
            return IntervalTrigger(seconds=self.interval_seconds, timezone=self.timezone)
        return CronTrigger.from_crontab(self.cron_expression, timezone=self.timezone)
