"""APScheduler-backed timer.

Arms one-shot DateTrigger jobs on an AsyncIOScheduler so reminder
callbacks run on the application's event loop. Jobs that APScheduler
drops as missed are reported through the `on_missed` callback given to
`arm`.
"""

import logging
from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

from apscheduler.events import (  # type: ignore[import-not-found]
    EVENT_JOB_ERROR,
    EVENT_JOB_EXECUTED,
    EVENT_JOB_MISSED,
    JobExecutionEvent,
)
from apscheduler.jobstores.base import JobLookupError  # type: ignore[import-not-found]
from apscheduler.schedulers.asyncio import AsyncIOScheduler  # type: ignore[import-not-found]
from apscheduler.triggers.date import DateTrigger  # type: ignore[import-not-found]
from pytz import timezone

from ...application.ports import MissedCallback, TimerCallback

logger = logging.getLogger(__name__)


class APSchedulerJobHandle:
    """Cancelable handle for a single scheduled job."""

    def __init__(self, timer: "APSchedulerTimer", job_id: str) -> None:
        self._timer = timer
        self.job_id = job_id

    def cancel(self) -> bool:
        """Remove the job. Returns False if it already ran or was removed."""
        return self._timer.remove(self.job_id)


class APSchedulerTimer:
    """Timer that arms deferred callbacks as APScheduler date jobs.

    Jobs armed before `start()` are kept pending by APScheduler and are
    scheduled once the timer starts.
    """

    def __init__(
        self,
        timezone_name: str = "UTC",
        misfire_grace_seconds: int = 300,
        enabled: bool = True,
    ):
        """Initialize timer.

        Args:
            timezone_name: Timezone used for job run dates.
            misfire_grace_seconds: How late a job may still run.
            enabled: Whether `start()` actually starts the scheduler.
        """
        self.tz = timezone(timezone_name)
        self.enabled = enabled
        self._misfire_grace_seconds = misfire_grace_seconds

        self._scheduler = AsyncIOScheduler(timezone=self.tz)
        self._scheduler.add_listener(
            self._on_job_event,
            EVENT_JOB_MISSED | EVENT_JOB_EXECUTED | EVENT_JOB_ERROR,
        )
        self._missed_callbacks: dict[str, MissedCallback] = {}
        self._is_running = False

    async def start(self) -> None:
        """Start the scheduler on the running event loop."""
        if not self.enabled:
            logger.info("Reminder timer is disabled, skipping start")
            return

        if self._is_running:
            logger.warning("Reminder timer already running")
            return

        self._scheduler.start()
        self._is_running = True
        logger.info(f"Reminder timer started with timezone {self.tz}")

    async def stop(self) -> None:
        """Stop the scheduler, dropping pending jobs."""
        if self._is_running:
            self._scheduler.shutdown(wait=False)
            self._is_running = False
            self._missed_callbacks.clear()
            logger.info("Reminder timer stopped")

    def arm(
        self,
        delay_seconds: float,
        callback: TimerCallback,
        name: str = "",
        on_missed: MissedCallback | None = None,
    ) -> APSchedulerJobHandle:
        """Schedule `callback` to run once after `delay_seconds`."""
        run_date = datetime.now(self.tz) + timedelta(seconds=max(delay_seconds, 0.0))
        job_id = uuid4().hex

        if on_missed is not None:
            self._missed_callbacks[job_id] = on_missed

        self._scheduler.add_job(
            callback,
            trigger=DateTrigger(run_date=run_date, timezone=self.tz),
            id=job_id,
            name=name or job_id,
            misfire_grace_time=self._misfire_grace_seconds,
        )

        logger.debug(f"Armed job '{name or job_id}' for {run_date.isoformat()}")
        return APSchedulerJobHandle(self, job_id)

    def remove(self, job_id: str) -> bool:
        """Remove a pending job. Returns False if it is no longer pending."""
        self._missed_callbacks.pop(job_id, None)
        try:
            self._scheduler.remove_job(job_id)
        except JobLookupError:
            return False
        return True

    def _on_job_event(self, event: JobExecutionEvent) -> None:
        """Scheduler listener: release callbacks of finished jobs, report missed ones."""
        on_missed = self._missed_callbacks.pop(event.job_id, None)
        if event.code != EVENT_JOB_MISSED:
            return

        logger.warning(f"Job {event.job_id} missed its run time {event.scheduled_run_time}, dropped")
        if on_missed is None:
            return

        try:
            on_missed()
        except Exception as e:
            logger.error(f"Error handling missed job {event.job_id}: {e}", exc_info=True)

    @property
    def is_running(self) -> bool:
        """Check if the scheduler is running."""
        return self._is_running

    @property
    def pending_missed_callbacks(self) -> int:
        """Number of armed jobs that still hold a missed-run callback."""
        return len(self._missed_callbacks)

    def get_jobs_info(self) -> list[dict[str, Any]]:
        """Get information about armed jobs."""
        jobs = []
        for job in self._scheduler.get_jobs():
            next_run = getattr(job, "next_run_time", None)
            jobs.append(
                {
                    "id": job.id,
                    "name": job.name,
                    "next_run": next_run.isoformat() if next_run else None,
                }
            )
        return jobs
