"""
APScheduler configuration and management.

Owns the application scheduler and the periodic cook report job.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .cook_report_job import CookReportJob

logger = logging.getLogger("catering.scheduler")

COOK_REPORT_JOB_ID = "cook_report"


class SchedulerManager:
    """
    Manages APScheduler lifecycle and job registration.

    Synchronous jobs run in the scheduler's thread pool so database
    reads never block the event loop.
    """

    def __init__(self) -> None:
        self.scheduler: Optional[AsyncIOScheduler] = None
        self._cook_report_job: Optional[CookReportJob] = None

    def initialize(
        self,
        cook_report_job: CookReportJob,
        interval_seconds: int = 15,
    ) -> None:
        """
        Initialize and configure scheduler with jobs.

        Args:
            cook_report_job: Cook report job instance
            interval_seconds: Delay between two scans
        """
        if self.scheduler is not None:
            logger.warning("Scheduler already initialized")
            return

        self._cook_report_job = cook_report_job

        self.scheduler = AsyncIOScheduler(
            timezone="UTC",
            job_defaults={
                "coalesce": True,  # Combine missed runs
                "max_instances": 1,  # One instance at a time
            },
        )

        self._register_cook_report_job(interval_seconds)

        logger.info("Scheduler initialized successfully")

    def _register_cook_report_job(self, interval_seconds: int) -> None:
        if self.scheduler is None or self._cook_report_job is None:
            raise RuntimeError("Scheduler not initialized")

        self.scheduler.add_job(
            self._cook_report_job.run,
            trigger=IntervalTrigger(seconds=interval_seconds),
            id=COOK_REPORT_JOB_ID,
            name="Main course cook report",
            replace_existing=True,
            # First scan right away, then every interval
            next_run_time=datetime.now(timezone.utc),
        )

        logger.info(f"Cook report job registered every {interval_seconds}s")

    def start(self) -> None:
        """Start scheduler (begin executing jobs)."""
        if self.scheduler is None:
            raise RuntimeError("Scheduler not initialized")

        if self.scheduler.running:
            logger.warning("Scheduler already running")
            return

        self.scheduler.start()
        logger.info("Scheduler started")

    def shutdown(self, wait: bool = True) -> None:
        """
        Shutdown scheduler gracefully.

        Args:
            wait: If True, wait for running jobs to complete
        """
        if self.scheduler is None:
            logger.warning("Scheduler not initialized")
            return

        if not self.scheduler.running:
            logger.warning("Scheduler not running")
            return

        self.scheduler.shutdown(wait=wait)
        logger.info(f"Scheduler shutdown (wait={wait})")

    def get_jobs(self) -> list[dict]:
        """List scheduled jobs with their next run time."""
        if self.scheduler is None:
            return []

        return [
            {
                "id": job.id,
                "name": job.name,
                "next_run": getattr(job, "next_run_time", None),
                "trigger": str(job.trigger),
            }
            for job in self.scheduler.get_jobs()
        ]

    def trigger_cook_report_now(self) -> int:
        """Run the cook report immediately, outside the schedule."""
        if self._cook_report_job is None:
            raise RuntimeError("Cook report job not initialized")

        logger.info("Manually triggering cook report job")
        return self._cook_report_job.run()
