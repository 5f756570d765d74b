"""
Periodic main-course cook report.

Every run scans all cooks and logs those who cook at least two dishes,
one of which is a main course. The job only reads.
"""

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.orm import Session

from services.cook_service import CookService

logger = logging.getLogger("catering.scheduler.cook_report")


class CookReportJob:
    """
    Background job logging cooks that prepare main courses.

    Each run opens its own session. Failures are logged and swallowed
    since nothing awaits the result.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        """
        Args:
            session_factory: Callable returning a new SQLAlchemy session
        """
        self.session_factory = session_factory

    def run(self) -> int:
        """
        Execute one scan. Called by the scheduler.

        Returns:
            int: Number of qualifying cooks, 0 when the scan failed
        """
        start_time = datetime.now()
        try:
            db = self.session_factory()
            try:
                qualifying = CookService.report_main_course_cooks(db)
            finally:
                db.close()
        except Exception as e:
            logger.error(f"Cook report scan failed: {e}", exc_info=True)
            return 0

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.debug(
            f"Cook report scan completed: {len(qualifying)} cooks, "
            f"duration: {elapsed:.2f}s"
        )
        return len(qualifying)
