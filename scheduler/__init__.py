"""
Scheduler infrastructure for background jobs.
"""

from .scheduler_config import SchedulerManager
from .cook_report_job import CookReportJob

__all__ = ["SchedulerManager", "CookReportJob"]
