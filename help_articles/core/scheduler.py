from __future__ import annotations

import datetime as dt
import logging

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

from help_articles.core.config import settings
from help_articles.services.repository import ArticleRepository, RefreshOutcome

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler(timezone=dt.timezone.utc)

REFRESH_JOB_ID = "article_refresh"
RETRY_JOB_ID = "article_refresh_retry"

class RefreshJob:
    """Periodic full-list refresh with exponential backoff on failure.

    The repository only reports succeed/retry; when to try again is decided
    here.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        scheduler,
        backoff_minutes: int,
        max_backoff_minutes: int,
    ):
        self._repository = repository
        self._scheduler = scheduler
        self._backoff_minutes = backoff_minutes
        self._max_backoff_minutes = max_backoff_minutes
        self.attempt = 0

    def backoff_delay(self) -> dt.timedelta:
        minutes = min(self._backoff_minutes * 2 ** self.attempt, self._max_backoff_minutes)
        return dt.timedelta(minutes=minutes)

    async def run(self) -> RefreshOutcome:
        try:
            outcome = RefreshOutcome.from_result(await self._repository.refresh_collection())
        except Exception:
            logger.exception("Article refresh raised")
            outcome = RefreshOutcome.RETRY

        if outcome is RefreshOutcome.SUCCEED:
            if self.attempt:
                logger.info("Article refresh succeeded after %d retries", self.attempt)
            self.attempt = 0
            try:
                self._scheduler.remove_job(RETRY_JOB_ID)
            except JobLookupError:
                # No retry pending
                pass
            return outcome

        delay = self.backoff_delay()
        self.attempt += 1
        logger.warning("Article refresh failed, retry %d in %s", self.attempt, delay)
        self._scheduler.add_job(
            self.run,
            DateTrigger(run_date=dt.datetime.now(dt.timezone.utc) + delay),
            id=RETRY_JOB_ID,
            replace_existing=True,
        )
        return outcome

def start_scheduler(job: RefreshJob) -> None:
    scheduler.add_job(
        job.run,
        IntervalTrigger(hours=settings.refresh_interval_hours),
        id=REFRESH_JOB_ID,
        replace_existing=True,
        coalesce=True,
        max_instances=1,
    )
    scheduler.start()

def shutdown_scheduler() -> None:
    if scheduler.running:
        scheduler.shutdown(wait=False)
