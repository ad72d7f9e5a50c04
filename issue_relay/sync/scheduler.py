"""Startup and periodic refresh of the issue store."""

import logging

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from ..errors import ConfigurationError, TrackerSyncError
from .tracker import TrackerSync

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = 60 * 60


class RefreshScheduler:
    """Runs TrackerSync once at startup and then on a fixed cadence.

    The scheduler only touches the issue store (through TrackerSync); it
    never talks to Slack.
    """

    def __init__(
        self,
        sync: TrackerSync,
        owner: str,
        repo: str,
        interval: float = DEFAULT_REFRESH_INTERVAL,
        scheduler: BackgroundScheduler | None = None,
    ) -> None:
        self.sync = sync
        self.owner = owner
        self.repo = repo
        self.interval = interval
        self.scheduler = scheduler or BackgroundScheduler(timezone="UTC")

    def ensure_warm(self) -> int:
        """Populate an empty store synchronously.

        Errors propagate to the caller, which treats them as fatal.

        Returns:
            Number of records fetched, 0 if the store already had entries
        """
        if self.sync.store.size() > 0:
            return 0
        return self.sync.fetch(self.owner, self.repo)

    def refresh(self) -> int | None:
        """Scheduled refresh; failures are logged and left for the next tick."""
        try:
            count = self.sync.fetch(self.owner, self.repo)
        except (ConfigurationError, TrackerSyncError) as e:
            logger.error("Scheduled refresh failed: %s", e)
            return None
        logger.info("Scheduled refresh: %d issues fetched", count)
        return count

    def start(self) -> None:
        """Start refreshing every ``interval`` seconds in the background."""
        self.scheduler.add_job(
            self.refresh,
            trigger=IntervalTrigger(seconds=self.interval),
            id="refresh_issues",
            name=f"Refresh {self.owner}/{self.repo} issues",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self.scheduler.start()
        logger.info(
            "Refresh scheduler started: every %d seconds", int(self.interval)
        )

    def shutdown(self) -> None:
        """Stop the background scheduler without waiting for a running refresh."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
