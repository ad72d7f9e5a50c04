"""Thread-safe in-memory issue snapshot with per-entry expiration."""

import logging
import threading
import time
from collections.abc import Callable, Iterable

from cachetools import TTLCache

from ..github_client.models import IssueRecord

logger = logging.getLogger(__name__)

DEFAULT_TTL = 60 * 60
DEFAULT_SWEEP_INTERVAL = 30
DEFAULT_MAXSIZE = 1_000_000


class IssueStore:
    """Issue records keyed by number, each expiring independently.

    Every write resets the entry's deadline to ``ttl`` seconds from now.
    Refreshes never delete keys missing from a new batch; such entries
    simply age out. Reads and writes from any thread are serialized by a
    single lock around the underlying cache.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
        maxsize: int = DEFAULT_MAXSIZE,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self.sweep_interval = sweep_interval
        self._cache: TTLCache[int, IssueRecord] = TTLCache(
            maxsize=maxsize, ttl=ttl, timer=timer
        )
        self._lock = threading.RLock()
        self._stop_event = threading.Event()
        self._sweeper: threading.Thread | None = None

    def get(self, number: int) -> IssueRecord | None:
        """Return the live record for ``number``, or None if absent or expired."""
        with self._lock:
            return self._cache.get(number)

    def put_all(self, records: Iterable[IssueRecord]) -> int:
        """Insert or overwrite records, resetting each one's TTL.

        Returns:
            Number of records written
        """
        written = 0
        with self._lock:
            for record in records:
                self._cache[record.number] = record
                written += 1
        return written

    def size(self) -> int:
        """Number of entries that have not expired."""
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    def sweep(self) -> int:
        """Evict expired entries and return how many were removed."""
        with self._lock:
            expired = self._cache.expire()
        if expired:
            logger.debug("Evicted %d expired issues", len(expired))
        return len(expired)

    def start_sweeper(self) -> None:
        """Start the background thread that sweeps every ``sweep_interval``."""
        if self._sweeper is not None and self._sweeper.is_alive():
            return
        self._stop_event.clear()
        self._sweeper = threading.Thread(
            target=self._sweep_loop, name="issue-store-sweeper", daemon=True
        )
        self._sweeper.start()

    def stop_sweeper(self) -> None:
        """Stop the sweeper thread and wait for it to exit."""
        self._stop_event.set()
        if self._sweeper is not None:
            self._sweeper.join()
            self._sweeper = None

    def _sweep_loop(self) -> None:
        while not self._stop_event.wait(self.sweep_interval):
            self.sweep()
