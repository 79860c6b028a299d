"""Read-through cache that hands out player directory snapshots."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from sleeper_insights.config import player_refresh_interval

from .players import PlayerDirectory


logger = logging.getLogger(__name__)

DirectoryLoader = Callable[[], PlayerDirectory]
Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CacheEntry:
    entry: PlayerDirectory
    fetched_at: datetime


class PlayerDirectoryCache:
    """Serve the last loaded directory until it is older than the refresh interval.

    The cache never fetches anything itself: ``loader`` is injected by the
    caller and is invoked on first use and whenever the entry goes stale.
    When a refresh fails and a stale entry exists, the stale entry is served
    and the failure is logged; with nothing cached the error propagates.
    """

    def __init__(
        self,
        loader: DirectoryLoader,
        *,
        refresh_interval: Optional[timedelta] = None,
        clock: Clock = _utcnow,
    ):
        self._loader = loader
        self.refresh_interval = refresh_interval if refresh_interval is not None else player_refresh_interval()
        self._clock = clock
        self._entry: Optional[CacheEntry] = None
        self._lock = threading.Lock()

    @property
    def cached(self) -> Optional[CacheEntry]:
        return self._entry

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        if self._entry is None:
            return True
        now = now or self._clock()
        return now - self._entry.fetched_at >= self.refresh_interval

    def get(self) -> PlayerDirectory:
        """Return a directory snapshot, loading it first if missing or stale."""

        with self._lock:
            now = self._clock()
            if not self.is_stale(now):
                return self._entry.entry
            try:
                directory = self._loader()
            except Exception:
                if self._entry is None:
                    raise
                logger.warning(
                    "Player directory refresh failed; serving entry fetched at %s",
                    self._entry.fetched_at.isoformat(),
                    exc_info=True,
                )
                return self._entry.entry
            self._entry = CacheEntry(entry=directory, fetched_at=now)
            logger.info("Player directory refreshed (%s players)", len(directory))
            return directory

    def invalidate(self) -> None:
        with self._lock:
            self._entry = None
