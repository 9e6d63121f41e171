"""Generation-gated holder of the latest published snapshot."""

import logging
import threading
from typing import Optional

from flood_watch.flood.models import Snapshot

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Keeps the most recent snapshot.

    A snapshot only replaces the stored one when its generation is strictly
    greater, so a slow refresh can never overwrite the result of a refresh
    that was triggered after it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot: Optional[Snapshot] = None

    def publish(self, candidate: Snapshot) -> bool:
        """Publish a snapshot if it is newer than the current one.

        Args:
            candidate: Snapshot produced by a refresh

        Returns:
            True if the candidate became current, False if it was superseded
        """
        with self._lock:
            if self._snapshot is not None and candidate.generation <= self._snapshot.generation:
                stored_generation = self._snapshot.generation
                published = False
            else:
                self._snapshot = candidate
                published = True

        if published:
            logger.info(f"Published snapshot generation {candidate.generation} with {len(candidate.results)} results")
        else:
            logger.debug(
                f"Dropped snapshot generation {candidate.generation}, "
                f"generation {stored_generation} is already current"
            )
        return published

    def current(self) -> Optional[Snapshot]:
        """Return the latest snapshot, or None before the first publish."""
        with self._lock:
            return self._snapshot

    @property
    def generation(self) -> int:
        """Generation of the current snapshot, 0 when empty."""
        snapshot = self.current()
        return snapshot.generation if snapshot is not None else 0
