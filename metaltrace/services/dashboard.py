"""
Dashboard queries — read-only summaries across all elements.
"""

from metaltrace.conf import metaltrace_settings
from metaltrace.models.enums import ElementStatus
from metaltrace.protocols.store import MovementInfo, TrackingStore


class Dashboard:
    """Read-only summary methods."""

    def __init__(self, store: TrackingStore):
        self.store = store

    def stats(self) -> dict:
        """
        Element counts.

        Returns:
            {"totalElements", "inOperation", "inTransit", "inStorage",
             "byStatus": {status: count for every ElementStatus}}
        """
        counts = self.store.count_elements_by_status()
        by_status = {status: counts.get(status, 0) for status in ElementStatus.values}
        return {
            'totalElements': sum(counts.values()),
            'inOperation': by_status[ElementStatus.IN_OPERATION],
            'inTransit': by_status[ElementStatus.IN_TRANSIT],
            'inStorage': by_status[ElementStatus.IN_STORAGE],
            'byStatus': by_status,
        }

    def recent_movements(self, limit: int | None = None) -> list[MovementInfo]:
        """Newest movements across all elements (RECENT_MOVEMENTS_LIMIT by default)."""
        if limit is None:
            limit = metaltrace_settings.RECENT_MOVEMENTS_LIMIT
        return self.store.recent_movements(limit)
