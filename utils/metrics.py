"""
Simple in-memory pipeline counters.
Logged at shutdown and served by the health endpoint.
"""
import logging
from dataclasses import asdict, dataclass

logger = logging.getLogger(__name__)


@dataclass
class Metrics:
    """Pipeline counters."""

    messages_received: int = 0
    messages_ignored: int = 0
    events_published: int = 0
    events_removed: int = 0
    locations_unresolved: int = 0
    store_failures: int = 0

    def snapshot(self) -> dict:
        return asdict(self)

    def reset(self) -> None:
        for name in self.snapshot():
            setattr(self, name, 0)

    def log(self) -> None:
        """Log aggregated metrics."""
        logger.info(
            "metrics messages_received=%d messages_ignored=%d events_published=%d "
            "events_removed=%d locations_unresolved=%d store_failures=%d",
            self.messages_received,
            self.messages_ignored,
            self.events_published,
            self.events_removed,
            self.locations_unresolved,
            self.store_failures,
        )


_metrics = Metrics()


def get_metrics() -> Metrics:
    return _metrics
