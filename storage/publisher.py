"""
Event publisher - write extracted locations to the store as map markers.

Channel posts are authoritative: they replace every marker of the same
threat type. Direct messages only add markers.
"""
import logging
from typing import Iterable, List, Mapping, Union

from core.constants import ThreatType
from core.event import EventRecord
from parsers.extraction import ExtractedLocation
from utils.geo import generate_nearby_points
from utils.metrics import get_metrics

logger = logging.getLogger(__name__)

Locations = Union[Mapping[str, ExtractedLocation], Iterable[ExtractedLocation]]


class EventPublisher:
    """
    Reconciles extracted locations against the store.

    Args:
        store: FirebaseStore (or anything with async get_all/delete/set)
        rng: Random source passed to the point synthesizer
    """

    def __init__(self, store, rng=None):
        self.store = store
        self.rng = rng

    async def purge(self, threat_type: ThreatType) -> int:
        """Delete all stored records of one type. Returns number removed."""
        existing = await self.store.get_all()
        removed = 0
        for record_id, record in existing.items():
            if isinstance(record, dict) and record.get('type') == threat_type.value:
                await self.store.delete(record_id)
                removed += 1
        get_metrics().events_removed += removed
        logger.info(f"Removed {removed} old {threat_type.value} records")
        return removed

    async def publish(
        self,
        threat_type: ThreatType,
        locations: Locations,
        channel_scoped: bool
    ) -> List[EventRecord]:
        """
        Store one record per synthesized point.

        Args:
            threat_type: Type for every record of this message
            locations: Extracted locations (mapping or iterable)
            channel_scoped: Replace existing records of this type first

        Returns:
            Created records
        """
        if isinstance(locations, Mapping):
            locations = locations.values()

        if channel_scoped:
            await self.purge(threat_type)

        created: List[EventRecord] = []
        for location in locations:
            lat, lng = location.coords
            points = generate_nearby_points(lat, lng, location.count, rng=self.rng)

            for point_lat, point_lng in points:
                record = EventRecord(
                    type=threat_type,
                    lat=point_lat,
                    lng=point_lng,
                    city=location.name,
                )
                await self.store.set(record.id, record.to_dict())
                created.append(record)
                get_metrics().events_published += 1
                logger.debug(
                    f"Stored {threat_type.value} for {location.name} at {point_lat:.6f}, {point_lng:.6f}",
                    extra={'event_id': record.id}
                )

            logger.info(f"Added {len(points)} {threat_type.value} near {location.name}")

        return created
