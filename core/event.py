"""
EventRecord dataclass - one stationary threat marker on the map.
"""
from dataclasses import dataclass, field
import time
import uuid

from core.constants import ThreatType


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class EventRecord:
    """
    Unit persisted to the store, one per synthesized point.

    Attributes:
        type: Threat classification
        lat, lng: Marker position
        city: Display name of the settlement as written in the message
        speed: Always 0, markers don't move
        static: Always True for records produced here
        start_time: Creation time, epoch milliseconds
        id: Store key (uuid4)
    """
    type: ThreatType
    lat: float
    lng: float
    city: str
    speed: float = 0
    static: bool = True
    start_time: int = field(default_factory=_now_ms)
    id: str = field(default_factory=_new_id)

    @property
    def position(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}

    def to_dict(self) -> dict:
        """Store representation (camelCase keys read by the map front-end)."""
        return {
            "id": self.id,
            "type": self.type.value,
            "position": self.position,
            "path": [self.position],
            "speed": self.speed,
            "startTime": self.start_time,
            "city": self.city,
            "static": self.static,
        }

    def __repr__(self) -> str:
        return f"EventRecord(type={self.type.value}, city={self.city}, lat={self.lat:.6f}, lng={self.lng:.6f})"
