"""
Gazetteer - resolve free-text settlement names to coordinates.

Exact (normalized) match first, then a permissive substring scan that
handles inflected forms but never returns an administrative region.
"""
import json
import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from core.cities import CITIES
from core.constants import REGIONS_TO_SKIP
from core.errors import GazetteerError
from utils.text import normalize

logger = logging.getLogger(__name__)

Coords = Tuple[float, float]


def _match_key(name: str) -> str:
    # message lines reach the resolver with apostrophes already stripped
    return normalize(name).replace("'", "").strip()


class Gazetteer:
    """
    Read-only name -> coordinates table.

    Built once at start-up and passed to the extractor. Rows whose
    normalized name equals a region name are dropped, so no lookup path
    can return a region.
    """

    def __init__(self, cities: Mapping[str, Sequence[float]],
                 regions: Iterable[str] = REGIONS_TO_SKIP):
        self._regions = tuple(_match_key(r) for r in regions)

        table: Dict[str, Coords] = {}
        for name, coords in cities.items():
            if _match_key(name) in self._regions:
                logger.warning(f"Gazetteer entry {name!r} is a region, skipped")
                continue
            if len(coords) != 2:
                raise GazetteerError(f"Bad coordinates for {name!r}: {coords!r}")
            table[name] = (float(coords[0]), float(coords[1]))

        self._cities = MappingProxyType(table)
        # (normalized, coords) in table order for the substring scan
        self._normalized = tuple((_match_key(name), coords) for name, coords in table.items())
        self._exact: Dict[str, Coords] = {}
        for norm, coords in self._normalized:
            self._exact.setdefault(norm, coords)

    @classmethod
    def default(cls) -> 'Gazetteer':
        """Gazetteer over the bundled city table."""
        return cls(CITIES)

    @classmethod
    def from_file(cls, path: str) -> 'Gazetteer':
        """Load a JSON object of {"name": [lat, lng]}."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise GazetteerError(f"Failed to load gazetteer {path}: {e}") from e
        if not isinstance(data, dict):
            raise GazetteerError(f"Gazetteer {path} must be a JSON object")
        logger.info(f"Gazetteer loaded from {path}: {len(data)} entries")
        return cls(data)

    @property
    def cities(self) -> Mapping[str, Coords]:
        return self._cities

    def __len__(self) -> int:
        return len(self._cities)

    def _region_like(self, norm: str) -> bool:
        return any(r in norm or norm in r for r in self._regions)

    def resolve(self, name: str) -> Optional[Coords]:
        """
        Resolve settlement name to (lat, lng).

        Args:
            name: Raw name as captured from the message

        Returns:
            Coordinates or None if nothing (acceptable) matched
        """
        query = _match_key(name)
        if not query:
            return None

        coords = self._exact.get(query)
        if coords is not None:
            return coords

        for norm, coords in self._normalized:
            if query in norm or norm in query:
                if self._region_like(norm):
                    continue
                return coords

        return None
