"""
Location extraction - turn message lines into (settlement, count) pairs.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from core.constants import MAX_COUNT_PER_LOCATION, REGION_SUFFIXES, REGIONS_TO_SKIP
from parsers.patterns import THREAT_LINE_RE
from utils.metrics import get_metrics
from utils.text import clean_line, normalize

logger = logging.getLogger(__name__)

_REGIONS_NORMALIZED = tuple(normalize(r) for r in REGIONS_TO_SKIP)


@dataclass
class ExtractedLocation:
    """Resolved settlement with the number of reported threats."""
    name: str
    coords: Tuple[float, float]
    count: int = 1


def coord_key(coords: Tuple[float, float]) -> str:
    """Aggregation key; aliases of one settlement share coordinates."""
    return f"{coords[0]},{coords[1]}"


def is_region_name(name: str) -> bool:
    """True for oblast names ("Сумщина") and anything with a region suffix."""
    norm = normalize(name).strip()
    if not norm:
        return False
    if norm.endswith(REGION_SUFFIXES):
        return True
    return norm in _REGIONS_NORMALIZED


def extract_locations(text: str, gazetteer) -> Dict[str, ExtractedLocation]:
    """
    Extract settlements and counts from message text.

    Each line is parsed independently:
    1. Lines mentioning a region are skipped (regional summaries)
    2. URLs, pictographs and punctuation are stripped
    3. "<count> <threat> <на|по|в|to> <name>" is matched
    4. Region-like names are dropped, the rest resolved via gazetteer

    Args:
        text: Raw message text
        gazetteer: Object with resolve(name) -> (lat, lng) or None

    Returns:
        Mapping coord_key -> ExtractedLocation, counts summed per coordinate
    """
    if not text:
        return {}

    locations: Dict[str, ExtractedLocation] = {}

    for line in text.split('\n'):
        line = line.strip()
        if not line:
            continue

        line_norm = normalize(line)
        if any(region in line_norm for region in _REGIONS_NORMALIZED):
            logger.debug(f"Region line skipped: {line}")
            continue

        clean = clean_line(line)
        if not clean:
            continue

        match = THREAT_LINE_RE.search(clean)
        if not match:
            continue

        count = int(match.group(1)) if match.group(1) else 1
        name = match.group(2).strip()
        if not name or count < 1:
            continue

        if is_region_name(name):
            logger.debug(f"Region name skipped: {name}")
            continue

        coords = gazetteer.resolve(name)
        if not coords:
            logger.debug(f"Location not found: {name}")
            get_metrics().locations_unresolved += 1
            continue

        key = coord_key(coords)
        if key in locations:
            locations[key].count += count
        else:
            locations[key] = ExtractedLocation(name=name, coords=coords, count=count)

        if locations[key].count > MAX_COUNT_PER_LOCATION:
            logger.warning(f"Count {locations[key].count} on {name} capped at {MAX_COUNT_PER_LOCATION}")
            locations[key].count = MAX_COUNT_PER_LOCATION

        logger.debug(f"Found {count} on {name} -> {coords} (total {locations[key].count})")

    return locations
