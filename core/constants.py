"""
Static constants: threat types, keyword sets, region exclusion list.
"""
from enum import Enum


class ThreatType(Enum):
    """Threat categories stored on the map."""
    SHAHED = "shahed"
    ROCKET = "rocket"


# Administrative regions: never a single point on the map
REGIONS_TO_SKIP = (
    "Чернігівщина", "Сумщина", "Полтавщина", "Київщина", "Житомирщина", "Вінничина",
    "Кіровоградщина", "Харківщина", "Дніпропетровщина", "Одещина", "Миколаївщина",
    "Херсонщина",
)
REGION_SUFFIXES = ("щина", "ина")

# Keyword sets are matched against normalize()-d text (і/ї -> i, є -> e)
THREAT_KEYWORDS = ("бпла", "shahed", "дрон", "шахед", "rocket", "ракета", "uav", "missile")
ROCKET_KEYWORDS = ("ракета", "rocket", "missile")

# Line pattern parts, matched against cleaned (not normalized) text
THREAT_NOUNS = ("бпла", "uav", "шахед", "shahed", "дрон", "ракета", "rocket", "missile")
DIRECTION_WORDS = ("на", "по", "в", "to")

# Markers per settlement, summed over all lines of one message
MAX_COUNT_PER_LOCATION = 100

DEFAULT_NAMESPACE = "shahads"
DEFAULT_DATABASE_URL = "https://ukraine-radar-default-rtdb.europe-west1.firebasedatabase.app"
