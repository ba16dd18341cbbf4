"""
Threat classification helpers.
"""
from core.constants import ThreatType
from parsers.patterns import ROCKET_KEYWORDS_RE, THREAT_KEYWORDS_RE


def is_threat_message(text: str) -> bool:
    """True if normalized text mentions drones, Shaheds or rockets at all."""
    if not text:
        return False
    return bool(THREAT_KEYWORDS_RE.search(text))


def classify_threat(text: str) -> ThreatType:
    """
    Determine threat type of a (normalized) message.

    Priority order:
    1. Rocket (ракета / rocket / missile)
    2. Shahed (everything else in scope)
    """
    if text and ROCKET_KEYWORDS_RE.search(text):
        return ThreatType.ROCKET
    return ThreatType.SHAHED
