"""
Precompiled regex patterns.
"""
import re

from core.constants import (
    DIRECTION_WORDS, ROCKET_KEYWORDS, THREAT_KEYWORDS, THREAT_NOUNS,
)


def _alternation(words) -> str:
    return '|'.join(re.escape(w) for w in words)


# Whole-message scope and type checks, on normalize()-d text
THREAT_KEYWORDS_RE = re.compile(_alternation(THREAT_KEYWORDS), re.IGNORECASE)
ROCKET_KEYWORDS_RE = re.compile(_alternation(ROCKET_KEYWORDS), re.IGNORECASE)

# "2 БпЛА на Суми", "БпЛА на Київ", "1 UAV to Sumy" - on clean_line() output
THREAT_LINE_RE = re.compile(
    r'(\d+)?\s*(?:' + _alternation(THREAT_NOUNS) + r')\s+'
    r'(?:' + _alternation(DIRECTION_WORDS) + r')\s+'
    r"([а-яіїєґ'a-z\s-]+)",
    re.IGNORECASE,
)
