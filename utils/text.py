"""
Text utilities - normalization for matching and line cleanup for parsing.
"""
import re

# Ukrainian letters folded to the Latin look-alikes used for matching
_LETTER_FOLD = str.maketrans({
    'і': 'i',
    'ї': 'i',
    'є': 'e',
    'ґ': 'g',
})
_APOSTROPHES = re.compile(r"[ʼ’`']")

_PAREN_URLS = re.compile(r'\(https?://[^)]+\)')
_URLS = re.compile(r'https?://\S+')
# ➡ ▶ ⚡ ❤ and the emoji variation selector
_PICTOGRAPHS = re.compile('[➡▶⚡❤️]')
# Anything but letters, digits, whitespace and hyphen (\w also matches "_")
_NOISE = re.compile(r'[^\w\s-]|_')
_MULTI_SPACE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """
    Canonical form for keyword and name comparison.

    Lower-cases, unifies apostrophes and folds і/ї/є/ґ, so that
    "Київ", "КИЇВ" and "київ" compare equal.
    """
    if not text:
        return ""
    text = _APOSTROPHES.sub("'", text.lower())
    return text.translate(_LETTER_FOLD)


def clean_line(line: str) -> str:
    """
    Strip URLs, decorative symbols and punctuation from a message line.

    "➡️ 2 БпЛА на Суми (https://t.me/x)" -> "2 БпЛА на Суми"
    """
    if not line:
        return ""
    line = _PAREN_URLS.sub('', line)
    line = _URLS.sub('', line)
    line = _PICTOGRAPHS.sub('', line)
    line = _APOSTROPHES.sub('', line)
    line = _NOISE.sub(' ', line)
    return _MULTI_SPACE.sub(' ', line).strip()
