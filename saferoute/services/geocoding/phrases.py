"""
Place-phrase extraction from report text.

Pattern families are plain data (`LOCATION_PATTERNS`) tried in order. Within
one family every match is collected and only the LAST one is kept, on the
assumption that reporters narrow down as they go ("walking on George St,
then near the Hub"). A phrase ends at punctuation or at the next
preposition, so "in the lot near the gym" yields two matches. The first
family yielding a non-empty phrase wins.
"""

import re
from typing import NamedTuple, Optional, Pattern, Sequence


class LocationPattern(NamedTuple):
    name: str
    regex: Pattern


LOCATION_PATTERNS: Sequence[LocationPattern] = (
    LocationPattern(
        "prepositional",
        re.compile(
            r"\b(?:at|near|on|in|by)\s+"
            r"(?!new\s+brunswick\b)"
            r"(?P<phrase>[a-z0-9][\w\s'&-]*?)"
            r"(?=\s+(?:at|near|on|in|by)\s|[,.;:!?\n]|$)",
            re.IGNORECASE,
        ),
    ),
    LocationPattern(
        "marker",
        re.compile(r"\blocation\s*:\s*(?P<phrase>[^,.;!?\n]+)", re.IGNORECASE),
    ),
)

_LEADING_ARTICLE = re.compile(r"^(?:the|a|an)\s+", re.IGNORECASE)

# "yelled at me", "out at night": preposition objects that are never places
NON_PLACES = frozenset({
    "me", "you", "him", "her", "them", "us", "it", "night", "all", "once", "time", "first",
})


def clean_phrase(phrase: str) -> str:
    phrase = re.sub(r"\s+", " ", phrase).strip(" \t,.;:!?'\"")
    phrase = _LEADING_ARTICLE.sub("", phrase).strip()
    if phrase.lower() in NON_PLACES:
        return ""
    return phrase


def extract_location_phrase(
    text: Optional[str],
    patterns: Sequence[LocationPattern] = LOCATION_PATTERNS,
) -> Optional[str]:
    """Return the most specific place phrase found in `text`, or None."""
    if not text:
        return None

    for pattern in patterns:
        matches = list(pattern.regex.finditer(text))
        if not matches:
            continue
        phrase = clean_phrase(matches[-1].group("phrase"))
        if phrase:
            return phrase
    return None
