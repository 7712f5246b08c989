"""
Explicit coordinate detection in free text.

SMS and voice reporters sometimes paste a position straight into the message,
e.g. "lat: 40.5008 lng: -74.4474 someone following me" or "40.7128, -74.0060".
"""

import math
import re
from typing import NamedTuple, Optional, Tuple

COORDINATE_PATTERN = re.compile(
    r"(?<![\w.:-])"
    r"(?P<lat_label>\blat(?:itude)?\s*:?\s*)?"
    r"(?P<lat>-?\d+(?:\.\d*)?)"
    r"[,\s]+"
    r"(?P<lon_label>\b(?:lng|lon|long|longitude)\s*:?\s*)?"
    r"(?P<lon>-?\d+(?:\.\d*)?)",
    re.IGNORECASE,
)


class CoordinateMatch(NamedTuple):
    latitude: float
    longitude: float
    span: Tuple[int, int]


def _valid(latitude: float, longitude: float) -> bool:
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return False
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0


_TIME_SUFFIX = re.compile(r"\s*(?:am|pm|a\.m\.|p\.m\.)(?![a-z])", re.IGNORECASE)


def _looks_like_position(match: re.Match) -> bool:
    if match.group("lat_label") or match.group("lon_label"):
        return True
    # "at 10 30pm" is a time, not a position
    if _TIME_SUFFIX.match(match.string, match.end()):
        return False
    lat, lon = match.group("lat"), match.group("lon")
    if "." in lat and "." in lon:
        return True
    # whole-degree pairs ("40, -74") need a comma; mixed forms ("room 5 40.5") never match
    separator = match.string[match.end("lat"):match.start("lon")]
    return "." not in lat and "." not in lon and "," in separator


def extract_coordinates(text: Optional[str]) -> Optional[CoordinateMatch]:
    """
    Return the first latitude/longitude pair embedded in `text`.

    A numeric pair outside the valid latitude/longitude range is not a
    coordinate; scanning continues with the next occurrence. Never raises.
    """
    if not text:
        return None

    pos = 0
    while True:
        match = COORDINATE_PATTERN.search(text, pos)
        if match is None:
            return None
        # candidates may overlap ("5 40.5, -74.4"), so resume right after this start
        pos = match.start("lat") + 1
        if not _looks_like_position(match):
            continue
        latitude = float(match.group("lat"))
        longitude = float(match.group("lon"))
        if _valid(latitude, longitude):
            return CoordinateMatch(latitude, longitude, match.span())


def strip_coordinates(text: str, match: Optional[CoordinateMatch] = None) -> str:
    """
    Remove the detected coordinate substring and tidy the leftover text.
    Returns `text` stripped when no coordinate is present.
    """
    if match is None:
        match = extract_coordinates(text)
    if match is None:
        return text.strip()

    start, end = match.span
    remainder = f"{text[:start]} {text[end:]}"
    remainder = re.sub(r"\s+", " ", remainder).strip()
    return remainder.strip(" ,;")
