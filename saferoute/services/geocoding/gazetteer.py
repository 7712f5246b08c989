"""
Static gazetteer for the New Brunswick / Rutgers service area.

Reports arriving by SMS or voice name places the way students say them
("near the library", "on college ave"), which a general geocoder resolves
poorly. Known names are matched here first.

Matching is substring containment over the lowercased text, and the FIRST
entry in table order wins. There is no longest-match preference: a generic
name listed early ("library") beats a longer name listed after it. Reorder
entries to change precedence.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple


class GazetteerEntry(NamedTuple):
    name: str
    latitude: float
    longitude: float


class GazetteerMatch(NamedTuple):
    name: str  # Title-cased for display
    latitude: float
    longitude: float


@dataclass(frozen=True)
class BoundingRegion:
    """Rectangular lat/lon box of the locally serviceable area."""
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.min_lat <= latitude <= self.max_lat
            and self.min_lon <= longitude <= self.max_lon
        )

    def as_viewbox(self) -> str:
        # Nominatim order: left,top,right,bottom (lon,lat,lon,lat)
        return f"{self.min_lon},{self.max_lat},{self.max_lon},{self.min_lat}"


# Order is significant (first match wins).
GAZETTEER: Tuple[GazetteerEntry, ...] = (
    GazetteerEntry("college avenue", 40.500800, -74.447400),
    GazetteerEntry("college ave", 40.500800, -74.447400),
    GazetteerEntry("busch campus", 40.523200, -74.458600),
    GazetteerEntry("livingston campus", 40.523700, -74.437000),
    GazetteerEntry("cook campus", 40.481000, -74.436500),
    GazetteerEntry("douglass campus", 40.484600, -74.434300),
    GazetteerEntry("george street", 40.496000, -74.444600),
    GazetteerEntry("easton avenue", 40.499000, -74.451000),
    GazetteerEntry("hamilton street", 40.498500, -74.453000),
    GazetteerEntry("voorhees mall", 40.499900, -74.446500),
    GazetteerEntry("student center", 40.502700, -74.451700),
    GazetteerEntry("library", 40.504649, -74.452597),
    GazetteerEntry("train station", 40.496600, -74.445500),
    GazetteerEntry("buccleuch park", 40.506300, -74.454500),
    GazetteerEntry("boyd park", 40.492000, -74.440000),
    GazetteerEntry("hospital", 40.494000, -74.451000),
    GazetteerEntry("stadium", 40.513800, -74.465000),
    GazetteerEntry("downtown", 40.494200, -74.444600),
)

# New Brunswick, NJ and the adjoining campus towns
BOUNDING_REGION = BoundingRegion(min_lat=40.42, max_lat=40.56, min_lon=-74.52, max_lon=-74.38)

# Qualifiers appended to a place phrase before geocoding, most likely first
LOCALITIES: Tuple[str, ...] = (
    "New Brunswick, NJ",
    "Piscataway, NJ",
    "Highland Park, NJ",
)

# New Brunswick centroid, used when nothing else resolves
DEFAULT_LOCATION = GazetteerMatch("New Brunswick", 40.4862, -74.4518)


def lookup_place(text: Optional[str], table: Tuple[GazetteerEntry, ...] = GAZETTEER) -> Optional[GazetteerMatch]:
    """
    Find the first gazetteer entry whose name occurs in `text`.

    Returns None when no entry matches. Deterministic, no I/O.
    """
    if not text:
        return None

    normalized = text.lower().strip()
    for entry in table:
        if entry.name in normalized:
            return GazetteerMatch(entry.name.title(), entry.latitude, entry.longitude)
    return None
