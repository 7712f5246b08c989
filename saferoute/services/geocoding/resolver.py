import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

from saferoute.models.incident import LocationSource
from .client import GeocoderClient
from .coordinates import extract_coordinates
from .gazetteer import DEFAULT_LOCATION, GazetteerMatch, lookup_place
from .phrases import extract_location_phrase

logger = logging.getLogger(__name__)


class ResolvedLocation(NamedTuple):
    latitude: float
    longitude: float
    source: LocationSource
    name: Optional[str] = None


Strategy = Callable[[str, Optional[float]], Optional[ResolvedLocation]]


class LocationResolver:
    """
    Best-effort coordinate for a report, with provenance.

    Strategies run in fixed priority and the first result wins:
    explicit coordinates, gazetteer, geocoded phrase. If all come up empty
    the service-area default is returned. `resolve` never raises.
    """

    def __init__(self, geocoder: Optional[GeocoderClient], default: GazetteerMatch = DEFAULT_LOCATION):
        self.geocoder = geocoder
        self.default = default
        self.strategies: List[Tuple[LocationSource, Strategy]] = [
            (LocationSource.COORDINATES, self.from_coordinates),
            (LocationSource.GAZETTEER, self.from_gazetteer),
            (LocationSource.GEOCODED, self.from_geocoder),
        ]

    def from_coordinates(self, text: str, deadline: Optional[float] = None) -> Optional[ResolvedLocation]:
        match = extract_coordinates(text)
        if match is None:
            return None
        return ResolvedLocation(match.latitude, match.longitude, LocationSource.COORDINATES)

    def from_gazetteer(self, text: str, deadline: Optional[float] = None) -> Optional[ResolvedLocation]:
        match = lookup_place(text)
        if match is None:
            return None
        return ResolvedLocation(match.latitude, match.longitude, LocationSource.GAZETTEER, match.name)

    def from_geocoder(self, text: str, deadline: Optional[float] = None) -> Optional[ResolvedLocation]:
        if self.geocoder is None:
            return None
        phrase = extract_location_phrase(text)
        if not phrase:
            return None
        candidate = self.geocoder.geocode(phrase, deadline=deadline)
        if candidate is None:
            return None
        return ResolvedLocation(candidate.latitude, candidate.longitude, LocationSource.GEOCODED, candidate.display_name)

    def resolve(self, text: str, deadline: Optional[float] = None) -> ResolvedLocation:
        for source, strategy in self.strategies:
            try:
                result = strategy(text or "", deadline)
            except Exception as e:
                logger.error(f"Location strategy '{source.value}' failed: {e}", exc_info=True)
                continue
            if result is not None:
                return result

        logger.info("No location found in report text; using service-area default")
        return ResolvedLocation(self.default.latitude, self.default.longitude, LocationSource.DEFAULT)
