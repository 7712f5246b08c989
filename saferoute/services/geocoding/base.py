from abc import ABC, abstractmethod
from typing import List, NamedTuple
import logging

logger = logging.getLogger(__name__)


class GeocodeCandidate(NamedTuple):
    latitude: float
    longitude: float
    display_name: str


class GeocodingProvider(ABC):
    """
    Abstract forward-geocoding provider.

    Contract:
    - Input: free-text query, a viewbox "left,top,right,bottom" restricting
      the search area, and a maximum number of results.
    - Output: list of GeocodeCandidate, best first. May be empty.
    - SHOULD NOT raise upstream exceptions; return [] on failure.
      (GeocoderClient still guards against providers that do.)
    - Implementations must enforce a network timeout.
    """

    name = "base"

    @abstractmethod
    def search(self, query: str, viewbox: str, limit: int) -> List[GeocodeCandidate]:
        raise NotImplementedError


def parse_viewbox(viewbox: str):
    """Split a "left,top,right,bottom" viewbox into floats."""
    left, top, right, bottom = (float(part) for part in viewbox.split(","))
    return left, top, right, bottom
