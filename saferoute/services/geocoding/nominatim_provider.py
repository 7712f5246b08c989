import logging
from typing import Any, List

import requests

from .base import GeocodeCandidate, GeocodingProvider

logger = logging.getLogger(__name__)


class NominatimProvider(GeocodingProvider):
    """
    OpenStreetMap Nominatim search provider.

    - No API key required.
    - Uses a strict timeout.
    - Includes a User-Agent header as required by Nominatim usage policy.
    - Restricts results to the viewbox (bounded=1).
    - Never raises upstream exceptions; returns [] on failure.
    """

    BASE_URL = "https://nominatim.openstreetmap.org/search"
    name = "nominatim"

    def __init__(self, user_agent: str = "saferoute/0.1", timeout: float = 3.0):
        self.user_agent = user_agent
        self.timeout = timeout

    def search(self, query: str, viewbox: str, limit: int) -> List[GeocodeCandidate]:
        try:
            params = {
                "q": query,
                "format": "json",
                "limit": limit,
                "viewbox": viewbox,
                "bounded": 1,
            }
            headers = {
                "User-Agent": self.user_agent,
            }
            resp = requests.get(self.BASE_URL, params=params, headers=headers, timeout=self.timeout)
            if resp.status_code != 200:
                logger.warning(f"Nominatim search failed with status {resp.status_code} for '{query}'")
                return []

            data: Any = resp.json()
            if not isinstance(data, list):
                logger.warning(f"Nominatim returned unexpected payload for '{query}'")
                return []

            candidates = []
            for item in data:
                try:
                    candidates.append(GeocodeCandidate(
                        latitude=float(item["lat"]),
                        longitude=float(item["lon"]),
                        display_name=item.get("display_name") or query,
                    ))
                except (KeyError, TypeError, ValueError):
                    logger.debug(f"Skipping malformed Nominatim result: {item}")
            return candidates
        except Exception as e:
            logger.warning(f"Nominatim search error for '{query}': {e}")
            return []
