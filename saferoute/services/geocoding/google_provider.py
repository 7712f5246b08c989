import logging
from typing import Any, Dict, List, Optional

import requests

from .base import GeocodeCandidate, GeocodingProvider, parse_viewbox

logger = logging.getLogger(__name__)


class GoogleMapsProvider(GeocodingProvider):
    """
    Google Maps geocoding provider.

    - Opt-in: used only when GEOCODING_PROVIDER=google AND GOOGLE_MAPS_API_KEY is set.
    - The viewbox is passed as `bounds`, which Google treats as a bias, not a
      filter; GeocoderClient rejects out-of-region candidates either way.
    - Fails gracefully and never raises upstream exceptions.
    """

    BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
    name = "google"

    def __init__(self, api_key: Optional[str], timeout: float = 3.0):
        self.api_key = api_key
        self.timeout = timeout

    def search(self, query: str, viewbox: str, limit: int) -> List[GeocodeCandidate]:
        if not self.api_key:
            logger.info("GoogleMapsProvider called without API key; returning no candidates.")
            return []

        try:
            left, top, right, bottom = parse_viewbox(viewbox)
            params = {
                "address": query,
                "bounds": f"{bottom},{left}|{top},{right}",
                "key": self.api_key,
            }
            resp = requests.get(self.BASE_URL, params=params, timeout=self.timeout)
            if resp.status_code != 200:
                logger.warning(f"Google Maps geocode failed with status {resp.status_code}")
                return []

            data: Dict[str, Any] = resp.json()
            if data.get("status") not in ("OK", "ZERO_RESULTS"):
                logger.warning(f"Google Maps geocode returned status {data.get('status')}")
                return []

            candidates = []
            for result in (data.get("results") or [])[:limit]:
                location = (result.get("geometry") or {}).get("location") or {}
                if "lat" not in location or "lng" not in location:
                    continue
                candidates.append(GeocodeCandidate(
                    latitude=float(location["lat"]),
                    longitude=float(location["lng"]),
                    display_name=result.get("formatted_address") or query,
                ))
            return candidates
        except Exception as e:
            logger.warning(f"Google Maps geocode error: {e}")
            return []
