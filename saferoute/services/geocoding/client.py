import logging
import time
from typing import Callable, List, Optional, Sequence

from saferoute.core.settings import settings
from .base import GeocodeCandidate, GeocodingProvider
from .gazetteer import BOUNDING_REGION, LOCALITIES, BoundingRegion
from .google_provider import GoogleMapsProvider
from .nominatim_provider import NominatimProvider

logger = logging.getLogger(__name__)


class GeocoderClient:
    """
    Turns a place phrase into one in-region coordinate.

    Tries a fixed list of query reformulations, one provider request each,
    pausing `delay_seconds` between reformulations. Candidates outside the
    bounding region are rejected even if the provider returned them.
    Never raises: every failure reads as "no candidates".
    """

    def __init__(
        self,
        provider: GeocodingProvider,
        region: BoundingRegion = BOUNDING_REGION,
        localities: Sequence[str] = LOCALITIES,
        limit: int = 5,
        delay_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.provider = provider
        self.region = region
        self.localities = tuple(localities)
        self.limit = limit
        self.delay_seconds = delay_seconds
        self._sleep = sleep
        self._clock = clock

    def build_queries(self, phrase: str) -> List[str]:
        """Phrase qualified with each locality, then the bare phrase; no duplicates."""
        phrase = phrase.strip()
        queries = []
        seen = set()
        for query in [f"{phrase}, {locality}" for locality in self.localities] + [phrase]:
            key = query.lower()
            if key in seen:
                continue
            seen.add(key)
            queries.append(query)
        return queries

    def _search(self, query: str) -> List[GeocodeCandidate]:
        try:
            return self.provider.search(query, self.region.as_viewbox(), self.limit) or []
        except Exception as e:
            logger.warning(f"Geocoder provider '{self.provider.name}' failed for '{query}': {e}")
            return []

    def geocode(self, phrase: Optional[str], deadline: Optional[float] = None) -> Optional[GeocodeCandidate]:
        """
        Return the first in-region candidate across all reformulations, or None.

        `deadline` is a monotonic-clock instant; no new request starts after it.
        """
        if not phrase or not phrase.strip():
            return None

        queries = self.build_queries(phrase)
        for index, query in enumerate(queries):
            if deadline is not None and self._clock() >= deadline:
                logger.warning(f"Geocoding deadline reached before query '{query}'")
                return None

            for candidate in self._search(query):
                if self.region.contains(candidate.latitude, candidate.longitude):
                    logger.info(f"Geocoded '{phrase}' via '{query}' -> {candidate.display_name}")
                    return candidate
                logger.debug(
                    f"Rejected out-of-region candidate ({candidate.latitude}, {candidate.longitude}) for '{query}'"
                )

            if index < len(queries) - 1:
                self._sleep(self.delay_seconds)

        logger.info(f"No in-region geocode for '{phrase}' after {len(queries)} queries")
        return None


def get_geocoding_provider() -> GeocodingProvider:
    """
    Resolve the active geocoding provider based on settings.

    Rules:
    - Default: Nominatim (no API key required).
    - GEOCODING_PROVIDER='google' AND GOOGLE_MAPS_API_KEY set: Google.
    """
    provider_name = (settings.GEOCODING_PROVIDER or "nominatim").lower()

    if provider_name == "google":
        if settings.GOOGLE_MAPS_API_KEY:
            logger.info("Geocoding provider initialized: google")
            return GoogleMapsProvider(
                api_key=settings.GOOGLE_MAPS_API_KEY,
                timeout=settings.GEOCODER_TIMEOUT_SECONDS,
            )
        logger.warning("GEOCODING_PROVIDER=google but GOOGLE_MAPS_API_KEY is not set. Falling back to Nominatim.")

    logger.info("Geocoding provider initialized: nominatim")
    return NominatimProvider(
        user_agent=settings.GEOCODER_USER_AGENT,
        timeout=settings.GEOCODER_TIMEOUT_SECONDS,
    )


def build_geocoder_client(provider: Optional[GeocodingProvider] = None) -> GeocoderClient:
    return GeocoderClient(
        provider=provider or get_geocoding_provider(),
        limit=settings.GEOCODER_RESULT_LIMIT,
        delay_seconds=settings.GEOCODER_DELAY_SECONDS,
    )
