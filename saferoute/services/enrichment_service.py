"""
Enrichment service - turns a raw report into a stored-ready Incident.

Flow:
1. Validate the description (the only hard failure)
2. Location: caller coordinates if given, otherwise the LocationResolver
3. Strip an embedded coordinate pair from the description
4. Category from the CategoryClassifier
5. Assemble the Incident (new id, createdAt, timestamp)

Location and category are best-effort: upstream outages degrade precision
but never block incident creation.
"""

from datetime import datetime, timezone
from typing import Optional
import logging
import math
import time
import uuid

from saferoute.core.settings import settings
from saferoute.models.incident import Incident, IncidentSource, LocationSource
from saferoute.services.classification import CategoryClassifier, get_category_classifier
from saferoute.services.geocoding import LocationResolver, ResolvedLocation, build_geocoder_client
from saferoute.services.geocoding.coordinates import extract_coordinates, strip_coordinates

logger = logging.getLogger(__name__)


class IncidentValidationError(ValueError):
    """Caller-facing validation failure; no incident is created."""


class EnrichmentService:
    """Composes location resolution and classification into one Incident."""

    def __init__(
        self,
        resolver: LocationResolver,
        classifier: CategoryClassifier,
        deadline_seconds: Optional[float] = None
    ):
        self.resolver = resolver
        self.classifier = classifier
        self.deadline_seconds = deadline_seconds

    def _explicit_location(self, latitude: Optional[float], longitude: Optional[float]) -> Optional[ResolvedLocation]:
        if latitude is None and longitude is None:
            return None
        if latitude is None or longitude is None:
            raise IncidentValidationError("Both latitude and longitude are required when either is given")
        try:
            latitude, longitude = float(latitude), float(longitude)
        except (TypeError, ValueError):
            raise IncidentValidationError("Latitude and longitude must be numbers")
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise IncidentValidationError("Latitude and longitude must be finite numbers")
        if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
            raise IncidentValidationError("Latitude or longitude out of range")
        return ResolvedLocation(latitude, longitude, LocationSource.COORDINATES)

    def enrich(
        self,
        description: Optional[str],
        source: IncidentSource = IncidentSource.MANUAL,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        timestamp: Optional[datetime] = None,
        reporter_phone: Optional[str] = None
    ) -> Incident:
        """
        Enrich a raw report.

        Raises:
            IncidentValidationError: description missing/empty, or an invalid coordinate pair
        """
        if description is None or not description.strip():
            raise IncidentValidationError("Missing required field: description")

        deadline = None
        if self.deadline_seconds:
            deadline = time.monotonic() + self.deadline_seconds

        location = self._explicit_location(latitude, longitude)
        if location is None:
            location = self.resolver.resolve(description, deadline=deadline)

        coordinate_match = extract_coordinates(description)
        cleaned = description.strip()
        if coordinate_match is not None:
            cleaned = strip_coordinates(description, coordinate_match) or description.strip()

        category = self.classifier.classify(cleaned)

        now = datetime.now(timezone.utc)
        incident = Incident(
            id=uuid.uuid4().hex,
            description=cleaned,
            category=category,
            latitude=location.latitude,
            longitude=location.longitude,
            location_source=location.source,
            location_name=location.name if location.source in (LocationSource.GAZETTEER, LocationSource.GEOCODED) else None,
            timestamp=timestamp or now,
            created_at=now,
            source=source,
            reporter_phone=reporter_phone,
        )
        logger.info(
            f"Enriched {source.value} report {incident.id}: category={category.value}, "
            f"location={location.source.value} ({location.latitude}, {location.longitude})"
        )
        return incident


# Global service instance (singleton)
_service: Optional[EnrichmentService] = None


def get_enrichment_service() -> EnrichmentService:
    global _service
    if _service is None:
        _service = EnrichmentService(
            resolver=LocationResolver(build_geocoder_client()),
            classifier=get_category_classifier(),
            deadline_seconds=settings.ENRICHMENT_DEADLINE_SECONDS,
        )
    return _service
