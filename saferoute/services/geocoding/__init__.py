"""
Location resolution for incident reports.

Explicit coordinates, then the local gazetteer, then an external geocoder,
then the service-area default. Resolution always yields a coordinate.
"""

from saferoute.services.geocoding.base import GeocodeCandidate, GeocodingProvider
from saferoute.services.geocoding.client import GeocoderClient, build_geocoder_client, get_geocoding_provider
from saferoute.services.geocoding.coordinates import extract_coordinates, strip_coordinates
from saferoute.services.geocoding.gazetteer import BOUNDING_REGION, DEFAULT_LOCATION, GAZETTEER, lookup_place
from saferoute.services.geocoding.phrases import extract_location_phrase
from saferoute.services.geocoding.resolver import LocationResolver, ResolvedLocation

__all__ = [
    "BOUNDING_REGION",
    "DEFAULT_LOCATION",
    "GAZETTEER",
    "GeocodeCandidate",
    "GeocoderClient",
    "GeocodingProvider",
    "LocationResolver",
    "ResolvedLocation",
    "build_geocoder_client",
    "extract_coordinates",
    "extract_location_phrase",
    "get_geocoding_provider",
    "lookup_place",
    "strip_coordinates",
]
