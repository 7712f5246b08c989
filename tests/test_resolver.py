from saferoute.models.incident import LocationSource
from saferoute.services.geocoding.base import GeocodeCandidate
from saferoute.services.geocoding.client import GeocoderClient
from saferoute.services.geocoding.gazetteer import DEFAULT_LOCATION
from saferoute.services.geocoding.resolver import LocationResolver

from tests.fakes import FakeGeocodingProvider

HANDY_ST = GeocodeCandidate(40.4890, -74.4420, "Handy Street, New Brunswick, NJ")


def test_explicit_coordinates_win_regardless_of_other_sources(offline_resolver, unreachable_provider):
    result = offline_resolver.resolve("40.7128, -74.0060 suspicious person near the library")

    assert (result.latitude, result.longitude) == (40.7128, -74.0060)
    assert result.source == LocationSource.COORDINATES
    assert result.name is None
    assert unreachable_provider.calls == []


def test_gazetteer_match(offline_resolver, unreachable_provider):
    result = offline_resolver.resolve("Someone is following me near the library")

    assert (result.latitude, result.longitude) == (40.504649, -74.452597)
    assert result.source == LocationSource.GAZETTEER
    assert result.name == "Library"
    assert unreachable_provider.calls == []


def test_geocoded_phrase(sleep):
    provider = FakeGeocodingProvider(default=[HANDY_ST])
    resolver = LocationResolver(GeocoderClient(provider, sleep=sleep))

    result = resolver.resolve("Broken streetlight on Handy Street")

    assert (result.latitude, result.longitude) == (40.4890, -74.4420)
    assert result.source == LocationSource.GEOCODED
    assert result.name == "Handy Street, New Brunswick, NJ"
    assert provider.calls[0][0] == "Handy Street, New Brunswick, NJ"


def test_default_when_geocoder_unreachable(offline_resolver, unreachable_provider):
    result = offline_resolver.resolve("Man lurking on Redmond Plaza")

    assert (result.latitude, result.longitude) == (DEFAULT_LOCATION.latitude, DEFAULT_LOCATION.longitude)
    assert result.source == LocationSource.DEFAULT
    assert result.name is None
    # every reformulation tried exactly once, then gave up
    assert len(unreachable_provider.calls) == 4


def test_default_without_location_cues_skips_geocoder(offline_resolver, unreachable_provider):
    result = offline_resolver.resolve("I felt unsafe")

    assert result.source == LocationSource.DEFAULT
    assert unreachable_provider.calls == []


def test_default_without_geocoder():
    result = LocationResolver(geocoder=None).resolve("Man lurking on Redmond Plaza")
    assert result.source == LocationSource.DEFAULT


def test_failing_strategy_falls_through_to_next(offline_resolver):
    def broken(text, deadline=None):
        raise RuntimeError("bug")

    offline_resolver.strategies[0] = (LocationSource.COORDINATES, broken)
    result = offline_resolver.resolve("near the library")

    assert result.source == LocationSource.GAZETTEER
