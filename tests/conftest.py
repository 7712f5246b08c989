import pytest
from fastapi.testclient import TestClient

from saferoute.services import enrichment_service, incident_store
from saferoute.services.classification import classifier as classifier_module
from saferoute.services.classification.classifier import CategoryClassifier
from saferoute.services.enrichment_service import EnrichmentService
from saferoute.services.geocoding.client import GeocoderClient
from saferoute.services.geocoding.resolver import LocationResolver
from saferoute.services.incident_store import FileIncidentStore

from tests.fakes import RecordingSleep, UnreachableGeocodingProvider


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def unreachable_provider():
    return UnreachableGeocodingProvider()


@pytest.fixture
def offline_resolver(unreachable_provider, sleep):
    return LocationResolver(GeocoderClient(unreachable_provider, sleep=sleep))


@pytest.fixture
def keyword_classifier():
    return CategoryClassifier(provider=None)


@pytest.fixture
def offline_service(offline_resolver, keyword_classifier):
    """Enrichment with the geocoder unreachable and no zero-shot model."""
    return EnrichmentService(offline_resolver, keyword_classifier, deadline_seconds=5.0)


@pytest.fixture
def store(tmp_path):
    return FileIncidentStore(str(tmp_path / "data" / "incidents.json"))


@pytest.fixture
def client(monkeypatch, offline_service, keyword_classifier, store):
    monkeypatch.setattr(enrichment_service, "_service", offline_service)
    monkeypatch.setattr(incident_store, "_store", store)
    monkeypatch.setattr(classifier_module, "_classifier", keyword_classifier)

    from saferoute.main import app

    with TestClient(app) as test_client:
        yield test_client
