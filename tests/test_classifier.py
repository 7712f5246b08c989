import pytest
import requests

from saferoute.models.incident import Category
from saferoute.services.classification.classifier import (
    CANDIDATE_LABELS,
    CategoryClassifier,
    category_from_label,
)
from saferoute.services.classification.huggingface_provider import HuggingFaceZeroShotProvider
from saferoute.services.classification.keyword_provider import classify_by_keywords

from tests.fakes import FakeResponse, FakeZeroShotProvider


@pytest.mark.parametrize("description, expected", [
    ("He kept harassing me outside the dorm", Category.HARASSMENT),
    ("Group tried to intimidate us", Category.HARASSMENT),
    ("I was attacked walking home", Category.ASSAULT),
    ("Two people got into a fight", Category.ASSAULT),
    ("Streetlight is out, very dark path", Category.LIGHTING_ISSUE),
    ("Poor visibility under the bridge", Category.LIGHTING_ISSUE),
    ("40.7128, -74.0060 suspicious person", Category.SUSPICIOUS_BEHAVIOR),
    ("Weird guy checking car doors", Category.SUSPICIOUS_BEHAVIOR),
    ("Pothole on the sidewalk", Category.OTHER),
    ("", Category.OTHER),
])
def test_keyword_fallback(description, expected):
    assert classify_by_keywords(description) == expected


def test_keyword_precedence_prefers_harassment_over_assault():
    # "threaten" (Harassment) is checked before "gun" (Assault)
    assert classify_by_keywords("threatened me at gunpoint") == Category.HARASSMENT


@pytest.mark.parametrize("description, expected", [
    ("The concert had begun when the crowd pushed", Category.OTHER),
    ("Loud music from a new establishment", Category.OTHER),
    ("Someone pulled a gun on us", Category.ASSAULT),
    ("He got stabbed outside the bar", Category.ASSAULT),
    ("Ex keeps stalking me", Category.HARASSMENT),
])
def test_short_keywords_match_at_word_start(description, expected):
    assert classify_by_keywords(description) == expected


def test_keyword_fallback_always_returns_a_category():
    for text in ["", "   ", "???", "a" * 500, "LIGHT", "12345"]:
        assert classify_by_keywords(text) in set(Category)


@pytest.mark.parametrize("label, expected", [
    ("harassment or intimidation", Category.HARASSMENT),
    ("assault or violence", Category.ASSAULT),
    ("poor lighting or visibility issue", Category.LIGHTING_ISSUE),
    ("suspicious behavior or activity", Category.SUSPICIOUS_BEHAVIOR),
    ("other safety concern", Category.OTHER),
    ("Harassment Or Intimidation", Category.HARASSMENT),
])
def test_label_mapping(label, expected):
    assert category_from_label(label) == expected


def test_primary_path_uses_top_label():
    provider = FakeZeroShotProvider(labels=["poor lighting or visibility issue", "assault or violence"])
    classifier = CategoryClassifier(provider)
    assert classifier.model_info == {"name": "fake-zero-shot", "version": "test"}

    # keyword fallback would say Assault ("attack")
    assert classifier.classify("attack near a dark corner") == Category.LIGHTING_ISSUE
    text, labels = provider.calls[0]
    assert text == "attack near a dark corner"
    assert labels == CANDIDATE_LABELS


def test_provider_exception_falls_back_to_keywords():
    classifier = CategoryClassifier(FakeZeroShotProvider(raises=True))
    assert classifier.classify("threatened me at gunpoint") == Category.HARASSMENT


def test_provider_error_response_falls_back_to_keywords():
    classifier = CategoryClassifier(FakeZeroShotProvider(error="401 Unauthorized"))
    assert classifier.classify("broken light by the bus stop") == Category.LIGHTING_ISSUE


def test_empty_ranking_falls_back_to_keywords():
    classifier = CategoryClassifier(FakeZeroShotProvider(labels=[]))
    assert classifier.classify("strange noises") == Category.SUSPICIOUS_BEHAVIOR


def test_no_provider_uses_keywords():
    classifier = CategoryClassifier(provider=None)
    assert not classifier.ai_enabled
    assert classifier.model_info is None
    assert classifier.classify("someone attacked me") == Category.ASSAULT


class TestHuggingFaceProvider:

    def make_provider(self):
        return HuggingFaceZeroShotProvider(
            api_key="hf_test", model="facebook/bart-large-mnli",
            api_url="https://hf.example/models", timeout=4.0,
        )

    def test_model_info(self):
        assert self.make_provider().get_model_info()["name"] == "facebook/bart-large-mnli"

    def test_disabled_without_key_makes_no_request(self, monkeypatch):
        def fail(*a, **kw):
            raise AssertionError("no request expected")

        monkeypatch.setattr(requests, "post", fail)
        provider = HuggingFaceZeroShotProvider(api_key="")

        response = provider.classify("text", CANDIDATE_LABELS)
        assert not provider.is_enabled()
        assert response.error
        assert response.labels == []

    def test_dict_payload(self, monkeypatch):
        captured = {}

        def fake_post(url, headers=None, json=None, timeout=None):
            captured.update(url=url, headers=headers, json=json, timeout=timeout)
            return FakeResponse(payload={
                "sequence": "text",
                "labels": ["assault or violence", "other safety concern"],
                "scores": [0.8, 0.2],
            })

        monkeypatch.setattr(requests, "post", fake_post)
        response = self.make_provider().classify("text", CANDIDATE_LABELS)

        assert response.error is None
        assert response.top_label == "assault or violence"
        assert captured["url"] == "https://hf.example/models/facebook/bart-large-mnli"
        assert captured["headers"]["Authorization"] == "Bearer hf_test"
        assert captured["json"]["parameters"]["candidate_labels"] == list(CANDIDATE_LABELS)
        assert captured["timeout"] == 4.0

    def test_list_of_label_score_payload_is_ranked(self, monkeypatch):
        payload = [
            {"label": "other safety concern", "score": 0.1},
            {"label": "harassment or intimidation", "score": 0.7},
            {"label": "assault or violence", "score": 0.2},
        ]
        monkeypatch.setattr(requests, "post", lambda *a, **kw: FakeResponse(payload=payload))

        response = self.make_provider().classify("text", CANDIDATE_LABELS)
        assert response.labels == ["harassment or intimidation", "assault or violence", "other safety concern"]
        assert response.scores == [0.7, 0.2, 0.1]
        assert response.ranked()[0] == ("harassment or intimidation", 0.7)

    def test_wrapped_dict_payload(self, monkeypatch):
        payload = [{"labels": ["suspicious behavior or activity"], "scores": [0.9]}]
        monkeypatch.setattr(requests, "post", lambda *a, **kw: FakeResponse(payload=payload))

        assert self.make_provider().classify("text", CANDIDATE_LABELS).top_label == "suspicious behavior or activity"

    @pytest.mark.parametrize("response", [
        FakeResponse(status_code=503, text="model loading"),
        FakeResponse(payload={"error": "Model is currently loading"}),
        FakeResponse(payload={"unexpected": True}),
        FakeResponse(payload=ValueError("not json")),
    ])
    def test_failures_are_reported_not_raised(self, monkeypatch, response):
        monkeypatch.setattr(requests, "post", lambda *a, **kw: response)

        result = self.make_provider().classify("text", CANDIDATE_LABELS)
        assert result.error
        assert result.labels == []

    def test_timeout_is_reported(self, monkeypatch):
        def slow(*a, **kw):
            raise requests.Timeout("read timed out")

        monkeypatch.setattr(requests, "post", slow)
        assert "timed out" in self.make_provider().classify("text", CANDIDATE_LABELS).error
