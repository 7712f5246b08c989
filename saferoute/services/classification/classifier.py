"""
Category classifier.

Primary path: zero-shot model ranks five natural-language label phrases and
the top label is mapped back to a Category. Any failure (disabled provider,
timeout, auth error, malformed payload) drops to keyword matching on the raw
description. classify() always returns a Category and never raises.
"""

from typing import Dict, Optional, Sequence, Tuple
import logging

from saferoute.core.settings import settings
from saferoute.models.incident import Category
from saferoute.services.classification.base import ZeroShotProvider
from saferoute.services.classification.huggingface_provider import HuggingFaceZeroShotProvider
from saferoute.services.classification.keyword_provider import classify_by_keywords, match_keywords

logger = logging.getLogger(__name__)

CANDIDATE_LABELS: Tuple[str, ...] = (
    "harassment or intimidation",
    "assault or violence",
    "poor lighting or visibility issue",
    "suspicious behavior or activity",
    "other safety concern",
)

# Top label -> category, checked in this order
LABEL_KEYWORDS: Sequence[Tuple[Category, Tuple[str, ...]]] = (
    (Category.HARASSMENT, ("harassment", "intimidation")),
    (Category.ASSAULT, ("assault", "violence")),
    (Category.LIGHTING_ISSUE, ("lighting", "visibility")),
    (Category.SUSPICIOUS_BEHAVIOR, ("suspicious", "behavior")),
)


def category_from_label(label: str) -> Category:
    return match_keywords(label.lower(), LABEL_KEYWORDS) or Category.OTHER


class CategoryClassifier:
    """Zero-shot classification with a keyword availability floor."""

    def __init__(
        self,
        provider: Optional[ZeroShotProvider] = None,
        candidate_labels: Sequence[str] = CANDIDATE_LABELS
    ):
        self.provider = provider
        self.candidate_labels = tuple(candidate_labels)

    @property
    def ai_enabled(self) -> bool:
        return self.provider is not None and self.provider.is_enabled()

    @property
    def model_info(self) -> Optional[Dict[str, str]]:
        return self.provider.get_model_info() if self.ai_enabled else None

    def classify(self, description: str) -> Category:
        if not self.ai_enabled:
            return classify_by_keywords(description)

        try:
            response = self.provider.classify(description, self.candidate_labels)
            if response.error:
                raise ValueError(response.error)
            if not response.top_label:
                raise ValueError("empty label ranking")

            logger.debug(f"Zero-shot ranking from {response.model_name}: {response.ranked()}")
            category = category_from_label(response.top_label)
            logger.info(f"Zero-shot top label '{response.top_label}' -> {category.value}")
            return category

        except Exception as e:
            logger.warning(f"Zero-shot classification unavailable, using keyword fallback: {e}")
            return classify_by_keywords(description)


# Global classifier instance (singleton)
_classifier: Optional[CategoryClassifier] = None


def get_category_classifier() -> CategoryClassifier:
    """
    Build the classifier from settings on first use.

    AI_ENABLED=false or a missing HUGGINGFACE_API_KEY leaves keyword matching only.
    """
    global _classifier
    if _classifier is not None:
        return _classifier

    provider = None
    if not settings.AI_ENABLED:
        logger.info("AI classification is disabled globally (AI_ENABLED=false), using keyword matching only")
    else:
        hf_provider = HuggingFaceZeroShotProvider()
        if hf_provider.is_enabled():
            provider = hf_provider
            logger.info(f"Zero-shot classifier enabled: {hf_provider.get_model_info()['name']}")
        else:
            logger.info("HUGGINGFACE_API_KEY not set, using keyword matching only")

    _classifier = CategoryClassifier(provider=provider)
    return _classifier
