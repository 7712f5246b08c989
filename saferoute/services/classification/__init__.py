"""
Incident category classification.

Zero-shot model first, keyword matching when the model is unavailable.
"""

from saferoute.services.classification.base import ZeroShotProvider, ZeroShotResponse
from saferoute.services.classification.classifier import (
    CANDIDATE_LABELS,
    CategoryClassifier,
    category_from_label,
    get_category_classifier,
)
from saferoute.services.classification.huggingface_provider import HuggingFaceZeroShotProvider
from saferoute.services.classification.keyword_provider import classify_by_keywords

__all__ = [
    "CANDIDATE_LABELS",
    "CategoryClassifier",
    "HuggingFaceZeroShotProvider",
    "ZeroShotProvider",
    "ZeroShotResponse",
    "category_from_label",
    "classify_by_keywords",
    "get_category_classifier",
]
