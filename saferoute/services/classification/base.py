"""
Zero-shot Classifier Base Interface.

Defines the contract for remote zero-shot classification providers.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class ZeroShotResponse:
    """
    Ranked labels returned by a zero-shot provider.

    `labels` is best-first. If the call failed, `error` carries the reason
    and `labels` is empty.
    """

    def __init__(
        self,
        labels: Optional[List[str]] = None,
        scores: Optional[List[float]] = None,
        model_name: str = "",
        error: Optional[str] = None
    ):
        self.labels = labels or []
        self.scores = scores or []
        self.model_name = model_name
        self.error = error

    @property
    def top_label(self) -> Optional[str]:
        return self.labels[0] if self.labels else None

    def ranked(self) -> List[tuple]:
        return list(zip(self.labels, self.scores))


class ZeroShotProvider(ABC):
    """
    Abstract base class for zero-shot classification providers.

    classify() MUST:
    - Return a ZeroShotResponse even on failure (error set, no labels)
    - Respect its timeout
    """

    @abstractmethod
    def is_enabled(self) -> bool:
        """True if the provider is configured and ready."""
        pass

    @abstractmethod
    def get_model_info(self) -> Dict[str, str]:
        """Dict with 'name' and 'version' keys."""
        pass

    @abstractmethod
    def classify(self, text: str, candidate_labels: Sequence[str]) -> ZeroShotResponse:
        """
        Rank `candidate_labels` against `text`.

        Args:
            text: Report description
            candidate_labels: Natural-language label phrases

        Returns:
            ZeroShotResponse, labels sorted by descending score
        """
        pass
