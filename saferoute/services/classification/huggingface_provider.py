"""
Hugging Face zero-shot provider.

Calls the Hugging Face Inference API (facebook/bart-large-mnli by default)
over HTTP. Fails gracefully: every problem is reported through
ZeroShotResponse.error and the caller falls back to keyword matching.
"""

from saferoute.services.classification.base import ZeroShotProvider, ZeroShotResponse
from saferoute.core.settings import settings
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

import requests

logger = logging.getLogger(__name__)


class HuggingFaceZeroShotProvider(ZeroShotProvider):
    """
    Zero-shot classification through the Hugging Face Inference API.

    Requires HUGGINGFACE_API_KEY in environment variables.
    """

    MODEL_VERSION = "1.0"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.api_key = api_key if api_key is not None else settings.HUGGINGFACE_API_KEY
        self.model = model or settings.HUGGINGFACE_MODEL
        self.api_url = (api_url or settings.HUGGINGFACE_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.AI_TIMEOUT_SECONDS
        self.enabled = bool(self.api_key and self.api_key.strip())

        if self.enabled:
            logger.info(f"Hugging Face zero-shot provider initialized: {self.model}")
        else:
            logger.info("Hugging Face zero-shot provider disabled: No API key configured")

    def is_enabled(self) -> bool:
        return self.enabled

    def get_model_info(self) -> Dict[str, str]:
        return {
            "name": self.model,
            "version": self.MODEL_VERSION
        }

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/{self.model}"

    def classify(self, text: str, candidate_labels: Sequence[str]) -> ZeroShotResponse:
        if not self.enabled:
            return ZeroShotResponse(model_name=self.model, error="Hugging Face API key not configured")

        try:
            response = requests.post(
                self.endpoint,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={
                    "inputs": text,
                    "parameters": {"candidate_labels": list(candidate_labels)},
                },
                timeout=self.timeout
            )

            if response.status_code != 200:
                raise Exception(f"Hugging Face API returned status {response.status_code}: {response.text[:200]}")

            labels, scores = self._parse_response(response.json())
            return ZeroShotResponse(labels=labels, scores=scores, model_name=self.model)

        except Exception as e:
            logger.warning(f"Hugging Face zero-shot call failed: {e}")
            return ZeroShotResponse(model_name=self.model, error=f"Hugging Face API error: {e}")

    def _parse_response(self, data: Any) -> Tuple[List[str], List[float]]:
        """
        Normalize the two payload shapes the API is known to return:

        - {"sequence": ..., "labels": [...], "scores": [...]} (possibly wrapped in a list)
        - [{"label": ..., "score": ...}, ...]
        """
        if isinstance(data, list) and data and isinstance(data[0], dict) and "labels" in data[0]:
            data = data[0]

        if isinstance(data, dict):
            if "error" in data:
                raise ValueError(f"API error payload: {data['error']}")
            labels = data.get("labels")
            scores = data.get("scores") or []
            if not isinstance(labels, list) or not labels:
                raise ValueError("Response has no labels")
            pairs = list(zip(labels, list(scores) + [0.0] * (len(labels) - len(scores))))
        elif isinstance(data, list) and data and all(isinstance(item, dict) and "label" in item for item in data):
            pairs = [(item["label"], item.get("score", 0.0)) for item in data]
        else:
            raise ValueError(f"Unrecognized response format: {type(data).__name__}")

        pairs.sort(key=lambda pair: float(pair[1]), reverse=True)
        return [str(label) for label, _ in pairs], [float(score) for _, score in pairs]
