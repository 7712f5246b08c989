"""
Health check endpoint.
Reports which optional integrations are configured.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from saferoute.core.settings import settings
from saferoute.services.classification import get_category_classifier

router = APIRouter(prefix="/api/health", tags=["Health"])


@router.get("")
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    classifier = get_category_classifier()
    model_info = classifier.model_info
    return {
        "status": "OK",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "features": {
            "ai": classifier.ai_enabled,
            "aiModel": model_info["name"] if model_info else None,
            "sms": bool(settings.TWILIO_ACCOUNT_SID and settings.TWILIO_AUTH_TOKEN),
            "voice": True,  # Browser speech recognition, always available
        },
    }
