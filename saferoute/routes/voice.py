"""
Voice report endpoint - receives a browser speech transcript with the
device position. Unlike SMS, this channel requires coordinates.
"""

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from saferoute.models.incident import Incident, IncidentSource, VoiceReportCreate
from saferoute.services.enrichment_service import IncidentValidationError, get_enrichment_service
from saferoute.services.incident_store import get_incident_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/voice-report", tags=["Voice"])


@router.post("", response_model=Incident, status_code=status.HTTP_201_CREATED)
async def submit_voice_report(report: VoiceReportCreate):
    if not report.transcription or not report.transcription.strip() or report.latitude is None or report.longitude is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: transcription, latitude, longitude"
        )

    try:
        incident = await run_in_threadpool(
            get_enrichment_service().enrich,
            report.transcription,
            IncidentSource.VOICE,
            report.latitude,
            report.longitude,
        )
    except IncidentValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        await run_in_threadpool(get_incident_store().add, incident)
    except Exception as e:
        logger.error(f"Error storing voice incident: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process voice report")

    logger.info(f"Voice incident created: {incident.id}")
    return incident
