"""
Incident endpoints - manual report submission, listing, deletion.
"""

from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.concurrency import run_in_threadpool

from saferoute.models.incident import Incident, IncidentCreate, IncidentSource
from saferoute.services.enrichment_service import IncidentValidationError, get_enrichment_service
from saferoute.services.incident_store import get_incident_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/incidents", tags=["Incidents"])


@router.get("", response_model=List[Incident])
async def list_incidents(
    time_period: Optional[str] = Query(
        None,
        alias="timePeriod",
        pattern="^(all|morning|afternoon|evening|night)$",
        description="Time-of-day bucket of the incident timestamp",
    ),
):
    try:
        return await run_in_threadpool(get_incident_store().list, time_period)
    except Exception as e:
        logger.error(f"GET /api/incidents failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch incidents")


@router.post("", response_model=Incident, status_code=status.HTTP_201_CREATED)
async def submit_incident(report: IncidentCreate):
    """
    Submit a manual report.

    This endpoint:
    1. Validates the report data
    2. Resolves location (unless coordinates are given) and classifies the category
    3. Stores the incident

    Returns the created incident.
    """
    service = get_enrichment_service()
    try:
        incident = await run_in_threadpool(
            service.enrich,
            report.description,
            IncidentSource.MANUAL,
            report.latitude,
            report.longitude,
            report.timestamp,
        )
    except IncidentValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        await run_in_threadpool(get_incident_store().add, incident)
    except Exception as e:
        logger.error(f"POST /api/incidents - storing incident failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create incident")

    return incident


@router.delete("/{incident_id}")
async def delete_incident(incident_id: str):
    try:
        deleted = await run_in_threadpool(get_incident_store().delete, incident_id)
    except Exception as e:
        logger.error(f"DELETE /api/incidents/{incident_id} failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete incident")

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Incident not found")
    return {"message": "Incident deleted successfully"}
