"""
Statistics endpoint for the dashboard.
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from saferoute.models.incident import IncidentStats
from saferoute.services.incident_store import get_incident_store
from saferoute.services.stats_service import compute_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stats", tags=["Statistics"])


@router.get("", response_model=IncidentStats)
async def get_stats():
    try:
        incidents = await run_in_threadpool(get_incident_store().all)
        return compute_stats(incidents)
    except Exception as e:
        logger.error(f"GET /api/stats failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to get statistics")
