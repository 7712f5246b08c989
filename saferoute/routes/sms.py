"""
SMS webhook - Twilio posts inbound messages here and relays our TwiML reply.

The message body is the description; a coordinate pair typed into the
message is used as the location and removed from the stored description.
"""

from typing import Optional
import logging

from fastapi import APIRouter, Form, Response
from fastapi.concurrency import run_in_threadpool
from twilio.twiml.messaging_response import MessagingResponse

from saferoute.models.incident import IncidentSource
from saferoute.services.enrichment_service import IncidentValidationError, get_enrichment_service
from saferoute.services.incident_store import get_incident_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sms-report", tags=["SMS"])

PROMPT_MESSAGE = "Please send a description of the safety incident."
ERROR_MESSAGE = "Sorry, there was an error processing your report. Please try again."


def twiml_reply(message: str) -> Response:
    twiml = MessagingResponse()
    twiml.message(message)
    return Response(content=str(twiml), media_type="application/xml")


@router.post("")
async def receive_sms(
    body: Optional[str] = Form(None, alias="Body"),
    sender: Optional[str] = Form(None, alias="From"),
):
    logger.info(f"SMS received from {sender}")

    try:
        incident = await run_in_threadpool(
            get_enrichment_service().enrich,
            body,
            IncidentSource.SMS,
            reporter_phone=sender,
        )
    except IncidentValidationError:
        return twiml_reply(PROMPT_MESSAGE)
    except Exception as e:
        logger.error(f"Error processing SMS: {e}", exc_info=True)
        return twiml_reply(ERROR_MESSAGE)

    try:
        await run_in_threadpool(get_incident_store().add, incident)
    except Exception as e:
        logger.error(f"Error storing SMS incident: {e}", exc_info=True)
        return twiml_reply(ERROR_MESSAGE)

    logger.info(f"SMS incident created: {incident.id}")
    return twiml_reply(f"Thank you! Your {incident.category.value} report has been recorded. Stay safe!")
