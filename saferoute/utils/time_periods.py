"""
Time-of-day buckets for incident filtering and statistics.

Buckets use the local hour of the incident timestamp:
06-12 morning, 12-17 afternoon, 17-21 evening, otherwise night.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Union
from zoneinfo import ZoneInfo
import logging

from saferoute.core.settings import settings
from saferoute.models.incident import Incident, TimePeriod

logger = logging.getLogger(__name__)


def _to_datetime(timestamp: Union[datetime, str]) -> datetime:
    if isinstance(timestamp, datetime):
        return timestamp
    # fromisoformat() before 3.11 rejects a trailing "Z"
    return datetime.fromisoformat(str(timestamp).replace("Z", "+00:00"))


def get_time_period(timestamp: Union[datetime, str], tz: Optional[str] = None) -> TimePeriod:
    """
    Bucket a timestamp by its local hour.
    Naive timestamps are taken as already local.
    """
    moment = _to_datetime(timestamp)
    if moment.tzinfo is not None:
        moment = moment.astimezone(ZoneInfo(tz or settings.LOCAL_TIMEZONE))

    hour = moment.hour
    if 6 <= hour < 12:
        return TimePeriod.MORNING
    if 12 <= hour < 17:
        return TimePeriod.AFTERNOON
    if 17 <= hour < 21:
        return TimePeriod.EVENING
    return TimePeriod.NIGHT


def filter_by_time_period(incidents: Iterable[Incident], period: Optional[str]) -> List[Incident]:
    """Keep incidents in `period`; None or "all" keeps everything."""
    incidents = list(incidents)
    if not period or period == "all":
        return incidents

    wanted = TimePeriod(period)
    return [incident for incident in incidents if get_time_period(incident.timestamp) == wanted]
