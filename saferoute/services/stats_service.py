"""
Statistics for the dashboard: counts by category, by time of day, and
by both, plus the ten most recent incidents.
"""

from collections import Counter
from typing import List

from saferoute.models.incident import Incident, IncidentStats, TimePeriod
from saferoute.utils.time_periods import get_time_period

RECENT_LIMIT = 10


def compute_stats(incidents: List[Incident]) -> IncidentStats:
    by_category = Counter()
    by_time_period = {period.value: 0 for period in TimePeriod}
    by_category_and_time = Counter()

    for incident in incidents:
        period = get_time_period(incident.timestamp).value
        by_category[incident.category.value] += 1
        by_time_period[period] += 1
        by_category_and_time[f"{incident.category.value}_{period}"] += 1

    return IncidentStats(
        total=len(incidents),
        by_category=dict(by_category),
        by_time_period=by_time_period,
        by_category_and_time=dict(by_category_and_time),
        recent=list(reversed(incidents[-RECENT_LIMIT:])),
    )
