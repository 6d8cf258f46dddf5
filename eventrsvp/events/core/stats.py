from collections import Counter
from collections.abc import Sequence
from datetime import UTC, datetime, tzinfo
from typing import Protocol

from eventrsvp.events.dtos import EventStatsDTO


class TimestampedRsvp(Protocol):
    created_at: datetime


def summarize_rsvps(rsvps: Sequence[TimestampedRsvp], tz: tzinfo | None = None) -> EventStatsDTO:
    """Count RSVPs per calendar day.

    Ties for the busiest day go to the earliest. The daily average is rounded
    to one decimal and is 0 without RSVPs.
    """
    per_day: Counter[str] = Counter()
    for rsvp in rsvps:
        created_at = rsvp.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)
        if tz is not None:
            created_at = created_at.astimezone(tz)
        per_day[created_at.date().isoformat()] += 1

    rsvps_by_day = dict(sorted(per_day.items()))
    peak_day = None
    peak_day_count = 0
    for day, count in rsvps_by_day.items():
        if count > peak_day_count:
            peak_day, peak_day_count = day, count

    return EventStatsDTO(
        total_rsvps=len(rsvps),
        rsvps_by_day=rsvps_by_day,
        unique_days=len(rsvps_by_day),
        avg_rsvps_per_day=round(len(rsvps) / len(rsvps_by_day), 1) if rsvps_by_day else 0.0,
        peak_day=peak_day,
        peak_day_count=peak_day_count,
    )
