"""Confidence indicator for a derived status, based on how many reports back it."""
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable

from status_core.clock import as_utc, utcnow

DAY = timedelta(hours=24)
WEEK = timedelta(days=7)


class Confidence(str, Enum):
    """How much weight a reader should give the current status."""

    low = "low"
    medium = "medium"
    high = "high"


def derive_confidence(reports: Iterable, now: datetime | None = None) -> Confidence:
    """Grade report volume: recent counts (24 h, 7 d, inclusive) and total count."""
    now = as_utc(now) if now is not None else utcnow()
    total = last24h = last7d = 0
    for report in reports:
        total += 1
        age = now - as_utc(report.created_at)
        if age <= DAY:
            last24h += 1
        if age <= WEEK:
            last7d += 1
    if not total:
        return Confidence.low
    if last24h >= 3 or last7d >= 5 or total >= 20:
        return Confidence.high
    if last24h >= 1 or last7d >= 2 or total >= 5:
        return Confidence.medium
    return Confidence.low
