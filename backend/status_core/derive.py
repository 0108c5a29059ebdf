"""Current-status derivation: time-decayed weighted vote over a location's reports.

Each report weighs 1 / age_hours, doubled when it is inside the 48 h recency
window. Ages are floored at one hour, so reports from the last hour (and
future-dated ones) all weigh the maximum. The status with the largest total
wins; ties go to the first status in Status declaration order.
"""
import math
from datetime import datetime, timedelta
from typing import Iterable

from status_core.clock import as_utc, utcnow
from status_core.status import Status

RECENCY_WINDOW = timedelta(hours=48)
MIN_AGE_HOURS = 1.0
RECENT_WEIGHT = 2.0
OLD_WEIGHT = 1.0


def report_weight(created_at: datetime, now: datetime) -> float:
    """Weight of a single report created at created_at, seen from now (both UTC-aware)."""
    age_h = max(MIN_AGE_HOURS, (now - created_at).total_seconds() / 3600.0)
    # Cutoff is inclusive: a report exactly 48 h old still counts as recent.
    factor = RECENT_WEIGHT if created_at >= now - RECENCY_WINDOW else OLD_WEIGHT
    return factor / age_h


def status_weights(reports: Iterable, now: datetime | None = None) -> dict[Status, float]:
    """Accumulate the weight of every report into one bucket per status.

    Reports are any objects with .status and .created_at. Raises
    UnknownStatusError if a report's status is not a Status literal.
    """
    now = as_utc(now) if now is not None else utcnow()
    buckets: dict[Status, list[float]] = {s: [] for s in Status}
    for report in reports:
        status = Status.parse(report.status)
        buckets[status].append(report_weight(as_utc(report.created_at), now))
    # fsum is exactly rounded, so totals do not depend on report order.
    return {s: math.fsum(ws) for s, ws in buckets.items()}


def derive_status(reports: Iterable, now: datetime | None = None) -> Status | None:
    """Return the best-estimate current status, or None when there are no reports.

    Pass reports of a single location only. Result does not depend on input order.
    """
    reports = list(reports)
    if not reports:
        return None
    weights = status_weights(reports, now)
    best: Status | None = None
    for status in Status:
        if best is None or weights[status] > weights[best]:
            best = status
    return best
