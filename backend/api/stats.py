"""Aggregate stats over all locations."""
from collections import Counter

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.serializers import location_summary
from db import get_db
from repositories.location_repository import list_locations
from schemas.stats import CityCount, StatsResponse
from status_core.status import Status
from utils.config import LIST_REPORT_LIMIT

router = APIRouter(tags=["stats"])

TOP_CITIES = 8


@router.get("/stats", response_model=StatsResponse)
def get_stats(db: Session = Depends(get_db)) -> StatsResponse:
    """Counts per current status, share of broken machines, busiest cities, last report time."""
    summaries = [location_summary(db, loc, LIST_REPORT_LIMIT) for loc in list_locations(db)]
    total = len(summaries)
    by_status = Counter(s.currentStatus for s in summaries)
    broken = by_status[Status.OUT_OF_ORDER]
    cities = Counter(s.city or "Onbekend" for s in summaries)
    top = sorted(cities.items(), key=lambda kv: (-kv[1], kv[0]))[:TOP_CITIES]
    last_reports = [s.lastReportAt for s in summaries if s.lastReportAt is not None]
    return StatsResponse(
        total=total,
        working=by_status[Status.WORKING],
        issues=by_status[Status.ISSUES],
        broken=broken,
        unknown=by_status[None],
        brokenPct=round(broken / total * 100) if total else 0,
        topCities=[CityCount(city=c, count=n) for c, n in top],
        latestReportAt=max(last_reports) if last_reports else None,
    )
