"""Report submission route."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from api.serializers import report_response
from db import get_db
from repositories.location_repository import get_location
from repositories.report_repository import create_report as repo_create_report
from repositories.report_repository import list_recent_reports
from schemas.reports import ReportCreate, ReportCreateResponse
from status_core.anti_spam import FixedWindowRateLimiter, sanitize_note
from status_core.derive import derive_status
from status_core.ip import client_ip, ip_hash
from utils.config import DETAIL_REPORT_LIMIT, IP_HASH_SECRET, TRUSTED_PROXY_HOPS

LOG = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])


def get_rate_limiter(request: Request) -> FixedWindowRateLimiter:
    """FastAPI dependency: the app's submission rate limiter (set up in main)."""
    return request.app.state.rate_limiter


@router.post("/reports", response_model=ReportCreateResponse, status_code=status.HTTP_201_CREATED)
def create_report(
    body: ReportCreate,
    request: Request,
    db: Session = Depends(get_db),
    limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
) -> ReportCreateResponse:
    """Store a status report for a location and return the location's re-derived status."""
    if get_location(db, body.locationId) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")

    hashed = ip_hash(client_ip(request, TRUSTED_PROXY_HOPS), IP_HASH_SECRET)
    decision = limiter.hit(hashed)
    if not decision.ok:
        LOG.warning("Rate limit hit for %s..., retry after %ss", hashed[:8], decision.retry_after)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many reports, try again later",
            headers={"Retry-After": str(decision.retry_after)},
        )

    note = sanitize_note(body.note) if body.note else ""
    report = repo_create_report(
        db,
        location_id=body.locationId,
        status=body.status,
        note=note or None,
        ip_hash=hashed,
    )
    LOG.info("Report %s for location %s: %s", report.id, report.location_id, report.status)
    current = derive_status(list_recent_reports(db, body.locationId, DETAIL_REPORT_LIMIT))
    return ReportCreateResponse(report=report_response(report), currentStatus=current)
