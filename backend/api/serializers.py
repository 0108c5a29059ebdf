"""Build API response models from ORM rows, attaching the derived status."""
from sqlalchemy.orm import Session

from models.location import Location
from models.report import Report
from repositories.report_repository import count_reports_by_location, list_recent_reports
from schemas.locations import AreaLocation, LocationDetail, LocationSummary
from schemas.reports import ReportResponse, ReportSummary
from status_core.clock import as_utc
from status_core.confidence import derive_confidence
from status_core.derive import derive_status
from status_core.status import Status


def report_summary(r: Report) -> ReportSummary:
    """Build ReportSummary from model instance."""
    return ReportSummary(
        id=r.id,
        status=Status.parse(r.status),
        note=r.note,
        createdAt=as_utc(r.created_at),
    )


def report_response(r: Report) -> ReportResponse:
    """Build ReportResponse from model instance."""
    return ReportResponse(
        id=r.id,
        locationId=r.location_id,
        status=Status.parse(r.status),
        note=r.note,
        createdAt=as_utc(r.created_at),
    )


def location_summary(db: Session, loc: Location, report_limit: int) -> LocationSummary:
    """Location with its report_limit most recent reports and the status derived from them."""
    reports = list_recent_reports(db, loc.id, report_limit)
    return LocationSummary(
        id=loc.id,
        name=loc.name,
        retailer=loc.retailer,
        lat=loc.lat,
        lng=loc.lng,
        address=loc.address,
        city=loc.city,
        currentStatus=derive_status(reports),
        lastReportAt=as_utc(reports[0].created_at) if reports else None,
        totalReports=count_reports_by_location(db, loc.id),
        lastReports=[report_summary(r) for r in reports],
    )


def location_detail(db: Session, loc: Location, report_limit: int) -> LocationDetail:
    """Machine detail: recent reports, derived status and confidence."""
    reports = list_recent_reports(db, loc.id, report_limit)
    return LocationDetail(
        id=loc.id,
        name=loc.name,
        retailer=loc.retailer,
        lat=loc.lat,
        lng=loc.lng,
        address=loc.address,
        city=loc.city,
        createdAt=as_utc(loc.created_at),
        reports=[report_summary(r) for r in reports],
        currentStatus=derive_status(reports),
        confidence=derive_confidence(reports),
    )


def area_location(db: Session, loc: Location, report_limit: int) -> AreaLocation:
    """Compact location for city/retailer listings."""
    return AreaLocation(
        id=loc.id,
        name=loc.name,
        retailer=loc.retailer,
        city=loc.city,
        address=loc.address,
        currentStatus=derive_status(list_recent_reports(db, loc.id, report_limit)),
    )
