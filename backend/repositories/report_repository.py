"""Report repository: create and read recent reports. Reports are never updated or deleted."""
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.report import Report
from status_core.status import Status


def create_report(
    session: Session,
    *,
    location_id: str,
    status: Status,
    note: str | None = None,
    ip_hash: str | None = None,
    created_at: datetime | None = None,
) -> Report:
    """Create a report, commit, and return it. created_at defaults to now (tests may backdate)."""
    report = Report(
        location_id=location_id,
        status=Status.parse(status).value,
        note=note,
        ip_hash=ip_hash,
    )
    if created_at is not None:
        report.created_at = created_at
    session.add(report)
    session.commit()
    session.refresh(report)
    return report


def list_recent_reports(session: Session, location_id: str, limit: int) -> list[Report]:
    """Return the limit most recent reports for one location, newest first."""
    result = session.execute(
        select(Report)
        .where(Report.location_id == location_id)
        .order_by(Report.created_at.desc(), Report.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


def count_reports_by_location(session: Session, location_id: str) -> int:
    """Return the total number of reports for a location."""
    result = session.execute(
        select(func.count()).select_from(Report).where(Report.location_id == location_id)
    )
    return result.scalar() or 0


def get_report(session: Session, report_id: str) -> Optional[Report]:
    """Return a report by id or None."""
    return session.get(Report, report_id)
