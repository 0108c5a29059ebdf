"""Pydantic schemas for report API."""
from datetime import datetime

from pydantic import BaseModel, Field

from status_core.status import Status


class ReportCreate(BaseModel):
    """Payload for submitting a report. Notes are sanitized (and capped at 280) after validation."""

    locationId: str = Field(..., min_length=1)
    status: Status
    note: str | None = Field(default=None, max_length=2000)


class ReportSummary(BaseModel):
    """Report as embedded in location responses."""

    id: str
    status: Status
    note: str | None = None
    createdAt: datetime


class ReportResponse(ReportSummary):
    """A stored report."""

    locationId: str


class ReportCreateResponse(BaseModel):
    """Response for POST /reports: the stored report and the location's new status."""

    report: ReportResponse
    currentStatus: Status | None = None
