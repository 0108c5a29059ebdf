"""Pydantic schemas for stats API."""
from datetime import datetime

from pydantic import BaseModel


class CityCount(BaseModel):
    city: str
    count: int


class StatsResponse(BaseModel):
    """Aggregate counts over every location's current status."""

    total: int
    working: int
    issues: int
    broken: int
    unknown: int
    brokenPct: int
    topCities: list[CityCount]
    latestReportAt: datetime | None = None
