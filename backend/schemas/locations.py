"""Pydantic schemas for location API."""
from datetime import datetime

from pydantic import BaseModel

from schemas.reports import ReportSummary
from status_core.confidence import Confidence
from status_core.status import Status


class LocationSummary(BaseModel):
    """Location in map/list responses."""

    id: str
    name: str
    retailer: str
    lat: float
    lng: float
    address: str
    city: str
    currentStatus: Status | None = None
    lastReportAt: datetime | None = None
    totalReports: int = 0
    lastReports: list[ReportSummary] = []


class LocationListResponse(BaseModel):
    """Response for GET /locations."""

    locations: list[LocationSummary]


class NearbyLocation(LocationSummary):
    """Location with its distance from the requested point."""

    distanceKm: float


class NearbyResponse(BaseModel):
    """Response for GET /locations/nearby."""

    locations: list[NearbyLocation]


class LocationDetail(BaseModel):
    """Single machine with its recent reports."""

    id: str
    name: str
    retailer: str
    lat: float
    lng: float
    address: str
    city: str
    createdAt: datetime
    reports: list[ReportSummary]
    currentStatus: Status | None = None
    confidence: Confidence


class LocationDetailResponse(BaseModel):
    """Response for GET /machine/{id}."""

    location: LocationDetail


class AreaLocation(BaseModel):
    """Location in city/retailer listings."""

    id: str
    name: str
    retailer: str
    city: str
    address: str
    currentStatus: Status | None = None


class CityResponse(BaseModel):
    """Response for GET /stad/{city}."""

    city: str
    locations: list[AreaLocation]


class RetailerResponse(BaseModel):
    """Response for GET /keten/{retailer}."""

    retailer: str
    locations: list[AreaLocation]
