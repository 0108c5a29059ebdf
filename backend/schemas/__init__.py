# Schemas package
from .health import HealthResponse
from .locations import (
    AreaLocation,
    CityResponse,
    LocationDetail,
    LocationDetailResponse,
    LocationListResponse,
    LocationSummary,
    NearbyLocation,
    NearbyResponse,
    RetailerResponse,
)
from .reports import ReportCreate, ReportCreateResponse, ReportResponse, ReportSummary
from .stats import CityCount, StatsResponse

__all__ = [
    "AreaLocation",
    "CityCount",
    "CityResponse",
    "HealthResponse",
    "LocationDetail",
    "LocationDetailResponse",
    "LocationListResponse",
    "LocationSummary",
    "NearbyLocation",
    "NearbyResponse",
    "ReportCreate",
    "ReportCreateResponse",
    "ReportResponse",
    "ReportSummary",
    "RetailerResponse",
    "StatsResponse",
]
