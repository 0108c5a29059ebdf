"""Location API routes: map list, nearby, machine detail."""
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from api.serializers import location_detail, location_summary
from db import get_db
from repositories.location_repository import get_location
from repositories.location_repository import list_locations as repo_list_locations
from schemas.locations import LocationDetailResponse, LocationListResponse, NearbyLocation, NearbyResponse
from status_core.geo import Bounds, LatLng, distance_km
from utils.config import DETAIL_REPORT_LIMIT, LIST_REPORT_LIMIT, LOCATIONS_CACHE_SECONDS

router = APIRouter(tags=["locations"])


def _parse_bounds(n: float | None, s: float | None, e: float | None, w: float | None) -> Bounds | None:
    """Build Bounds from the n/s/e/w query; all four or none."""
    values = (n, s, e, w)
    if all(v is None for v in values):
        return None
    if any(v is None for v in values):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bounds need all of n, s, e, w",
        )
    try:
        return Bounds(north=n, south=s, east=e, west=w)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/locations", response_model=LocationListResponse)
def list_locations(
    response: Response,
    n: float | None = None,
    s: float | None = None,
    e: float | None = None,
    w: float | None = None,
    db: Session = Depends(get_db),
) -> LocationListResponse:
    """List locations (optionally within a map viewport) with their current status."""
    bounds = _parse_bounds(n, s, e, w)
    locations = repo_list_locations(db, bounds)
    response.headers["Cache-Control"] = f"s-maxage={LOCATIONS_CACHE_SECONDS}"
    return LocationListResponse(
        locations=[location_summary(db, loc, LIST_REPORT_LIMIT) for loc in locations],
    )


@router.get("/locations/nearby", response_model=NearbyResponse)
def nearby_locations(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    limit: int = Query(default=5, ge=1, le=50),
    db: Session = Depends(get_db),
) -> NearbyResponse:
    """Closest locations to (lat, lng), nearest first."""
    origin = LatLng(lat, lng)
    ranked = sorted(
        ((distance_km(origin, LatLng(loc.lat, loc.lng)), loc) for loc in repo_list_locations(db)),
        key=lambda pair: pair[0],
    )
    return NearbyResponse(
        locations=[
            NearbyLocation(
                **location_summary(db, loc, LIST_REPORT_LIMIT).model_dump(),
                distanceKm=round(dist, 3),
            )
            for dist, loc in ranked[:limit]
        ],
    )


@router.get("/machine/{location_id}", response_model=LocationDetailResponse)
def get_machine(location_id: str, db: Session = Depends(get_db)) -> LocationDetailResponse:
    """One machine with its recent reports, derived status and confidence."""
    loc = get_location(db, location_id)
    if loc is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return LocationDetailResponse(location=location_detail(db, loc, DETAIL_REPORT_LIMIT))
