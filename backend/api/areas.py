"""City (stad) and retailer (keten) listing routes."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from api.serializers import area_location
from db import get_db
from repositories.location_repository import list_locations_by_city, list_locations_by_retailer
from schemas.locations import CityResponse, RetailerResponse
from utils.config import AREA_REPORT_LIMIT

router = APIRouter(tags=["areas"])


@router.get("/stad/{city}", response_model=CityResponse)
def list_city(city: str, db: Session = Depends(get_db)) -> CityResponse:
    """Locations in a city (case-insensitive), by name."""
    locations = list_locations_by_city(db, city)
    if not locations:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No locations found for city={city}")
    return CityResponse(
        city=city,
        locations=[area_location(db, loc, AREA_REPORT_LIMIT) for loc in locations],
    )


@router.get("/keten/{retailer}", response_model=RetailerResponse)
def list_retailer(retailer: str, db: Session = Depends(get_db)) -> RetailerResponse:
    """Locations of a retailer chain (case-insensitive), by city."""
    locations = list_locations_by_retailer(db, retailer)
    if not locations:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No locations found for retailer={retailer}",
        )
    return RetailerResponse(
        retailer=retailer,
        locations=[area_location(db, loc, AREA_REPORT_LIMIT) for loc in locations],
    )
