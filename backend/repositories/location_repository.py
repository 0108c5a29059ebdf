"""Location repository: list, filter, get, create."""
import uuid
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.location import Location
from status_core.geo import Bounds, check_lat, check_lng


def list_locations(session: Session, bounds: Bounds | None = None) -> list[Location]:
    """Return all locations (optionally only those inside bounds), newest first."""
    stmt = select(Location)
    if bounds is not None:
        stmt = stmt.where(
            Location.lat.between(bounds.south, bounds.north),
            Location.lng.between(bounds.west, bounds.east),
        )
    result = session.execute(stmt.order_by(Location.created_at.desc(), Location.name))
    return list(result.scalars().all())


def list_locations_by_city(session: Session, city: str) -> list[Location]:
    """Return locations in city (case-insensitive), ordered by name."""
    result = session.execute(
        select(Location)
        .where(func.lower(Location.city) == city.lower())
        .order_by(Location.name)
    )
    return list(result.scalars().all())


def list_locations_by_retailer(session: Session, retailer: str) -> list[Location]:
    """Return locations of retailer (case-insensitive), ordered by city then name."""
    result = session.execute(
        select(Location)
        .where(func.lower(Location.retailer) == retailer.lower())
        .order_by(Location.city, Location.name)
    )
    return list(result.scalars().all())


def get_location(session: Session, location_id: str) -> Optional[Location]:
    """Return a location by id or None."""
    return session.get(Location, location_id)


def create_location(
    session: Session,
    *,
    name: str,
    retailer: str,
    lat: float,
    lng: float,
    address: str,
    city: str,
    location_id: str | None = None,
) -> Location:
    """Create a location, commit, and return it. Id is generated if not provided.

    Raises ValueError for coordinates outside WGS84 degree ranges.
    """
    check_lat(lat)
    check_lng(lng)
    loc = Location(
        id=location_id or str(uuid.uuid4()),
        name=name,
        retailer=retailer,
        lat=lat,
        lng=lng,
        address=address,
        city=city,
    )
    session.add(loc)
    session.commit()
    session.refresh(loc)
    return loc


def count_locations(session: Session) -> int:
    """Return the number of locations (for seeding)."""
    result = session.execute(select(func.count()).select_from(Location))
    return result.scalar() or 0
