"""statiestatus.nl: FastAPI backend for deposit return machine status."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
from fastapi.middleware.cors import CORSMiddleware

from db import SessionLocal
from api.areas import router as areas_router
from api.locations import router as locations_router
from api.reports import router as reports_router
from api.routes import router
from api.stats import router as stats_router
from repositories.location_repository import count_locations, create_location as repo_create_location
from status_core.anti_spam import FixedWindowRateLimiter
from utils.config import CORS_ALLOW_ORIGINS, RATE_LIMIT_MAX, RATE_LIMIT_WINDOW_SECONDS, SEED_LOCATIONS

LOG = logging.getLogger(__name__)

# Demo machines for an empty database.
SEED_DATA = [
    {"name": "AH Gelderlandplein", "retailer": "Albert Heijn", "lat": 52.3337, "lng": 4.8878,
     "address": "Gelderlandplein 1", "city": "Amsterdam"},
    {"name": "Jumbo Damrak", "retailer": "Jumbo", "lat": 52.3740, "lng": 4.8966,
     "address": "Damrak 35", "city": "Amsterdam"},
    {"name": "Lidl De Pijp", "retailer": "Lidl", "lat": 52.3511, "lng": 4.8965,
     "address": "Ferd. Bolstraat 100", "city": "Amsterdam"},
]

app = FastAPI(
    title="statiestatus.nl",
    description="Community status of bottle deposit return machines",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Submission counters live on the app, not in module globals.
app.state.rate_limiter = FixedWindowRateLimiter(
    window_seconds=RATE_LIMIT_WINDOW_SECONDS,
    max_hits=RATE_LIMIT_MAX,
)

app.include_router(router, prefix="/api")
app.include_router(locations_router, prefix="/api")
app.include_router(areas_router, prefix="/api")
app.include_router(reports_router, prefix="/api")
app.include_router(stats_router, prefix="/api")


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations and seed demo locations."""
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Migrations applied")
    if SEED_LOCATIONS:
        _seed_locations_if_empty()


def _seed_locations_if_empty() -> None:
    """Insert SEED_DATA when the location table is empty."""
    db = SessionLocal()
    try:
        if count_locations(db) > 0:
            return
        for row in SEED_DATA:
            repo_create_location(db, **row)
        LOG.info("Seeded %d locations", len(SEED_DATA))
    finally:
        db.close()


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "statiestatus", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
