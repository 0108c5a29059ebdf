"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))

TESTING = os.environ.get("TESTING") == "true"

# When TESTING=true, use test DB URL so tests never touch production.
if TESTING:
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./statiestatus.db",
    )

# HMAC key for submitter IP hashes. Override in every real deployment.
IP_HASH_SECRET = os.environ.get("IP_HASH_SECRET", "dev-secret")

RATE_LIMIT_WINDOW_SECONDS = int(os.environ.get("RATE_LIMIT_WINDOW_SECONDS", "300"))
RATE_LIMIT_MAX = int(os.environ.get("RATE_LIMIT_MAX", "3"))

# Reverse proxies in front of the app that append to X-Forwarded-For. 0 = use the socket peer.
TRUSTED_PROXY_HOPS = int(os.environ.get("TRUSTED_PROXY_HOPS", "0"))

CORS_ALLOW_ORIGINS = [
    o.strip()
    for o in os.environ.get("CORS_ALLOW_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]

# s-maxage for GET /api/locations.
LOCATIONS_CACHE_SECONDS = int(os.environ.get("LOCATIONS_CACHE_SECONDS", "60"))

# Seed demo locations into an empty DB on startup (never while testing).
SEED_LOCATIONS = os.environ.get("SEED_LOCATIONS", "true") == "true" and not TESTING

# How many recent reports feed the deriver per view.
LIST_REPORT_LIMIT = 3
AREA_REPORT_LIMIT = 10
DETAIL_REPORT_LIMIT = 50
