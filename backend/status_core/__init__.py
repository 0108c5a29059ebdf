# Status core: status enum, deriver, confidence, anti-spam, ip hashing, geo
from status_core.anti_spam import FixedWindowRateLimiter, RateLimitDecision, sanitize_note
from status_core.confidence import Confidence, derive_confidence
from status_core.derive import derive_status, status_weights
from status_core.status import Status, UnknownStatusError

__all__ = [
    "Confidence",
    "FixedWindowRateLimiter",
    "RateLimitDecision",
    "Status",
    "UnknownStatusError",
    "derive_confidence",
    "derive_status",
    "sanitize_note",
    "status_weights",
]
