"""Anti-spam helpers: note sanitizing and a fixed-window rate limiter."""
import math
import re
import threading
import time
from dataclasses import dataclass
from typing import Callable

MAX_NOTE_LENGTH = 280
BANNED_WORDS = ("fuck", "kanker", "idioot")
_BANNED_RE = re.compile("|".join(re.escape(w) for w in BANNED_WORDS), re.IGNORECASE)


def sanitize_note(note: str) -> str:
    """Trim, cap at MAX_NOTE_LENGTH characters, and mask blacklisted words with ***."""
    n = note.strip()[:MAX_NOTE_LENGTH]
    return _BANNED_RE.sub("***", n)


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a rate-limit check. retry_after is whole seconds, set only when rejected."""

    ok: bool
    retry_after: int | None = None


@dataclass
class _Window:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """Per-key fixed-window counter.

    The first hit for a key opens a window of window_seconds; at most max_hits
    are allowed inside it. Holds its own state, so create one per app (or per test).
    """

    def __init__(
        self,
        window_seconds: float,
        max_hits: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window_seconds = window_seconds
        self.max_hits = max_hits
        self._clock = clock
        self._hits: dict[str, _Window] = {}
        self._next_sweep = clock() + window_seconds
        self._lock = threading.Lock()

    def hit(self, key: str) -> RateLimitDecision:
        """Record a submission attempt for key and say whether it is allowed."""
        now = self._clock()
        with self._lock:
            if now >= self._next_sweep:
                self._sweep(now)
            window = self._hits.get(key)
            if window is None or now > window.reset_at:
                self._hits[key] = _Window(count=1, reset_at=now + self.window_seconds)
                return RateLimitDecision(ok=True)
            if window.count >= self.max_hits:
                return RateLimitDecision(ok=False, retry_after=math.ceil(window.reset_at - now))
            window.count += 1
            return RateLimitDecision(ok=True)

    def _sweep(self, now: float) -> None:
        """Drop expired windows. Caller holds the lock; runs at most once per window."""
        self._hits = {k: w for k, w in self._hits.items() if now <= w.reset_at}
        self._next_sweep = now + self.window_seconds

    def __len__(self) -> int:
        """Number of keys currently tracked."""
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        """Forget all keys."""
        with self._lock:
            self._hits.clear()
