"""Unit tests: status_core.anti_spam (sanitize_note, FixedWindowRateLimiter)."""
import threading

import pytest

from status_core.anti_spam import MAX_NOTE_LENGTH, FixedWindowRateLimiter, RateLimitDecision, sanitize_note

pytestmark = pytest.mark.unit


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, t: float = 1000.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t


def test_sanitize_trims_whitespace():
    assert sanitize_note("  bon komt niet uit \n") == "bon komt niet uit"


def test_sanitize_truncates_to_limit():
    out = sanitize_note("x" * 500)
    assert len(out) == MAX_NOTE_LENGTH == 280


def test_sanitize_masks_banned_words_case_insensitive():
    assert sanitize_note("Wat een IDIOOT apparaat") == "Wat een *** apparaat"
    assert sanitize_note("kankermachine") == "***machine"
    assert sanitize_note("Fuck, fuck") == "***, ***"


def test_sanitize_leaves_clean_text():
    assert sanitize_note("Machine vol") == "Machine vol"


def test_sanitize_empty():
    assert sanitize_note("   ") == ""


def test_rate_limit_allows_up_to_max():
    limiter = FixedWindowRateLimiter(window_seconds=300, max_hits=3, clock=FakeClock())
    assert [limiter.hit("a").ok for _ in range(3)] == [True, True, True]


def test_rate_limit_rejects_with_retry_after():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(window_seconds=300, max_hits=3, clock=clock)
    for _ in range(3):
        limiter.hit("a")
    clock.t += 100.5
    decision = limiter.hit("a")
    assert decision == RateLimitDecision(ok=False, retry_after=200)


def test_rate_limit_keys_are_independent():
    limiter = FixedWindowRateLimiter(window_seconds=300, max_hits=1, clock=FakeClock())
    assert limiter.hit("a").ok
    assert not limiter.hit("a").ok
    assert limiter.hit("b").ok


def test_rate_limit_window_resets_after_expiry():
    """At the reset instant the window is still closed; strictly after it a new window opens."""
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(window_seconds=60, max_hits=1, clock=clock)
    assert limiter.hit("a").ok
    clock.t += 60
    assert not limiter.hit("a").ok
    clock.t += 0.001
    assert limiter.hit("a").ok
    assert not limiter.hit("a").ok


def test_rate_limit_reset_clears_state():
    limiter = FixedWindowRateLimiter(window_seconds=60, max_hits=1, clock=FakeClock())
    limiter.hit("a")
    limiter.reset()
    assert limiter.hit("a").ok


def test_separate_instances_do_not_share_state():
    clock = FakeClock()
    a = FixedWindowRateLimiter(window_seconds=60, max_hits=1, clock=clock)
    b = FixedWindowRateLimiter(window_seconds=60, max_hits=1, clock=clock)
    a.hit("k")
    assert b.hit("k").ok


def test_expired_keys_are_dropped():
    """One-off keys do not accumulate: expired windows are swept on a later hit."""
    clock = FakeClock(0.0)
    limiter = FixedWindowRateLimiter(window_seconds=1, max_hits=3, clock=clock)
    for i in range(1000):
        limiter.hit(f"ip-{i}")
    assert len(limiter) == 1000
    clock.t = 10_000.0
    assert limiter.hit("fresh").ok
    assert len(limiter) == 1


def test_sweep_keeps_live_windows():
    """Keys whose window is still open survive a sweep with their counts intact."""
    clock = FakeClock(0.0)
    limiter = FixedWindowRateLimiter(window_seconds=10, max_hits=1, clock=clock)
    limiter.hit("old")
    clock.t = 5.0
    limiter.hit("live")
    clock.t = 12.0
    limiter.hit("other")
    assert len(limiter) == 2
    assert not limiter.hit("live").ok


def test_concurrent_hits_allow_exactly_max():
    """Many threads hitting one key at once get exactly max_hits OK decisions."""
    limiter = FixedWindowRateLimiter(window_seconds=300, max_hits=5)
    start = threading.Barrier(20)
    results = []
    results_lock = threading.Lock()

    def worker():
        start.wait()
        for _ in range(10):
            decision = limiter.hit("shared")
            with results_lock:
                results.append(decision.ok)

    threads = [threading.Thread(target=worker) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 200
    assert results.count(True) == 5
