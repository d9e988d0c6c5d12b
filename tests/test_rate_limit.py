"""Tests for the per-tool rate limiter."""

import pytest

from notesmcp.rate_limit import (
    RATE_LIMIT_MESSAGE,
    RateLimiter,
    get_rate_limiter,
    set_rate_limiter,
)


class TestRateLimiter:
    def test_allows_up_to_limit_then_denies(self, fake_clock):
        limiter = RateLimiter(max_requests=3, window_seconds=60, clock=fake_clock)

        assert [limiter.check("create-note")[0] for _ in range(3)] == [True, True, True]
        allowed, message = limiter.check("create-note")
        assert allowed is False
        assert message == RATE_LIMIT_MESSAGE

    def test_keys_are_independent(self, fake_clock):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=fake_clock)

        assert limiter.check("create-note") == (True, "")
        assert limiter.check("search-notes") == (True, "")
        assert limiter.check("create-note")[0] is False

    def test_window_resets_after_expiry(self, fake_clock):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=fake_clock)
        limiter.check("delete-note")

        fake_clock.advance(60)
        assert limiter.check("delete-note")[0] is False

        fake_clock.advance(0.001)
        assert limiter.check("delete-note") == (True, "")
        assert limiter.windows["delete-note"].count == 1

    def test_denied_requests_do_not_extend_window(self, fake_clock):
        limiter = RateLimiter(max_requests=1, window_seconds=10, clock=fake_clock)
        limiter.check("move-note")
        reset_time = limiter.windows["move-note"].reset_time

        fake_clock.advance(5)
        limiter.check("move-note")

        assert limiter.windows["move-note"].reset_time == reset_time
        assert limiter.windows["move-note"].count == 1

    def test_reset(self, fake_clock):
        limiter = RateLimiter(max_requests=1, clock=fake_clock)
        limiter.check("a")
        limiter.check("b")

        limiter.reset("a")
        assert limiter.check("a")[0] is True
        assert limiter.check("b")[0] is False

        limiter.reset_all()
        assert limiter.windows == {}

    def test_rejects_invalid_settings(self):
        with pytest.raises(ValueError, match="max_requests"):
            RateLimiter(max_requests=0)
        with pytest.raises(ValueError, match="window_seconds"):
            RateLimiter(window_seconds=0)


class TestDefaultInstance:
    def test_built_from_environment(self, monkeypatch):
        monkeypatch.setenv("APPLE_NOTES_RATE_LIMIT", "5")
        monkeypatch.setenv("APPLE_NOTES_RATE_WINDOW", "30")

        limiter = get_rate_limiter()

        assert limiter.max_requests == 5
        assert limiter.window_seconds == 30.0
        assert get_rate_limiter() is limiter

    def test_set_rate_limiter(self, fake_clock):
        custom = RateLimiter(max_requests=2, clock=fake_clock)
        set_rate_limiter(custom)
        assert get_rate_limiter() is custom
