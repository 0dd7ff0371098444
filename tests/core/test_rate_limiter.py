"""
Test suite for the fixed-window rate limiter.

Windows are driven by the fake clock fixture so no test sleeps.
"""

import threading

from legal_diagrams.core.security import RateLimiter


class TestCheckAndConsume:
    """Admission within and across windows."""

    def test_requests_within_limit_are_allowed(self, rate_limiter: RateLimiter) -> None:
        """Remaining count decreases with each request."""
        first = rate_limiter.check_and_consume("client", limit=3, window_seconds=60)
        second = rate_limiter.check_and_consume("client", limit=3, window_seconds=60)

        assert first.allowed is True
        assert first.remaining == 2
        assert second.allowed is True
        assert second.remaining == 1

    def test_request_over_limit_is_refused(self, rate_limiter: RateLimiter) -> None:
        """The limit-plus-first request in a window is refused."""
        for _ in range(2):
            rate_limiter.check_and_consume("client", limit=2, window_seconds=60)

        decision = rate_limiter.check_and_consume("client", limit=2, window_seconds=60)

        assert decision.allowed is False
        assert decision.remaining == 0
        assert decision.reset_time == 1_060.0

    def test_reset_time_fixed_at_window_start(self, rate_limiter, fake_clock) -> None:
        """Later requests in the window report the same reset time."""
        first = rate_limiter.check_and_consume("client", limit=5, window_seconds=60)
        fake_clock.advance(30)
        second = rate_limiter.check_and_consume("client", limit=5, window_seconds=60)

        assert first.reset_time == second.reset_time == 1_060.0

    def test_window_still_closed_at_exact_reset_time(self, rate_limiter, fake_clock) -> None:
        """A new window opens only strictly after the reset time."""
        rate_limiter.check_and_consume("client", limit=1, window_seconds=60)
        fake_clock.advance(60)

        decision = rate_limiter.check_and_consume("client", limit=1, window_seconds=60)

        assert decision.allowed is False

    def test_new_window_after_reset(self, rate_limiter, fake_clock) -> None:
        """Once the window passes, the caller gets a fresh allowance."""
        rate_limiter.check_and_consume("client", limit=1, window_seconds=60)
        fake_clock.advance(60.5)

        decision = rate_limiter.check_and_consume("client", limit=1, window_seconds=60)

        assert decision.allowed is True
        assert decision.remaining == 0
        assert decision.reset_time == 1_120.5

    def test_keys_are_independent(self, rate_limiter: RateLimiter) -> None:
        """Exhausting one caller does not affect another."""
        rate_limiter.check_and_consume("a", limit=1, window_seconds=60)

        assert rate_limiter.check_and_consume("a", limit=1, window_seconds=60).allowed is False
        assert rate_limiter.check_and_consume("b", limit=1, window_seconds=60).allowed is True

    def test_concurrent_requests_never_exceed_limit(self) -> None:
        """Exactly limit requests are admitted across threads."""
        limiter = RateLimiter(clock=lambda: 0.0)
        admitted = []

        def worker() -> None:
            for _ in range(50):
                decision = limiter.check_and_consume("shared", limit=100, window_seconds=60)
                if decision.allowed:
                    admitted.append(decision)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(admitted) == 100


class TestPrune:
    """Removal of expired windows."""

    def test_prune_removes_only_expired_entries(self, rate_limiter, fake_clock) -> None:
        """Entries past their reset time are dropped."""
        rate_limiter.check_and_consume("old", limit=5, window_seconds=10)
        fake_clock.advance(20)
        rate_limiter.check_and_consume("fresh", limit=5, window_seconds=10)

        removed = rate_limiter.prune()

        assert removed == 1
        assert len(rate_limiter) == 1

    def test_prune_with_nothing_expired(self, rate_limiter: RateLimiter) -> None:
        """Live windows survive pruning."""
        rate_limiter.check_and_consume("client", limit=5, window_seconds=10)

        assert rate_limiter.prune() == 0
        assert len(rate_limiter) == 1

    def test_pruned_key_starts_fresh(self, rate_limiter, fake_clock) -> None:
        """After pruning, a returning caller opens a new window."""
        rate_limiter.check_and_consume("client", limit=1, window_seconds=10)
        fake_clock.advance(11)
        rate_limiter.prune()

        decision = rate_limiter.check_and_consume("client", limit=1, window_seconds=10)

        assert decision.allowed is True
