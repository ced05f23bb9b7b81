from intake.batch.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestRateLimiter:
    def test_allows_up_to_max_submissions(self) -> None:
        limiter = RateLimiter(max_per_minute=5, clock=FakeClock())
        for _ in range(5):
            assert limiter.check() is True
            limiter.record()
        assert limiter.check() is False

    def test_resets_after_a_quiet_minute(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(max_per_minute=2, clock=clock)
        limiter.record()
        limiter.record()
        assert limiter.check() is False

        clock.now += 60.5
        assert limiter.check() is True

    def test_window_is_measured_from_last_submission(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(max_per_minute=2, clock=clock)
        limiter.record()
        clock.now += 50
        limiter.record()
        clock.now += 30
        assert limiter.check() is False

    def test_seconds_until_reset_rounds_up(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(max_per_minute=1, clock=clock)
        limiter.record()
        clock.now += 20.2
        assert limiter.seconds_until_reset() == 40

    def test_seconds_until_reset_without_history(self) -> None:
        assert RateLimiter(clock=FakeClock()).seconds_until_reset() == 0
