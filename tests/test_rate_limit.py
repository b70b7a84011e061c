"""Tests for the client-side rate window."""

import pytest

from todoist_mcp.client.rate_limit import RATE_LIMIT, WINDOW_SECONDS, RateWindow
from todoist_mcp.utils.errors import RateLimitError


class TestRateWindow:
    """Tests for RateWindow."""

    def test_defaults(self, clock):
        """Test the window starts now, empty, with the Todoist budget."""
        window = RateWindow(clock=clock)

        assert window.limit == RATE_LIMIT == 450
        assert window.duration == WINDOW_SECONDS == 900
        assert window.count == 0
        assert window.window_start == clock.now

    def test_check_allows_under_limit(self, rate_window):
        """Test check passes and does not count by itself."""
        rate_window.count = RATE_LIMIT - 1

        rate_window.check()

        assert rate_window.count == RATE_LIMIT - 1

    def test_record_increments(self, rate_window):
        """Test each recorded request adds one."""
        rate_window.record()
        rate_window.record()

        assert rate_window.count == 2
        assert rate_window.remaining == RATE_LIMIT - 2

    def test_check_raises_at_limit(self, rate_window, clock):
        """Test the next check fails once the limit is reached within the window."""
        start = rate_window.window_start
        rate_window.count = RATE_LIMIT
        clock.advance(WINDOW_SECONDS)  # still inside: now - start == duration

        with pytest.raises(RateLimitError) as exc_info:
            rate_window.check()

        assert exc_info.value.reset_time == start + WINDOW_SECONDS
        assert "Rate limit exceeded. Resets at" in str(exc_info.value)
        assert rate_window.count == RATE_LIMIT

    def test_check_resets_expired_window(self, rate_window, clock):
        """Test an expired window resets count and start regardless of prior count."""
        rate_window.count = 400
        clock.advance(WINDOW_SECONDS + 0.001)

        rate_window.check()

        assert rate_window.count == 0
        assert rate_window.window_start == clock.now

    def test_check_resets_exhausted_window(self, rate_window, clock):
        """Test an exhausted budget is restored after the window passes."""
        rate_window.count = RATE_LIMIT
        clock.advance(16 * 60)

        rate_window.check()

        assert rate_window.count == 0

    def test_reset_happens_once_per_boundary(self, rate_window, clock):
        """Test counting continues in the new window without further resets."""
        clock.advance(WINDOW_SECONDS + 1)
        rate_window.check()
        new_start = rate_window.window_start

        rate_window.record()
        clock.advance(60)
        rate_window.check()

        assert rate_window.window_start == new_start
        assert rate_window.count == 1

    def test_custom_limit(self, clock):
        """Test a smaller budget is enforced."""
        window = RateWindow(limit=2, clock=clock)
        window.record()
        window.record()

        with pytest.raises(RateLimitError):
            window.check()

    def test_remaining_never_negative(self, rate_window):
        rate_window.count = RATE_LIMIT + 5

        assert rate_window.remaining == 0
