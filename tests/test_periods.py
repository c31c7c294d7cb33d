from datetime import datetime, timedelta, timezone

import pytest

from restaurant_admin.subscriptions.periods import INTERVAL_STEPS, compute_period_end

UTC = timezone.utc


class TestComputePeriodEnd:
    @pytest.mark.parametrize("interval", sorted(INTERVAL_STEPS))
    @pytest.mark.parametrize("start", [
        datetime(2024, 1, 31, tzinfo=UTC),
        datetime(2023, 2, 28, 23, 59, tzinfo=UTC),
        datetime(2024, 12, 31, 12, 0, tzinfo=UTC),
    ])
    def test_end_is_after_start(self, start, interval):
        assert compute_period_end(start, interval) > start

    def test_monthly_from_jan_31_lands_on_leap_day(self):
        end = compute_period_end(datetime(2024, 1, 31, tzinfo=UTC), "monthly")
        assert end == datetime(2024, 2, 29, tzinfo=UTC)

    def test_monthly_from_jan_31_non_leap_year(self):
        end = compute_period_end(datetime(2023, 1, 31, tzinfo=UTC), "monthly")
        assert end == datetime(2023, 2, 28, tzinfo=UTC)

    def test_monthly_plain_date(self):
        end = compute_period_end(datetime(2024, 1, 15, tzinfo=UTC), "monthly")
        assert end == datetime(2024, 2, 15, tzinfo=UTC)

    def test_quarterly_clamps_to_month_end(self):
        end = compute_period_end(datetime(2023, 11, 30, tzinfo=UTC), "quarterly")
        assert end == datetime(2024, 2, 29, tzinfo=UTC)

    def test_half_yearly_clamps_to_month_end(self):
        end = compute_period_end(datetime(2023, 8, 31, tzinfo=UTC), "half_yearly")
        assert end == datetime(2024, 2, 29, tzinfo=UTC)

    def test_yearly_from_leap_day(self):
        end = compute_period_end(datetime(2024, 2, 29, tzinfo=UTC), "yearly")
        assert end == datetime(2025, 2, 28, tzinfo=UTC)

    def test_keeps_time_of_day_and_timezone(self):
        tz = timezone(timedelta(hours=5, minutes=30))
        end = compute_period_end(datetime(2024, 3, 10, 18, 45, 12, tzinfo=tz), "monthly")
        assert end == datetime(2024, 4, 10, 18, 45, 12, tzinfo=tz)
        assert end.tzinfo is tz

    def test_unknown_interval_raises(self):
        with pytest.raises(ValueError, match="weekly"):
            compute_period_end(datetime(2024, 1, 1, tzinfo=UTC), "weekly")

    def test_period_past_year_9999_raises_clear_error(self):
        with pytest.raises(ValueError, match="past year 9999"):
            compute_period_end(datetime(9999, 12, 15, tzinfo=UTC), "monthly")
