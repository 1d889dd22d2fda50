from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from ..dataclasses import BookingWindow, DisplayStatus, RefundStatus
from ..services.scheduling import (
    days_until,
    decide_refund,
    derive_display_status,
    is_occupying,
    weekly_window,
    yearly_window,
)

NOW = datetime(2025, 3, 12, 10, 30, tzinfo=timezone.utc)  # a Wednesday
HOUR = timedelta(hours=1)


class TestDisplayStatus:
    def test_ongoing_inside_window(self):
        window = BookingWindow(start_date=NOW - HOUR, end_date=NOW + HOUR)
        assert derive_display_status(window, NOW) is DisplayStatus.ONGOING

    def test_overdue_after_end(self):
        window = BookingWindow(start_date=NOW - 3 * HOUR, end_date=NOW - HOUR)
        assert derive_display_status(window, NOW) is DisplayStatus.OVERDUE

    def test_confirmed_before_start(self):
        window = BookingWindow(start_date=NOW + HOUR, end_date=NOW + 5 * HOUR)
        assert derive_display_status(window, NOW) is DisplayStatus.CONFIRMED

    def test_open_ended_booking_stays_ongoing(self):
        window = BookingWindow(start_date=NOW - timedelta(days=30))
        assert derive_display_status(window, NOW) is DisplayStatus.ONGOING

    def test_boundaries_are_ongoing(self):
        assert derive_display_status(BookingWindow(start_date=NOW, end_date=NOW + HOUR), NOW) is DisplayStatus.ONGOING
        assert derive_display_status(BookingWindow(start_date=NOW - HOUR, end_date=NOW), NOW) is DisplayStatus.ONGOING

    @pytest.mark.parametrize("status", ["CANCELLED", "COMPLETED"])
    def test_non_confirmed_status_passes_through(self, status):
        window = BookingWindow(start_date=NOW - 3 * HOUR, end_date=NOW - HOUR, status=status)
        assert derive_display_status(window, NOW) == DisplayStatus(status)

    def test_only_ongoing_bookings_occupy_a_vehicle(self):
        assert is_occupying(BookingWindow(start_date=NOW - HOUR, end_date=NOW + HOUR), NOW)
        assert is_occupying(BookingWindow(start_date=NOW - HOUR), NOW)
        assert not is_occupying(BookingWindow(start_date=NOW + HOUR), NOW)
        assert not is_occupying(BookingWindow(start_date=NOW - 3 * HOUR, end_date=NOW - HOUR), NOW)
        assert not is_occupying(BookingWindow(start_date=NOW - HOUR, status="CANCELLED"), NOW)


class TestRefundDecision:
    def test_more_than_a_week_out_is_refunded(self):
        assert decide_refund(Decimal("1000"), NOW + timedelta(days=8), NOW) is RefundStatus.REFUNDED

    def test_within_a_week_is_forfeited(self):
        assert decide_refund(Decimal("1000"), NOW + timedelta(days=3), NOW) is RefundStatus.FORFEITED

    def test_exactly_seven_days_is_forfeited(self):
        assert decide_refund(Decimal("1000"), NOW + timedelta(days=7), NOW) is RefundStatus.FORFEITED

    def test_partial_day_rounds_up(self):
        # 7 days and 1 minute -> ceil gives 8 days
        assert days_until(NOW + timedelta(days=7, minutes=1), NOW) == 8
        assert decide_refund(500, NOW + timedelta(days=7, minutes=1), NOW) is RefundStatus.REFUNDED

    def test_past_start_is_forfeited(self):
        assert decide_refund(500, NOW - timedelta(days=2), NOW) is RefundStatus.FORFEITED

    def test_no_advance_records_nothing(self):
        assert decide_refund(Decimal("0"), NOW + timedelta(days=30), NOW) is None

    def test_custom_window(self):
        assert decide_refund(500, NOW + timedelta(days=3), NOW, window_days=2) is RefundStatus.REFUNDED


class TestRevenueWindows:
    def test_yearly_window(self):
        window = yearly_window(NOW)
        assert window.start == datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert window.end.date() == datetime(2025, 12, 31).date()
        assert (window.end.hour, window.end.minute, window.end.second) == (23, 59, 59)

    def test_weekly_window_midweek(self):
        window = weekly_window(NOW)
        assert window.start == datetime(2025, 3, 10, tzinfo=timezone.utc)
        assert window.end.date() == datetime(2025, 3, 16).date()
        assert (window.end.hour, window.end.minute, window.end.second) == (23, 59, 59)

    def test_weekly_window_on_sunday_goes_back_six_days(self):
        sunday = datetime(2025, 3, 16, 22, 0, tzinfo=timezone.utc)
        assert weekly_window(sunday).start == datetime(2025, 3, 10, tzinfo=timezone.utc)

    def test_weekly_window_on_monday_starts_same_day(self):
        monday = datetime(2025, 3, 10, 0, 0, 1, tzinfo=timezone.utc)
        assert weekly_window(monday).start == datetime(2025, 3, 10, tzinfo=timezone.utc)
