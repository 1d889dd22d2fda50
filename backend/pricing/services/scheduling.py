"""
Date-window rules for bookings and the dashboard.

All functions take the current instant explicitly; callers pass
django.utils.timezone.now() (or localtime() for calendar windows).
"""
from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Optional

from ..dataclasses import BookingStatus, BookingWindow, DisplayStatus, RefundStatus, RevenueWindow
from .utils import finite

DEFAULT_REFUND_WINDOW_DAYS = 7
_DAY_US = 86_400 * 1_000_000


def derive_display_status(window: BookingWindow, now: datetime) -> DisplayStatus:
    if window.status != BookingStatus.CONFIRMED.value:
        return DisplayStatus(window.status)
    if now < window.start_date:
        return DisplayStatus.CONFIRMED
    if window.end_date is not None and now > window.end_date:
        return DisplayStatus.OVERDUE
    return DisplayStatus.ONGOING


def is_occupying(window: BookingWindow, now: datetime) -> bool:
    """A vehicle is occupied while its confirmed booking has started and not run past its end."""
    return derive_display_status(window, now) is DisplayStatus.ONGOING


def days_until(start_date: datetime, now: datetime) -> int:
    """Whole days from now until start_date, rounded up (ceil)."""
    delta = start_date - now
    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    return -(-micros // _DAY_US)


def decide_refund(
    advance_amount,
    start_date: datetime,
    now: datetime,
    window_days: int = DEFAULT_REFUND_WINDOW_DAYS,
) -> Optional[RefundStatus]:
    """Refund outcome for cancelling a booking; None when no advance was paid."""
    if finite(advance_amount) <= 0:
        return None
    if days_until(start_date, now) > window_days:
        return RefundStatus.REFUNDED
    return RefundStatus.FORFEITED


def yearly_window(now: datetime) -> RevenueWindow:
    start = now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    end = datetime.combine(start.date().replace(month=12, day=31), time.max, tzinfo=now.tzinfo)
    return RevenueWindow(start=start, end=end)


def weekly_window(now: datetime) -> RevenueWindow:
    # weekday(): Monday == 0 ... Sunday == 6, so Sunday falls back six days
    monday = (now - timedelta(days=now.weekday())).replace(hour=0, minute=0, second=0, microsecond=0)
    sunday = monday.date() + timedelta(days=6)
    return RevenueWindow(start=monday, end=datetime.combine(sunday, time.max, tzinfo=now.tzinfo))
