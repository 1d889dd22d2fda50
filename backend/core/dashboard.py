"""
Dashboard figures: fleet occupancy, revenue windows, recent activity.

Recomputed from scratch on every request; nothing here is cached or stored.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from django.conf import settings
from django.db.models import Sum
from django.utils import timezone

from bills.models import Bill
from bookings.models import Booking
from pricing.dataclasses import BookingStatus, RevenueWindow
from pricing.services.scheduling import is_occupying, weekly_window, yearly_window
from pricing.services.utils import ZERO

from .models import Vehicle


def _revenue(window: RevenueWindow):
    # base-currency (LKR) totals; bills in other currencies count at their stored rate
    total = (Bill.objects
             .filter(created_at__gte=window.start, created_at__lte=window.end)
             .aggregate(total=Sum('total_amount_lkr'))['total'])
    return total or ZERO


def ongoing_bookings(now: datetime):
    started = (Booking.objects
               .filter(status=BookingStatus.CONFIRMED.value, start_date__lte=now)
               .order_by('start_date'))
    return [b for b in started if is_occupying(b.window, now)]


def get_dashboard_stats(now: Optional[datetime] = None, recent: Optional[int] = None) -> dict:
    now = now or timezone.now()
    recent = recent or settings.HIRE_DASHBOARD_RECENT
    local_now = timezone.localtime(now)

    total_vehicles = Vehicle.objects.filter(status='ACTIVE').count()
    ongoing = ongoing_bookings(now)
    occupied = len(ongoing)

    return {
        "total_vehicles": total_vehicles,
        "occupied_vehicles": occupied,
        "available_vehicles": max(0, total_vehicles - occupied),
        "revenue_yearly": _revenue(yearly_window(local_now)),
        "revenue_weekly": _revenue(weekly_window(local_now)),
        "recent_bills": list(Bill.objects.order_by('-created_at')[:recent]),
        "ongoing_bookings": ongoing[:recent],
    }
