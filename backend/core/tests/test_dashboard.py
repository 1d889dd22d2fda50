from datetime import datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from bills.models import Bill
from bills.services import create_bill
from bookings.services import cancel_booking, create_booking
from core.dashboard import get_dashboard_stats
from core.models import Vehicle

pytestmark = pytest.mark.django_db

COLOMBO = ZoneInfo("Asia/Colombo")
# a Wednesday
NOW = datetime(2024, 6, 12, 10, 0, tzinfo=COLOMBO)


def _at(year, month, day, hour=12, minute=0):
    return datetime(year, month, day, hour, minute, tzinfo=COLOMBO)


def _bill(amount, created_at, **extra):
    bill = create_bill({
        "vehicle_no": "CAB-1234",
        "customer_name": "Nimal Perera",
        "route": "Colombo",
        "start_meter": Decimal("0"),
        "end_meter": Decimal("1"),
        "hire_rate": Decimal(amount),
        **extra,
    })
    Bill.objects.filter(pk=bill.pk).update(created_at=created_at)
    return bill


def _booking(start, end=None, customer="Nimal Perera"):
    return create_booking({
        "vehicle_no": "CAB-1234",
        "customer_name": customer,
        "start_date": start,
        "end_date": end,
    })


@pytest.fixture
def fleet():
    for no in ("CAB-1", "CAB-2", "VAN-1"):
        Vehicle.objects.create(vehicle_no=no)
    Vehicle.objects.create(vehicle_no="BUS-1", status="MAINTENANCE")


def test_occupancy_counts_only_ongoing(fleet):
    _booking(_at(2024, 6, 11), _at(2024, 6, 13), customer="ongoing")
    _booking(_at(2024, 6, 12, 8), None, customer="open ended")
    _booking(_at(2024, 6, 1), _at(2024, 6, 10), customer="overdue")
    _booking(_at(2024, 6, 20), _at(2024, 6, 22), customer="upcoming")
    cancelled = _booking(_at(2024, 6, 11), _at(2024, 6, 14), customer="cancelled")
    cancel_booking(cancelled.pk, now=NOW)

    stats = get_dashboard_stats(now=NOW)

    assert stats["total_vehicles"] == 3
    assert stats["occupied_vehicles"] == 2
    assert stats["available_vehicles"] == 1
    assert sorted(b.customer_name for b in stats["ongoing_bookings"]) == ["ongoing", "open ended"]


def test_available_never_negative():
    Vehicle.objects.create(vehicle_no="CAB-1")
    _booking(_at(2024, 6, 11), _at(2024, 6, 13))
    _booking(_at(2024, 6, 11), _at(2024, 6, 13))

    stats = get_dashboard_stats(now=NOW)
    assert stats["occupied_vehicles"] == 2
    assert stats["available_vehicles"] == 0


def test_revenue_windows():
    _bill("100", _at(2024, 6, 10, 0, 0))      # Monday, first instant of the week
    _bill("200", _at(2024, 6, 16, 23, 59))    # Sunday night
    _bill("400", _at(2024, 6, 9, 23, 59))     # previous Sunday
    _bill("800", _at(2024, 1, 1, 0, 0))       # first instant of the year
    _bill("1600", _at(2023, 12, 31, 23, 59))  # last year

    stats = get_dashboard_stats(now=NOW)

    assert stats["revenue_weekly"] == Decimal("300")
    assert stats["revenue_yearly"] == Decimal("1500")


def test_revenue_is_summed_in_base_currency():
    _bill("100", _at(2024, 6, 11))
    _bill("10", _at(2024, 6, 11), currency="USD", exchange_rate=Decimal("300"))

    stats = get_dashboard_stats(now=NOW)

    assert stats["revenue_weekly"] == Decimal("3100")
    assert stats["revenue_yearly"] == Decimal("3100")


def test_empty_windows_are_zero():
    stats = get_dashboard_stats(now=NOW)
    assert stats["revenue_weekly"] == Decimal("0")
    assert stats["revenue_yearly"] == Decimal("0")
    assert stats["recent_bills"] == []


def test_recent_bills_are_limited_and_newest_first():
    for day in range(1, 8):
        _bill("10", _at(2024, 6, day))

    stats = get_dashboard_stats(now=NOW, recent=3)
    assert [b.created_at.astimezone(COLOMBO).day for b in stats["recent_bills"]] == [7, 6, 5]


def test_dashboard_endpoint(api, fleet):
    resp = api.get("/api/dashboard")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_vehicles"] == 3
    assert body["available_vehicles"] == 3
    assert body["revenue_weekly"] == "0.00"
