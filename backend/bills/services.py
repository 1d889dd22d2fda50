import logging
from typing import Optional

from django.db import transaction
from django.db.models import Q

from bookings.services import complete_booking
from core.exceptions import RecordNotFound
from core.sequences import create_numbered, next_number
from pricing.dataclasses import RateConfiguration, TripMeterReading
from pricing.services.billing import compute_bill_totals, convert_to_base_currency
from pricing.services.utils import ZERO, q2

from .models import Bill

logger = logging.getLogger(__name__)


def create_bill(data: dict, booking_id: Optional[int] = None) -> Bill:
    """
    Price a finished trip and store its bill.

    When `booking_id` is given the booking is marked COMPLETED in the same
    transaction: either both writes land or neither does.
    """
    totals = compute_bill_totals(
        TripMeterReading(start_meter=data['start_meter'], end_meter=data['end_meter']),
        RateConfiguration(
            hire_rate=data['hire_rate'],
            allowed_km=data.get('allowed_km', ZERO),
            package_charge=data.get('package_charge', ZERO),
        ),
        waiting_charge=data.get('waiting_charge', ZERO),
        gate_pass=data.get('gate_pass', ZERO),
    )
    total = q2(totals.total_amount)
    total_lkr = q2(convert_to_base_currency(total, data.get('exchange_rate')))

    def _create():
        booking = complete_booking(booking_id) if booking_id else None
        bill = Bill.objects.create(
            bill_number=next_number(Bill, 'bill_number'),
            booking=booking,
            total_amount=total,
            total_amount_lkr=total_lkr,
            **data,
        )
        return bill, booking

    bill, booking = create_numbered(_create, "Bill")

    logger.info(
        "Bill #%s created: %s km, total %s %s%s",
        bill.bill_number, totals.distance, total, bill.currency,
        f" (closed booking {booking.pk})" if booking else "",
    )
    return bill


def search_bills(query=None):
    qs = Bill.objects.all()
    if query:
        cond = Q(vehicle_no__icontains=query) | Q(customer_name__icontains=query)
        if query.strip().isdigit():
            cond |= Q(bill_number=int(query))
        qs = qs.filter(cond)
    return qs.order_by('-created_at')


def get_bill(pk) -> Bill:
    bill = Bill.objects.filter(pk=pk).first()
    if bill is None:
        raise RecordNotFound("Bill not found")
    return bill


def backfill_base_currency_totals() -> int:
    """Legacy bills saved before multi-currency support: treat them as LKR at 1:1."""
    updated = 0
    legacy = Bill.objects.filter(total_amount_lkr=0, total_amount__gt=0)
    with transaction.atomic():
        for bill in legacy.select_for_update():
            bill.total_amount_lkr = bill.total_amount
            bill.currency = 'LKR'
            bill.exchange_rate = 1
            bill.save(update_fields=['total_amount_lkr', 'currency', 'exchange_rate', 'updated_at'])
            updated += 1
    logger.info("Backfilled base-currency totals on %d legacy bills", updated)
    return updated
