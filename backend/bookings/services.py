import logging
from datetime import datetime
from typing import Optional

from django.conf import settings
from django.utils import timezone
from django.db import transaction

from core.exceptions import InvalidStatus, InvalidTransition, RecordNotFound
from pricing.dataclasses import BookingStatus
from pricing.services.scheduling import decide_refund

from .models import Booking

logger = logging.getLogger(__name__)


def create_booking(data: dict) -> Booking:
    data = {**data, "status": BookingStatus.CONFIRMED.value}
    booking = Booking.objects.create(**data)
    logger.info("Booking %s created for %s (%s)", booking.pk, booking.customer_name, booking.vehicle_no)
    return booking


def list_bookings(status: Optional[str] = None):
    qs = Booking.objects.all()
    if status:
        if status not in BookingStatus.__members__:
            raise InvalidStatus(f"Invalid status. Must be one of: {', '.join(BookingStatus.__members__)}")
        qs = qs.filter(status=status)
    return qs.order_by('start_date')


def get_booking(pk) -> Booking:
    booking = Booking.objects.filter(pk=pk).first()
    if booking is None:
        raise RecordNotFound("Booking not found")
    return booking


def cancel_booking(pk, now: Optional[datetime] = None, window_days: Optional[int] = None) -> Booking:
    """
    Cancel a confirmed booking and record what happens to its advance.

    More than `window_days` (HIRE_REFUND_WINDOW_DAYS) before the trip the
    advance is REFUNDED, otherwise FORFEITED. No advance, no decision.
    """
    now = now or timezone.now()
    if window_days is None:
        window_days = settings.HIRE_REFUND_WINDOW_DAYS

    with transaction.atomic():
        booking = Booking.objects.select_for_update().filter(pk=pk).first()
        if booking is None:
            raise RecordNotFound("Booking not found")
        if booking.status != BookingStatus.CONFIRMED.value:
            raise InvalidTransition(f"Only confirmed bookings can be cancelled (status is {booking.status})")

        refund = decide_refund(booking.advance_amount, booking.start_date, now, window_days=window_days)
        booking.status = BookingStatus.CANCELLED.value
        booking.refund_status = refund.value if refund else None
        booking.save(update_fields=['status', 'refund_status', 'updated_at'])

    logger.info("Booking %s cancelled, refund decision: %s", booking.pk, booking.refund_status or "none")
    return booking


def complete_booking(pk) -> Booking:
    """Close a booking once its bill exists. Call inside the bill's transaction."""
    booking = Booking.objects.select_for_update().filter(pk=pk).first()
    if booking is None:
        raise RecordNotFound("Booking not found")
    if booking.status != BookingStatus.CONFIRMED.value:
        raise InvalidTransition(f"Only confirmed bookings can be closed (status is {booking.status})")
    booking.status = BookingStatus.COMPLETED.value
    booking.save(update_fields=['status', 'updated_at'])
    return booking
