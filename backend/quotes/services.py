import logging

from django.db import transaction
from django.db.models import Q

from core.exceptions import InvalidStatus, RecordNotFound
from core.sequences import create_numbered, next_number
from pricing.dataclasses import PerDayPricing, PerKmPricing, PricingMode
from pricing.services.quotation import compute_markup_amount, price_quotation
from pricing.services.utils import ZERO, q2
from tours.models import TourSchedule

from .models import Quotation

logger = logging.getLogger(__name__)

VALID_STATUSES = [code for code, _ in Quotation.STATUS_CHOICES]


def _transport_pricing(data: dict):
    if data.get('pricing_mode') == PricingMode.PER_DAY.value:
        return PerDayPricing(
            hire_rate_per_day=data.get('hire_rate_per_day', ZERO),
            driver_cost_per_day=data.get('driver_cost_per_day', ZERO),
            km_per_day=data.get('km_per_day', ZERO),
        )
    return PerKmPricing(hire_rate_per_km=data.get('hire_rate_per_km', ZERO))


def generate_quotation(data: dict) -> Quotation:
    """
    Price a tour schedule for a customer and store the quotation as DRAFT.

    Every intermediate sum is persisted alongside the total so the printed
    quotation reconciles with its itemised breakdown.
    """
    schedule_id = data['tour_schedule'].pk if hasattr(data['tour_schedule'], 'pk') else data['tour_schedule']

    schedule = TourSchedule.objects.prefetch_related('items').filter(pk=schedule_id).first()
    if schedule is None:
        raise RecordNotFound("Tour schedule not found")

    pricing = price_quotation(
        schedule.itinerary(),
        schedule.days,
        _transport_pricing(data),
        markup_percent=data.get('markup', ZERO),
        discount_amount=data.get('discount', ZERO),
    )

    # stored figures are cents; the printed lines must add up to the stored total
    itinerary = pricing.itinerary
    items = {
        'transport_cost': q2(pricing.transport_cost),
        'driver_total': q2(pricing.driver_total),
        'accommodation_total': q2(itinerary.accommodation),
        'meals_total': q2(itinerary.meals),
        'activities_total': q2(itinerary.activities),
        'other_costs_total': q2(itinerary.other_costs),
    }
    subtotal = sum(items.values(), ZERO)
    markup_amount = q2(compute_markup_amount(subtotal, pricing.markup_percent))
    total_amount = max(ZERO, subtotal + markup_amount - q2(pricing.discount_amount))

    fields = {k: v for k, v in data.items() if k != 'tour_schedule'}
    fields['pricing_mode'] = pricing.mode.value

    def _create():
        return Quotation.objects.create(
            quotation_number=next_number(Quotation, 'quotation_number'),
            tour_schedule=schedule,
            total_distance=q2(itinerary.distance),
            subtotal=subtotal,
            markup_amount=markup_amount,
            total_amount=total_amount,
            status='DRAFT',
            **items,
            **fields,
        )

    quotation = create_numbered(_create, "Quotation")

    logger.info(
        "Quotation #%s generated from '%s' (%s): total %s",
        quotation.quotation_number, schedule.name, pricing.mode.value, quotation.total_amount,
    )
    return quotation


def search_quotations(query=None):
    qs = Quotation.objects.select_related('tour_schedule').prefetch_related('tour_schedule__items')
    if query:
        cond = Q(customer_name__icontains=query) | Q(tour_schedule__name__icontains=query)
        if query.strip().isdigit():
            cond |= Q(quotation_number=int(query))
        qs = qs.filter(cond)
    return qs.order_by('-created_at')


def get_quotation(pk) -> Quotation:
    quotation = (Quotation.objects
                 .select_related('tour_schedule')
                 .prefetch_related('tour_schedule__items')
                 .filter(pk=pk).first())
    if quotation is None:
        raise RecordNotFound("Quotation not found")
    return quotation


def update_quotation_status(pk, status: str) -> Quotation:
    if status not in VALID_STATUSES:
        raise InvalidStatus(f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}")
    with transaction.atomic():
        quotation = Quotation.objects.select_for_update().filter(pk=pk).first()
        if quotation is None:
            raise RecordNotFound("Quotation not found")
        quotation.status = status
        quotation.save(update_fields=['status', 'updated_at'])
    logger.info("Quotation %s marked %s", pk, status)
    return get_quotation(pk)
