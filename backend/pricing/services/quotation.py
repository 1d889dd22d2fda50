"""
Quotation pricing from a tour schedule.

Transport is priced with exactly one strategy per quotation:
PerKmPricing (itinerary distance x rate) or PerDayPricing (schedule days x
day rate, plus a per-day driver cost). Everything else is the field-wise
sum of the schedule's day items.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from ..dataclasses import (
    ItineraryDay,
    ItineraryTotals,
    PerDayPricing,
    PerKmPricing,
    QuotationPricing,
    TransportPricing,
)
from .utils import ZERO, finite

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


def sum_itinerary(days: Iterable[ItineraryDay]) -> ItineraryTotals:
    totals = ItineraryTotals()
    for day in days:
        totals.distance += finite(day.distance_km)
        totals.accommodation += finite(day.accommodation)
        totals.meals += finite(day.meals)
        totals.activities += finite(day.activities)
        totals.other_costs += finite(day.other_costs)
    return totals


def compute_transport_cost(pricing: TransportPricing, itinerary: ItineraryTotals, schedule_days) -> Decimal:
    if isinstance(pricing, PerKmPricing):
        return itinerary.distance * finite(pricing.hire_rate_per_km)
    if isinstance(pricing, PerDayPricing):
        return finite(schedule_days) * finite(pricing.hire_rate_per_day)
    raise TypeError(f"Unsupported transport pricing: {type(pricing).__name__}")


def compute_driver_total(pricing: TransportPricing, schedule_days) -> Decimal:
    if isinstance(pricing, PerDayPricing):
        return finite(schedule_days) * finite(pricing.driver_cost_per_day)
    return ZERO


def compute_markup_amount(subtotal, markup_percent) -> Decimal:
    return finite(subtotal) * (finite(markup_percent) / HUNDRED)


def price_quotation(
    days: Iterable[ItineraryDay],
    schedule_days,
    pricing: TransportPricing,
    markup_percent=ZERO,
    discount_amount=ZERO,
) -> QuotationPricing:
    itinerary = sum_itinerary(days)
    transport_cost = compute_transport_cost(pricing, itinerary, schedule_days)
    driver_total = compute_driver_total(pricing, schedule_days)
    subtotal = transport_cost + driver_total + itinerary.items_total
    markup_amount = compute_markup_amount(subtotal, markup_percent)
    discount = finite(discount_amount)
    total = max(ZERO, subtotal + markup_amount - discount)

    logger.debug(
        "Priced quotation mode=%s subtotal=%s markup=%s discount=%s total=%s",
        pricing.mode.value, subtotal, markup_amount, discount, total,
    )

    return QuotationPricing(
        mode=pricing.mode,
        itinerary=itinerary,
        transport_cost=transport_cost,
        driver_total=driver_total,
        subtotal=subtotal,
        markup_percent=finite(markup_percent),
        markup_amount=markup_amount,
        discount_amount=discount,
        total_amount=total,
    )
