"""
Printable quotation data: the itinerary and an itemised price breakdown
whose lines reconcile exactly with the stored totals.
"""
from django.conf import settings
from django.utils import timezone

from core.services import get_business_profile
from pricing.dataclasses import PricingMode
from pricing.services.billing import compute_balance
from pricing.services.utils import format_currency, q2


def _line(label, amount, prefix):
    return {"label": label, "amount": str(q2(amount)), "formatted": format_currency(amount, prefix)}


def _date(value):
    return timezone.localtime(value).date().isoformat() if value else None


def build_quotation_document(quotation, profile=None, prefix=None) -> dict:
    profile = profile or get_business_profile()
    prefix = prefix if prefix is not None else settings.HIRE_CURRENCY_PREFIX
    schedule = quotation.tour_schedule

    if quotation.pricing_mode == PricingMode.PER_DAY.value:
        transport_label = f"Transport ({schedule.days} days x {q2(quotation.hire_rate_per_day)}/day)"
    else:
        transport_label = f"Transport ({quotation.total_distance} km x {q2(quotation.hire_rate_per_km)}/km)"

    lines = [_line(transport_label, quotation.transport_cost, prefix)]
    if quotation.pricing_mode == PricingMode.PER_DAY.value:
        lines.append(_line(
            f"Driver ({schedule.days} days x {q2(quotation.driver_cost_per_day)}/day)",
            quotation.driver_total, prefix,
        ))
    lines += [
        _line("Accommodation", quotation.accommodation_total, prefix),
        _line("Meals", quotation.meals_total, prefix),
        _line("Activities", quotation.activities_total, prefix),
        _line("Other costs", quotation.other_costs_total, prefix),
    ]

    return {
        "company": {
            "name": profile.company_name,
            "address": profile.address,
            "phone": profile.phone,
            "email": profile.email,
            "website": profile.website,
            "logo_url": profile.logo_url,
        },
        "quotation_number": quotation.quotation_number,
        "date": _date(quotation.created_at),
        "valid_until": _date(quotation.valid_until),
        "status": quotation.status,
        "customer": {
            "name": quotation.customer_name,
            "email": quotation.customer_email,
            "phone": quotation.customer_phone,
        },
        "tour": {
            "name": schedule.name,
            "description": schedule.description,
            "days": schedule.days,
            "start_date": _date(quotation.start_date),
            "number_of_persons": quotation.number_of_persons,
            "vehicle_no": quotation.vehicle_no,
            "itinerary": [
                {
                    "day_number": item.day_number,
                    "title": item.title,
                    "description": item.description,
                    "distance_km": str(item.distance_km),
                }
                for item in schedule.items.all()
            ],
        },
        "pricing_mode": quotation.pricing_mode,
        "lines": lines,
        "subtotal": _line("Subtotal", quotation.subtotal, prefix),
        "markup": _line(f"Markup ({quotation.markup}%)", quotation.markup_amount, prefix),
        "discount": _line("Discount", quotation.discount, prefix),
        "total": _line("Total", quotation.total_amount, prefix),
        "advance": _line("Advance", quotation.advance_amount, prefix),
        "balance_due": _line("Balance due", compute_balance(quotation.total_amount, quotation.advance_amount), prefix),
        "excluded_items": quotation.excluded_items,
        "notes": quotation.notes,
    }
