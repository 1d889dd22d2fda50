"""
Trip billing arithmetic.

Turns meter readings, a rate configuration and the flat extras of a trip
into the amounts printed on a bill. Two billing modes exist:

- package mode (allowed_km > 0 and package_charge > 0): the flat package
  fee covers the included distance; only the excess is metered.
- standard mode: every kilometre is billed at the hire rate.

The package fee itself is always billed as an extra charge, never as part
of the base charge.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..dataclasses import BillTotals, ExtraCharges, RateConfiguration, TripMeterReading
from .utils import ZERO, finite


def compute_distance(start_meter, end_meter) -> Decimal:
    start, end = finite(start_meter), finite(end_meter)
    if end <= start:
        return ZERO
    return end - start


def is_package_mode(allowed_km, package_charge) -> bool:
    return finite(allowed_km) > 0 and finite(package_charge) > 0


def compute_excess_distance(distance, allowed_km) -> Decimal:
    return max(ZERO, finite(distance) - finite(allowed_km))


def compute_base_charge(distance, hire_rate, allowed_km=ZERO, package_charge=ZERO) -> Decimal:
    distance = max(ZERO, finite(distance))
    hire_rate = finite(hire_rate)
    if is_package_mode(allowed_km, package_charge):
        return compute_excess_distance(distance, allowed_km) * hire_rate
    return distance * hire_rate


def compute_extra_charges(waiting_charge=ZERO, gate_pass=ZERO, package_charge=ZERO) -> Decimal:
    return finite(waiting_charge) + finite(gate_pass) + finite(package_charge)


def compute_total_amount(
    start_meter,
    end_meter,
    hire_rate,
    waiting_charge=ZERO,
    gate_pass=ZERO,
    package_charge=ZERO,
    allowed_km=ZERO,
) -> Decimal:
    """Base charge plus extras. No markup or discount applies to bills."""
    distance = compute_distance(start_meter, end_meter)
    base_charge = compute_base_charge(distance, hire_rate, allowed_km, package_charge)
    extras = compute_extra_charges(waiting_charge, gate_pass, package_charge)
    return max(ZERO, base_charge + extras)


def compute_balance(total_amount, advance_amount) -> Decimal:
    return max(ZERO, finite(total_amount) - finite(advance_amount))


def compute_bill_totals(
    reading: TripMeterReading,
    rates: RateConfiguration,
    waiting_charge=ZERO,
    gate_pass=ZERO,
    advance_amount: Optional[Decimal] = None,
) -> BillTotals:
    """Every intermediate figure of a bill, so the printed breakdown reconciles."""
    distance = compute_distance(reading.start_meter, reading.end_meter)
    package_mode = is_package_mode(rates.allowed_km, rates.package_charge)
    excess = compute_excess_distance(distance, rates.allowed_km) if package_mode else distance
    extras = ExtraCharges(
        waiting_charge=finite(waiting_charge),
        gate_pass=finite(gate_pass),
        package_charge=finite(rates.package_charge),
    )
    base_charge = compute_base_charge(distance, rates.hire_rate, rates.allowed_km, rates.package_charge)
    extras_total = compute_extra_charges(extras.waiting_charge, extras.gate_pass, extras.package_charge)
    total = max(ZERO, base_charge + extras_total)

    return BillTotals(
        distance=distance,
        excess_distance=excess,
        base_charge=base_charge,
        extra_charges_total=extras_total,
        total_amount=total,
        package_mode=package_mode,
        balance_due=compute_balance(total, advance_amount) if advance_amount is not None else None,
    )


def convert_to_base_currency(amount, exchange_rate) -> Decimal:
    """Express an amount in the base currency. A missing or non-positive rate means 1:1."""
    rate = finite(exchange_rate)
    if rate <= 0:
        rate = Decimal("1")
    return finite(amount) * rate
