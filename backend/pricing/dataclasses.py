from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from .services.utils import ZERO


class BookingStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class DisplayStatus(str, Enum):
    """Read-time status shown on list and dashboard views. Never persisted."""
    CONFIRMED = "CONFIRMED"
    ONGOING = "ONGOING"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class RefundStatus(str, Enum):
    REFUNDED = "REFUNDED"
    FORFEITED = "FORFEITED"


class PricingMode(str, Enum):
    PER_KM = "PER_KM"
    PER_DAY = "PER_DAY"


@dataclass
class TripMeterReading:
    start_meter: Decimal
    end_meter: Decimal


@dataclass
class RateConfiguration:
    hire_rate: Decimal
    allowed_km: Decimal = ZERO
    package_charge: Decimal = ZERO

    @property
    def is_package_mode(self) -> bool:
        return self.allowed_km > 0 and self.package_charge > 0


@dataclass
class ExtraCharges:
    waiting_charge: Decimal = ZERO
    gate_pass: Decimal = ZERO
    package_charge: Decimal = ZERO


@dataclass
class BillTotals:
    distance: Decimal
    excess_distance: Decimal
    base_charge: Decimal
    extra_charges_total: Decimal
    total_amount: Decimal
    package_mode: bool = False
    balance_due: Optional[Decimal] = None


@dataclass
class ItineraryDay:
    distance_km: Decimal = ZERO
    accommodation: Decimal = ZERO
    meals: Decimal = ZERO
    activities: Decimal = ZERO
    other_costs: Decimal = ZERO


@dataclass
class ItineraryTotals:
    distance: Decimal = ZERO
    accommodation: Decimal = ZERO
    meals: Decimal = ZERO
    activities: Decimal = ZERO
    other_costs: Decimal = ZERO

    @property
    def items_total(self) -> Decimal:
        return self.accommodation + self.meals + self.activities + self.other_costs


@dataclass(frozen=True)
class PerKmPricing:
    hire_rate_per_km: Decimal = ZERO
    mode: PricingMode = field(default=PricingMode.PER_KM, init=False)


@dataclass(frozen=True)
class PerDayPricing:
    hire_rate_per_day: Decimal = ZERO
    driver_cost_per_day: Decimal = ZERO
    km_per_day: Decimal = ZERO  # informational, shown on the quotation
    mode: PricingMode = field(default=PricingMode.PER_DAY, init=False)


TransportPricing = Union[PerKmPricing, PerDayPricing]


@dataclass
class QuotationPricing:
    mode: PricingMode
    itinerary: ItineraryTotals
    transport_cost: Decimal
    driver_total: Decimal
    subtotal: Decimal
    markup_percent: Decimal
    markup_amount: Decimal
    discount_amount: Decimal
    total_amount: Decimal


@dataclass
class BookingWindow:
    start_date: datetime
    end_date: Optional[datetime] = None
    status: str = BookingStatus.CONFIRMED.value


@dataclass(frozen=True)
class RevenueWindow:
    start: datetime
    end: datetime
