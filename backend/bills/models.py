from decimal import Decimal

from django.db import models

from pricing.dataclasses import BillTotals, RateConfiguration, TripMeterReading
from pricing.services.billing import compute_bill_totals


class Bill(models.Model):
    PAYMENT_METHOD_CHOICES = [('CASH', 'Cash'), ('CREDIT', 'Credit')]

    bill_number = models.PositiveIntegerField(unique=True)
    booking = models.ForeignKey('bookings.Booking', null=True, blank=True, on_delete=models.SET_NULL, related_name='bills')
    vehicle_no = models.CharField(max_length=32)
    customer_name = models.CharField(max_length=255)
    customer_address = models.TextField(blank=True, null=True)
    route = models.CharField(max_length=255)
    start_meter = models.DecimalField(max_digits=12, decimal_places=2)
    end_meter = models.DecimalField(max_digits=12, decimal_places=2)
    hire_rate = models.DecimalField(max_digits=12, decimal_places=2)
    allowed_km = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    waiting_charge = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    gate_pass = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    package_charge = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    advance_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    currency = models.CharField(max_length=3, default='LKR')
    exchange_rate = models.DecimalField(max_digits=12, decimal_places=4, default=Decimal('1'))
    payment_method = models.CharField(max_length=10, choices=PAYMENT_METHOD_CHOICES, default='CASH')
    total_amount = models.DecimalField(max_digits=14, decimal_places=2)
    total_amount_lkr = models.DecimalField(max_digits=16, decimal_places=2, default=Decimal('0'))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['-created_at'], name='idx_bill_created'),
            models.Index(fields=['vehicle_no'], name='idx_bill_vehicle'),
        ]

    @property
    def totals(self) -> BillTotals:
        return compute_bill_totals(
            TripMeterReading(start_meter=self.start_meter, end_meter=self.end_meter),
            RateConfiguration(hire_rate=self.hire_rate, allowed_km=self.allowed_km,
                              package_charge=self.package_charge),
            waiting_charge=self.waiting_charge,
            gate_pass=self.gate_pass,
            advance_amount=self.advance_amount,
        )

    def __str__(self):
        return f"Bill #{self.bill_number}"
