from decimal import Decimal

from django.db import models

from pricing.dataclasses import PricingMode

_money = dict(max_digits=14, decimal_places=2, default=Decimal('0'))


class Quotation(models.Model):
    STATUS_CHOICES = [('DRAFT', 'Draft'), ('SENT', 'Sent'), ('ACCEPTED', 'Accepted'), ('EXPIRED', 'Expired')]
    PRICING_MODE_CHOICES = [(PricingMode.PER_KM.value, 'Per km'), (PricingMode.PER_DAY.value, 'Per day')]

    quotation_number = models.PositiveIntegerField(unique=True)
    tour_schedule = models.ForeignKey('tours.TourSchedule', on_delete=models.PROTECT, related_name='quotations')
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField(blank=True, null=True)
    customer_phone = models.CharField(max_length=32, blank=True, null=True)
    vehicle_no = models.CharField(max_length=32, blank=True, null=True)
    number_of_persons = models.PositiveIntegerField(default=1)
    start_date = models.DateTimeField(blank=True, null=True)

    # pricing inputs
    pricing_mode = models.CharField(max_length=10, choices=PRICING_MODE_CHOICES, default=PricingMode.PER_KM.value)
    hire_rate_per_km = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    hire_rate_per_day = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    km_per_day = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    driver_cost_per_day = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    markup = models.DecimalField(max_digits=7, decimal_places=2, default=Decimal('0'))  # percent
    discount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0'))

    # retained breakdown, printed line by line
    total_distance = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    transport_cost = models.DecimalField(**_money)
    driver_total = models.DecimalField(**_money)
    accommodation_total = models.DecimalField(**_money)
    meals_total = models.DecimalField(**_money)
    activities_total = models.DecimalField(**_money)
    other_costs_total = models.DecimalField(**_money)
    subtotal = models.DecimalField(**_money)
    markup_amount = models.DecimalField(**_money)
    total_amount = models.DecimalField(**_money)

    advance_amount = models.DecimalField(**_money)
    excluded_items = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    valid_until = models.DateTimeField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='DRAFT')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['customer_name', '-created_at'], name='idx_quote_customer_created'),
        ]

    def __str__(self):
        return f"Quotation #{self.quotation_number}"
