from datetime import datetime
from decimal import Decimal

from django.db import models

from pricing.dataclasses import BookingStatus, BookingWindow, DisplayStatus, RefundStatus
from pricing.services.scheduling import derive_display_status


class Booking(models.Model):
    STATUS_CHOICES = [(s.value, s.value.title()) for s in BookingStatus]
    REFUND_CHOICES = [(s.value, s.value.title()) for s in RefundStatus]

    vehicle_no = models.CharField(max_length=32)
    customer_name = models.CharField(max_length=255)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(blank=True, null=True)
    destination = models.CharField(max_length=255, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=BookingStatus.CONFIRMED.value)
    advance_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    notes = models.TextField(blank=True, null=True)
    refund_status = models.CharField(max_length=20, choices=REFUND_CHOICES, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['start_date']
        indexes = [
            models.Index(fields=['status', 'start_date'], name='idx_booking_status_start'),
            models.Index(fields=['vehicle_no', 'start_date'], name='idx_booking_vehicle_start'),
        ]

    @property
    def window(self) -> BookingWindow:
        return BookingWindow(start_date=self.start_date, end_date=self.end_date, status=self.status)

    def display_status(self, now: datetime) -> DisplayStatus:
        return derive_display_status(self.window, now)

    def __str__(self):
        return f"{self.vehicle_no} / {self.customer_name} @ {self.start_date:%Y-%m-%d}"
