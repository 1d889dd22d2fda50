from decimal import Decimal
from typing import List

from django.db import models

from pricing.dataclasses import ItineraryDay


class TourSchedule(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    days = models.PositiveIntegerField()
    base_price_per_person = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    vehicle_category = models.CharField(max_length=20, default='CAR')
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at']
        indexes = [
            models.Index(fields=['is_active', '-updated_at'], name='idx_tour_active_updated'),
        ]

    def itinerary(self) -> List[ItineraryDay]:
        return [item.as_itinerary_day() for item in self.items.all()]

    def __str__(self):
        return self.name


class TourScheduleDayItem(models.Model):
    schedule = models.ForeignKey(TourSchedule, on_delete=models.CASCADE, related_name='items')
    day_number = models.PositiveIntegerField()
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    distance_km = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    accommodation = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    meals = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    activities = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    other_costs = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))

    class Meta:
        ordering = ['day_number']

    def as_itinerary_day(self) -> ItineraryDay:
        return ItineraryDay(
            distance_km=self.distance_km,
            accommodation=self.accommodation,
            meals=self.meals,
            activities=self.activities,
            other_costs=self.other_costs,
        )

    def __str__(self):
        return f"Day {self.day_number}: {self.title}"
