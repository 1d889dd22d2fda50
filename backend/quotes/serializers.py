from __future__ import annotations
from decimal import Decimal

from rest_framework import serializers

from tours.models import TourSchedule
from tours.serializers import TourScheduleDayItemSerializer

from .models import Quotation

_rate = dict(max_digits=12, decimal_places=2, min_value=Decimal('0'), required=False, default=Decimal('0'))


class QuotationScheduleSerializer(serializers.ModelSerializer):
    items = TourScheduleDayItemSerializer(many=True, read_only=True)

    class Meta:
        model = TourSchedule
        fields = ["id", "name", "description", "days", "vehicle_category", "items"]


class QuotationSerializer(serializers.ModelSerializer):
    tour_schedule = serializers.PrimaryKeyRelatedField(queryset=TourSchedule.objects.all(), write_only=True)
    schedule = QuotationScheduleSerializer(source="tour_schedule", read_only=True)
    customer_email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    number_of_persons = serializers.IntegerField(min_value=1, required=False, default=1)
    hire_rate_per_km = serializers.DecimalField(**_rate)
    hire_rate_per_day = serializers.DecimalField(**_rate)
    km_per_day = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'),
                                          required=False, default=Decimal('0'))
    driver_cost_per_day = serializers.DecimalField(**_rate)
    markup = serializers.DecimalField(max_digits=7, decimal_places=2, min_value=Decimal('0'),
                                      required=False, default=Decimal('0'))
    discount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal('0'),
                                        required=False, default=Decimal('0'))
    advance_amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal('0'),
                                              required=False, default=Decimal('0'))

    class Meta:
        model = Quotation
        fields = [
            "id", "quotation_number", "tour_schedule", "schedule",
            "customer_name", "customer_email", "customer_phone",
            "vehicle_no", "number_of_persons", "start_date",
            "pricing_mode", "hire_rate_per_km", "hire_rate_per_day", "km_per_day",
            "driver_cost_per_day", "markup", "discount",
            "total_distance", "transport_cost", "driver_total",
            "accommodation_total", "meals_total", "activities_total", "other_costs_total",
            "subtotal", "markup_amount", "total_amount",
            "advance_amount", "excluded_items", "notes", "valid_until",
            "status", "created_at", "updated_at",
        ]
        read_only_fields = (
            "quotation_number",
            "total_distance", "transport_cost", "driver_total",
            "accommodation_total", "meals_total", "activities_total", "other_costs_total",
            "subtotal", "markup_amount", "total_amount",
            "status", "created_at", "updated_at",
        )

    def validate_customer_email(self, value):
        return value or None


class QuotationStatusSerializer(serializers.Serializer):
    status = serializers.CharField()
