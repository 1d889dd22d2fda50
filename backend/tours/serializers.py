from decimal import Decimal

from rest_framework import serializers

from .models import TourSchedule, TourScheduleDayItem

_amount = dict(max_digits=12, decimal_places=2, min_value=Decimal('0'), required=False, default=Decimal('0'))


class TourScheduleDayItemSerializer(serializers.ModelSerializer):
    day_number = serializers.IntegerField(min_value=1)
    distance_km = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'),
                                           required=False, default=Decimal('0'))
    accommodation = serializers.DecimalField(**_amount)
    meals = serializers.DecimalField(**_amount)
    activities = serializers.DecimalField(**_amount)
    other_costs = serializers.DecimalField(**_amount)

    class Meta:
        model = TourScheduleDayItem
        exclude = ("schedule",)


class TourScheduleSerializer(serializers.ModelSerializer):
    days = serializers.IntegerField(min_value=1)
    base_price_per_person = serializers.DecimalField(**_amount)
    items = TourScheduleDayItemSerializer(many=True)
    quotation_count = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = TourSchedule
        fields = [
            "id", "name", "description", "days",
            "base_price_per_person", "vehicle_category", "is_active",
            "items", "quotation_count",
            "created_at", "updated_at",
        ]
        read_only_fields = ("is_active", "created_at", "updated_at")

    def validate_items(self, items):
        if not items:
            raise serializers.ValidationError("At least one day item is required")
        return items

    def get_quotation_count(self, obj):
        count = getattr(obj, "quotation_count", None)
        if count is None:
            count = obj.quotations.count()
        return count
