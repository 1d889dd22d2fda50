from django.utils import timezone
from rest_framework import serializers

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    advance_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    display_status = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id", "vehicle_no", "customer_name",
            "start_date", "end_date", "destination",
            "status", "display_status", "advance_amount",
            "notes", "refund_status",
            "created_at", "updated_at",
        ]
        read_only_fields = ("status", "refund_status", "created_at", "updated_at")

    def validate(self, attrs):
        end = attrs.get('end_date')
        if end is not None and end < attrs['start_date']:
            raise serializers.ValidationError({"end_date": "End date must not be before start date"})
        return attrs

    def get_display_status(self, obj):
        # recomputed per render; "now" moves independently of writes
        now = self.context.get("now") or timezone.now()
        return obj.display_status(now).value
