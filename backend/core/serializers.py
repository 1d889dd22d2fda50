from rest_framework import serializers

from .models import BusinessProfile, Vehicle


class VehicleSerializer(serializers.ModelSerializer):
    default_rate = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    rate_per_day = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    km_per_day = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    excess_km_rate = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    extra_hour_rate = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)

    class Meta:
        model = Vehicle
        fields = "__all__"
        read_only_fields = ("created_at", "updated_at")


class BusinessProfileSerializer(serializers.ModelSerializer):
    usd_rate = serializers.DecimalField(max_digits=12, decimal_places=4, min_value=0, required=False)

    class Meta:
        model = BusinessProfile
        fields = "__all__"
        read_only_fields = ("created_at", "updated_at")
