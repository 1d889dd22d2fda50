from decimal import Decimal

from rest_framework import serializers

from .models import Bill

_money = dict(max_digits=12, decimal_places=2, min_value=Decimal('0'))


class BillSerializer(serializers.ModelSerializer):
    start_meter = serializers.DecimalField(**_money)
    end_meter = serializers.DecimalField(**_money)
    hire_rate = serializers.DecimalField(**_money)
    allowed_km = serializers.DecimalField(required=False, default=Decimal('0'), **_money)
    waiting_charge = serializers.DecimalField(required=False, default=Decimal('0'), **_money)
    gate_pass = serializers.DecimalField(required=False, default=Decimal('0'), **_money)
    package_charge = serializers.DecimalField(required=False, default=Decimal('0'), **_money)
    advance_amount = serializers.DecimalField(required=False, default=Decimal('0'), **_money)
    exchange_rate = serializers.DecimalField(max_digits=12, decimal_places=4, min_value=Decimal('0'),
                                             required=False, default=Decimal('1'))
    currency = serializers.CharField(max_length=3, required=False, default='LKR')
    booking_id = serializers.IntegerField(write_only=True, required=False, allow_null=True)
    balance_due = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = Bill
        fields = [
            "id", "bill_number", "booking", "booking_id",
            "vehicle_no", "customer_name", "customer_address", "route",
            "start_meter", "end_meter", "hire_rate", "allowed_km",
            "waiting_charge", "gate_pass", "package_charge", "advance_amount",
            "currency", "exchange_rate", "payment_method",
            "total_amount", "total_amount_lkr", "balance_due",
            "created_at", "updated_at",
        ]
        read_only_fields = ("bill_number", "booking", "total_amount", "total_amount_lkr", "created_at", "updated_at")

    def validate(self, attrs):
        if attrs['end_meter'] <= attrs['start_meter']:
            raise serializers.ValidationError({"end_meter": "End meter must be greater than start meter"})
        return attrs

    def get_balance_due(self, obj):
        return str(obj.totals.balance_due.quantize(Decimal('0.01')))
