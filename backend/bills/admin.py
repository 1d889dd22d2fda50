from django.contrib import admin

from .models import Bill


@admin.register(Bill)
class BillAdmin(admin.ModelAdmin):
    list_display = ("bill_number", "vehicle_no", "customer_name", "route", "total_amount", "currency", "payment_method", "created_at")
    list_filter = ("currency", "payment_method", "created_at")
    search_fields = ("bill_number", "vehicle_no", "customer_name")
    readonly_fields = ("bill_number", "total_amount", "total_amount_lkr", "created_at")
    date_hierarchy = "created_at"
