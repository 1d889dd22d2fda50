from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("vehicle_no", "customer_name", "start_date", "end_date", "status", "advance_amount", "refund_status")
    list_filter = ("status", "refund_status")
    search_fields = ("vehicle_no", "customer_name", "destination")
    date_hierarchy = "start_date"
