from django.contrib import admin

from .models import Quotation


@admin.register(Quotation)
class QuotationAdmin(admin.ModelAdmin):
    list_display = ("quotation_number", "customer_name", "tour_schedule", "pricing_mode", "total_amount", "status", "created_at")
    search_fields = ("quotation_number", "customer_name", "tour_schedule__name")
    list_filter = ("status", "pricing_mode", "created_at")
    date_hierarchy = "created_at"
    readonly_fields = (
        "quotation_number", "total_distance", "transport_cost", "driver_total",
        "accommodation_total", "meals_total", "activities_total", "other_costs_total",
        "subtotal", "markup_amount", "total_amount", "created_at",
    )
