from django.contrib import admin

from .models import BusinessProfile, Vehicle


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ("vehicle_no", "model", "category", "status", "default_rate", "rate_per_day", "updated_at")
    list_filter = ("category", "status")
    search_fields = ("vehicle_no", "model")


@admin.register(BusinessProfile)
class BusinessProfileAdmin(admin.ModelAdmin):
    list_display = ("company_name", "phone", "email", "usd_rate", "updated_at")
