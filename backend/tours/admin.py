from django.contrib import admin

from .models import TourSchedule, TourScheduleDayItem


class TourScheduleDayItemInline(admin.TabularInline):
    model = TourScheduleDayItem
    extra = 0


@admin.register(TourSchedule)
class TourScheduleAdmin(admin.ModelAdmin):
    list_display = ("name", "days", "vehicle_category", "base_price_per_person", "is_active", "updated_at")
    list_filter = ("is_active", "vehicle_category")
    search_fields = ("name", "description")
    inlines = [TourScheduleDayItemInline]
