import logging
from typing import Iterable

from django.db import transaction
from django.db.models import Count, Q

from core.exceptions import RecordNotFound

from .models import TourSchedule, TourScheduleDayItem

logger = logging.getLogger(__name__)


def _build_items(schedule, items: Iterable[dict]):
    return [TourScheduleDayItem(schedule=schedule, **item) for item in items]


def create_schedule(data: dict, items: Iterable[dict]) -> TourSchedule:
    with transaction.atomic():
        schedule = TourSchedule.objects.create(**data)
        TourScheduleDayItem.objects.bulk_create(_build_items(schedule, items))
    logger.info("Tour schedule %s created: %s (%s days)", schedule.pk, schedule.name, schedule.days)
    return schedule


def update_schedule(pk, data: dict, items: Iterable[dict]) -> TourSchedule:
    """Update schedule details and replace its day items wholesale."""
    with transaction.atomic():
        schedule = TourSchedule.objects.select_for_update().filter(pk=pk).first()
        if schedule is None:
            raise RecordNotFound("Tour schedule not found")
        for key, value in data.items():
            setattr(schedule, key, value)
        schedule.save()
        schedule.items.all().delete()
        TourScheduleDayItem.objects.bulk_create(_build_items(schedule, items))
    logger.info("Tour schedule %s updated", schedule.pk)
    return schedule


def deactivate_schedule(pk) -> None:
    schedule = TourSchedule.objects.filter(pk=pk).first()
    if schedule is None:
        raise RecordNotFound("Tour schedule not found")
    schedule.is_active = False
    schedule.save(update_fields=['is_active', 'updated_at'])
    logger.info("Tour schedule %s deactivated", pk)


def search_schedules(query=None):
    qs = (TourSchedule.objects
          .filter(is_active=True)
          .annotate(quotation_count=Count('quotations'))
          .prefetch_related('items'))
    if query:
        qs = qs.filter(Q(name__icontains=query) | Q(description__icontains=query))
    return qs.order_by('-updated_at')


def get_schedule(pk) -> TourSchedule:
    schedule = TourSchedule.objects.prefetch_related('items').filter(pk=pk).first()
    if schedule is None:
        raise RecordNotFound("Tour schedule not found")
    return schedule
