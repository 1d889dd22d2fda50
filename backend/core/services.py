import logging

from django.db import transaction
from django.db.models import Q

from .models import BusinessProfile, Vehicle

logger = logging.getLogger(__name__)


def search_vehicles(query=None):
    qs = Vehicle.objects.all()
    if query:
        qs = qs.filter(Q(vehicle_no__icontains=query) | Q(model__icontains=query))
    return qs.order_by('-updated_at')


def get_business_profile() -> BusinessProfile:
    """Return the single business profile row, creating a default one on first use."""
    profile = BusinessProfile.objects.order_by('id').first()
    if profile is None:
        profile = BusinessProfile.objects.create(company_name=BusinessProfile.DEFAULT_COMPANY_NAME)
        logger.info("Created default business profile")
    return profile


def update_business_profile(data: dict) -> BusinessProfile:
    with transaction.atomic():
        profile = BusinessProfile.objects.select_for_update().order_by('id').first()
        if profile is None:
            profile = BusinessProfile(**data)
        else:
            for key, value in data.items():
                setattr(profile, key, value)
        profile.save()
    logger.info("Business profile updated: %s", profile.company_name)
    return profile
