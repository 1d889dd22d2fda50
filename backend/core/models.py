from decimal import Decimal

from django.db import models


class Vehicle(models.Model):
    STATUS_CHOICES = [('ACTIVE', 'Active'), ('MAINTENANCE', 'Maintenance'), ('INACTIVE', 'Inactive')]
    CATEGORY_CHOICES = [('CAR', 'Car'), ('VAN', 'Van'), ('SUV', 'SUV'), ('BUS', 'Bus'), ('LORRY', 'Lorry')]

    vehicle_no = models.CharField(max_length=32, unique=True)
    model = models.CharField(max_length=120, blank=True, null=True)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default='CAR')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ACTIVE')
    default_rate = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    rate_per_day = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    km_per_day = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    excess_km_rate = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    extra_hour_rate = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at']

    def __str__(self):
        return self.vehicle_no


class BusinessProfile(models.Model):
    DEFAULT_COMPANY_NAME = 'My Transport Company'

    company_name = models.CharField(max_length=255)
    address = models.TextField(blank=True, null=True)
    phone = models.CharField(max_length=64, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    website = models.CharField(max_length=255, blank=True, null=True)
    logo_url = models.CharField(max_length=500, blank=True, null=True)
    usd_rate = models.DecimalField(max_digits=12, decimal_places=4, default=Decimal('300'))
    bank_name = models.CharField(max_length=255, blank=True, null=True)
    bank_branch = models.CharField(max_length=255, blank=True, null=True)
    bank_account_no = models.CharField(max_length=64, blank=True, null=True)
    bank_account_name = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.company_name
