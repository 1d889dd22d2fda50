import os
import sys
from decimal import Decimal

# Ensure backend project on path
HERE = os.path.dirname(os.path.abspath(__file__))
REPO_ROOT = os.path.abspath(os.path.join(HERE, os.pardir))
BACKEND_DIR = os.path.join(REPO_ROOT, "backend")
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hire_engine.settings")

import django

django.setup()

from core.models import Vehicle
from core.services import get_business_profile
from customers.models import Customer

VEHICLES = [
    # vehicle_no, model, category, per km, per day, km/day
    ("CAB-1234", "Toyota Axio", "CAR", "55", "9000", "100"),
    ("PH-4521", "Toyota Prius", "CAR", "60", "10000", "100"),
    ("NB-7788", "Toyota KDH", "VAN", "80", "14000", "150"),
    ("KX-3302", "Mitsubishi Montero", "SUV", "110", "18000", "120"),
]

CUSTOMERS = [
    ("Nimal Perera", "0771234567", "nimal@example.com"),
    ("Anne Fernando", "0719876543", None),
]


def main():
    profile = get_business_profile()
    print(f"Business profile: {profile.company_name}")

    for no, model, category, per_km, per_day, km_per_day in VEHICLES:
        _, created = Vehicle.objects.get_or_create(
            vehicle_no=no,
            defaults={
                "model": model,
                "category": category,
                "default_rate": Decimal(per_km),
                "rate_per_day": Decimal(per_day),
                "km_per_day": Decimal(km_per_day),
                "excess_km_rate": Decimal(per_km),
            },
        )
        print(f"{'Created' if created else 'Exists '} vehicle {no}")

    for name, mobile, email in CUSTOMERS:
        _, created = Customer.objects.get_or_create(mobile=mobile, defaults={"name": name, "email": email})
        print(f"{'Created' if created else 'Exists '} customer {name}")

    print("Seed complete. Run `manage.py seed_tours` for demo tour schedules.")


if __name__ == "__main__":
    main()
