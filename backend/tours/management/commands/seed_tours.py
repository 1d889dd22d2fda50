# backend/tours/management/commands/seed_tours.py
from decimal import Decimal

from django.core.management.base import BaseCommand

from tours.models import TourSchedule
from tours.services import create_schedule


def _day(n, title, description, km, accommodation, meals, activities, other):
    return {
        "day_number": n,
        "title": title,
        "description": description,
        "distance_km": Decimal(km),
        "accommodation": Decimal(accommodation),
        "meals": Decimal(meals),
        "activities": Decimal(activities),
        "other_costs": Decimal(other),
    }


TOURS = [
    {
        "name": "Cultural Triangle Explorer",
        "description": "Discover Sri Lanka's ancient kingdoms: Kandy, Sigiriya, Dambulla and Polonnaruwa. "
                       "A heritage-rich journey through UNESCO World Heritage sites.",
        "days": 5,
        "vehicle_category": "SUV",
        "base_price_per_person": Decimal("45000"),
        "items": [
            _day(1, "Colombo to Kandy", "Airport pickup, drive to Kandy via Pinnawala Elephant Orphanage. "
                 "Visit Temple of the Tooth.", 120, 8000, 3000, 2500, 500),
            _day(2, "Kandy to Dambulla", "Morning visit to Royal Botanical Gardens, Peradeniya. Drive to "
                 "Dambulla Cave Temple. Spice garden en route.", 75, 6000, 2500, 2000, 300),
            _day(3, "Dambulla to Sigiriya to Polonnaruwa", "Climb Sigiriya Lion Rock at sunrise. Afternoon "
                 "explore Polonnaruwa ancient city ruins.", 80, 6000, 2500, 5000, 500),
            _day(4, "Polonnaruwa to Minneriya to Habarana", "Jeep safari at Minneriya National Park "
                 "(elephant gathering). Village tour by tuk-tuk.", 45, 7000, 3000, 6000, 1000),
            _day(5, "Habarana to Colombo", "Breakfast and return drive to Colombo. Drop-off at airport "
                 "or hotel.", 180, 0, 1500, 0, 0),
        ],
    },
    {
        "name": "Southern Coast & Wildlife",
        "description": "Sun, surf and safari along Sri Lanka's southern coastline: Bentota, Galle Fort, "
                       "Mirissa whale watching and Yala National Park.",
        "days": 4,
        "vehicle_category": "Van",
        "base_price_per_person": Decimal("38000"),
        "items": [
            _day(1, "Colombo to Bentota", "Drive along the coast. Bentota river safari, turtle hatchery "
                 "visit. Evening at beach resort.", 95, 9000, 3500, 3000, 500),
            _day(2, "Bentota to Galle", "Explore Galle Dutch Fort (UNESCO). Walking tour through "
                 "cobblestone streets, lighthouse and local cafes.", 55, 8000, 3000, 1500, 300),
            _day(3, "Galle to Mirissa to Tissamaharama", "Early morning whale watching in Mirissa. Drive "
                 "east to Tissa for Yala safari prep.", 140, 7000, 3000, 8000, 500),
            _day(4, "Yala Safari to Colombo", "Dawn jeep safari at Yala National Park (leopards, elephants, "
                 "crocodiles). Return to Colombo.", 270, 0, 2000, 7000, 0),
        ],
    },
    {
        "name": "Hill Country Tea Trail",
        "description": "Misty mountains, waterfalls and tea plantations: Nuwara Eliya, Ella and the "
                       "iconic train ride through the hill country.",
        "days": 4,
        "vehicle_category": "SUV",
        "base_price_per_person": Decimal("35000"),
        "items": [
            _day(1, "Colombo to Nuwara Eliya", "Scenic drive through tea country. Visit a tea factory in "
                 "Ramboda. Stop at Ramboda Falls.", 180, 8500, 3000, 1500, 500),
            _day(2, "Nuwara Eliya Sightseeing", "Horton Plains & World's End hike. Gregory Lake boating. "
                 "Strawberry farm visit.", 40, 8500, 3000, 3500, 500),
            _day(3, "Nuwara Eliya to Ella (Train)", "Blue train ride through tea estates and Nine Arch "
                 "Bridge. Evening at Ella rock viewpoint.", 60, 6000, 2500, 2000, 1500),
            _day(4, "Ella to Colombo", "Visit Ravana Falls and Ravana Cave. Drive back to Colombo via "
                 "Wellawaya.", 230, 0, 2000, 1000, 0),
        ],
    },
]


class Command(BaseCommand):
    help = "Idempotently load the demo tour schedules (matched by name)."

    def handle(self, *args, **opts):
        for tour in TOURS:
            data = {k: v for k, v in tour.items() if k != "items"}
            if TourSchedule.objects.filter(name=data["name"]).exists():
                self.stdout.write(f"Tour '{data['name']}' already exists")
                continue
            schedule = create_schedule(data, tour["items"])
            self.stdout.write(self.style.SUCCESS(
                f"Created: {schedule.name} ({schedule.items.count()} days, ID: {schedule.pk})"
            ))
