from decimal import Decimal

import pytest
from django.core.management import call_command

from core.exceptions import RecordNotFound
from tours.models import TourSchedule
from tours.services import create_schedule, deactivate_schedule, search_schedules, update_schedule

pytestmark = pytest.mark.django_db


def _items():
    return [
        {"day_number": 1, "title": "Colombo to Kandy", "distance_km": Decimal("120"),
         "accommodation": Decimal("8000"), "meals": Decimal("3000")},
        {"day_number": 2, "title": "Kandy to Ella", "distance_km": Decimal("140"),
         "activities": Decimal("2000")},
    ]


def _payload():
    return {
        "name": "Hill Country Escape",
        "description": "Tea estates and waterfalls",
        "days": 2,
        "vehicle_category": "VAN",
        "items": [
            {"day_number": 1, "title": "Colombo to Kandy", "distance_km": "120", "accommodation": "8000"},
            {"day_number": 2, "title": "Kandy to Ella", "distance_km": "140", "meals": "2500"},
        ],
    }


def test_create_and_itinerary():
    schedule = create_schedule({"name": "Kandy Run", "days": 2}, _items())
    itinerary = schedule.itinerary()
    assert [day.distance_km for day in itinerary] == [Decimal("120"), Decimal("140")]
    assert itinerary[1].accommodation == Decimal("0")


def test_update_replaces_items():
    schedule = create_schedule({"name": "Kandy Run", "days": 2}, _items())
    update_schedule(schedule.pk, {"name": "Kandy Day Trip", "days": 1},
                    [{"day_number": 1, "title": "Return", "distance_km": Decimal("230")}])
    schedule.refresh_from_db()
    assert schedule.name == "Kandy Day Trip"
    assert [item.title for item in schedule.items.all()] == ["Return"]


def test_update_missing_schedule():
    with pytest.raises(RecordNotFound):
        update_schedule(424242, {"name": "x"}, [])


def test_deactivated_schedule_leaves_listing_but_keeps_row():
    schedule = create_schedule({"name": "Kandy Run", "days": 2}, _items())
    deactivate_schedule(schedule.pk)
    assert not search_schedules().filter(pk=schedule.pk).exists()
    assert TourSchedule.objects.get(pk=schedule.pk).is_active is False


def test_search_matches_name_or_description():
    create_schedule({"name": "Kandy Run", "days": 2, "description": "Temple of the Tooth"}, _items())
    create_schedule({"name": "South Coast", "days": 2}, _items())
    assert [s.name for s in search_schedules("temple")] == ["Kandy Run"]
    assert search_schedules().count() == 2


def test_seed_tours_is_idempotent():
    call_command("seed_tours")
    count = TourSchedule.objects.count()
    call_command("seed_tours")
    assert TourSchedule.objects.count() == count > 0


def test_api_create_update_delete(api):
    resp = api.post("/api/tour-schedules/", _payload(), format="json")
    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["is_active"] is True
    assert [i["day_number"] for i in body["items"]] == [1, 2]
    assert body["quotation_count"] == 0

    payload = _payload()
    payload["items"] = payload["items"][:1]
    payload["days"] = 1
    resp = api.put(f"/api/tour-schedules/{body['id']}/", payload, format="json")
    assert resp.status_code == 200, resp.content
    assert len(resp.json()["items"]) == 1

    assert api.delete(f"/api/tour-schedules/{body['id']}/").status_code == 204
    assert api.get("/api/tour-schedules/").json() == []


def test_api_rejects_empty_items_and_zero_days(api):
    payload = _payload()
    payload["items"] = []
    payload["days"] = 0
    resp = api.post("/api/tour-schedules/", payload, format="json")
    assert resp.status_code == 400
    errors = resp.json()
    assert "items" in errors
    assert "days" in errors
