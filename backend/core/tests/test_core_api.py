import pytest
from django.core.management import call_command

from core.models import BusinessProfile
from core.services import get_business_profile

pytestmark = pytest.mark.django_db


def test_profile_is_created_on_first_read(api):
    resp = api.get("/api/business-profile")
    assert resp.status_code == 200
    assert resp.json()["company_name"] == "My Transport Company"
    assert resp.json()["usd_rate"] == "300.0000"
    assert BusinessProfile.objects.count() == 1


def test_profile_update_keeps_single_row(api):
    first = get_business_profile()
    resp = api.put("/api/business-profile", {
        "company_name": "Lanka Cabs",
        "phone": "+94 77 123 4567",
        "bank_name": "Commercial Bank",
    }, format="json")
    assert resp.status_code == 200, resp.content
    assert resp.json()["id"] == first.pk
    assert BusinessProfile.objects.count() == 1
    assert get_business_profile().company_name == "Lanka Cabs"


def test_vehicle_crud_and_search(api):
    resp = api.post("/api/vehicles/", {"vehicle_no": "CAB-1234", "model": "Toyota Axio",
                                       "default_rate": "55.00"}, format="json")
    assert resp.status_code == 201, resp.content
    api.post("/api/vehicles/", {"vehicle_no": "VAN-9876", "model": "Toyota KDH", "category": "VAN"},
             format="json")

    found = api.get("/api/vehicles/", {"q": "axio"}).json()
    assert [v["vehicle_no"] for v in found] == ["CAB-1234"]

    duplicate = api.post("/api/vehicles/", {"vehicle_no": "CAB-1234"}, format="json")
    assert duplicate.status_code == 400


def test_health_command_reports_counts(capsys):
    call_command("check_health")
    out = capsys.readouterr().out
    assert "Database OK" in out
    assert "core_vehicle: 0" in out
