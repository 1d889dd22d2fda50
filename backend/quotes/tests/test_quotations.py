from decimal import Decimal

import pytest

import quotes.services as services
from core.exceptions import InvalidStatus, RecordNotFound
from quotes.documents import build_quotation_document
from quotes.models import Quotation
from quotes.services import generate_quotation, search_quotations, update_quotation_status
from tours.services import create_schedule

pytestmark = pytest.mark.django_db


@pytest.fixture
def schedule():
    return create_schedule(
        {"name": "Cultural Triangle", "days": 3, "vehicle_category": "SUV"},
        [
            {"day_number": 1, "title": "Colombo to Kandy", "distance_km": Decimal("120"),
             "accommodation": Decimal("8000"), "meals": Decimal("3000"),
             "activities": Decimal("2500"), "other_costs": Decimal("500")},
            {"day_number": 2, "title": "Kandy to Sigiriya", "distance_km": Decimal("80"),
             "accommodation": Decimal("6000"), "meals": Decimal("2500"), "activities": Decimal("5000")},
            {"day_number": 3, "title": "Sigiriya to Colombo", "distance_km": Decimal("180"),
             "meals": Decimal("1500")},
        ],
    )


def _request(schedule, **overrides):
    data = {
        "tour_schedule": schedule,
        "customer_name": "Anne Fernando",
        "hire_rate_per_km": Decimal("60"),
        "markup": Decimal("10"),
        "discount": Decimal("1000"),
    }
    data.update(overrides)
    return data


def test_per_km_quotation_keeps_breakdown(schedule):
    quotation = generate_quotation(_request(schedule))

    assert quotation.quotation_number == 1
    assert quotation.status == "DRAFT"
    assert quotation.pricing_mode == "PER_KM"
    assert quotation.total_distance == Decimal("380.00")
    assert quotation.transport_cost == Decimal("22800.00")
    assert quotation.driver_total == Decimal("0.00")
    assert quotation.accommodation_total == Decimal("14000.00")
    assert quotation.meals_total == Decimal("7000.00")
    assert quotation.activities_total == Decimal("7500.00")
    assert quotation.other_costs_total == Decimal("500.00")
    assert quotation.subtotal == Decimal("51800.00")
    assert quotation.markup_amount == Decimal("5180.00")
    assert quotation.total_amount == Decimal("55980.00")


def test_per_day_quotation_adds_driver(schedule):
    quotation = generate_quotation(_request(
        schedule,
        pricing_mode="PER_DAY",
        hire_rate_per_day=Decimal("12000"),
        driver_cost_per_day=Decimal("2500"),
        markup=Decimal("0"),
        discount=Decimal("0"),
    ))
    assert quotation.pricing_mode == "PER_DAY"
    assert quotation.transport_cost == Decimal("36000.00")
    assert quotation.driver_total == Decimal("7500.00")
    assert quotation.subtotal == Decimal("72500.00")
    assert quotation.total_amount == Decimal("72500.00")


def test_discount_never_drives_total_negative(schedule):
    quotation = generate_quotation(_request(schedule, markup=Decimal("0"), discount=Decimal("999999")))
    assert quotation.total_amount == Decimal("0.00")


def test_numbers_are_sequential(schedule):
    first = generate_quotation(_request(schedule))
    second = generate_quotation(_request(schedule, customer_name="Ravi Jayasuriya"))
    assert (first.quotation_number, second.quotation_number) == (1, 2)


def test_missing_schedule(schedule):
    with pytest.raises(RecordNotFound):
        generate_quotation(_request(schedule, tour_schedule=424242))
    assert Quotation.objects.count() == 0


def test_status_update_and_invalid_status(schedule):
    quotation = generate_quotation(_request(schedule))
    assert update_quotation_status(quotation.pk, "SENT").status == "SENT"
    with pytest.raises(InvalidStatus):
        update_quotation_status(quotation.pk, "LOST")
    with pytest.raises(RecordNotFound):
        update_quotation_status(424242, "SENT")


def test_search_by_customer_or_tour(schedule):
    generate_quotation(_request(schedule))
    assert search_quotations("anne").count() == 1
    assert search_quotations("triangle").count() == 1
    assert search_quotations("nobody").count() == 0


def test_document_reconciles_with_total(schedule):
    quotation = generate_quotation(_request(schedule, advance_amount=Decimal("20000")))
    doc = build_quotation_document(quotation, prefix="Rs. ")

    line_sum = sum(Decimal(line["amount"]) for line in doc["lines"])
    assert line_sum == Decimal(doc["subtotal"]["amount"])
    assert (Decimal(doc["subtotal"]["amount"]) + Decimal(doc["markup"]["amount"])
            - Decimal(doc["discount"]["amount"])) == Decimal(doc["total"]["amount"])
    assert doc["total"]["formatted"] == "Rs. 55,980.00"
    assert doc["balance_due"]["amount"] == "35980.00"
    assert [day["day_number"] for day in doc["tour"]["itinerary"]] == [1, 2, 3]
    assert len(doc["lines"]) == 5


def test_api_generate_status_and_print(api, schedule):
    resp = api.post("/api/quotations/", {
        "tour_schedule": schedule.pk,
        "customer_name": "Anne Fernando",
        "customer_email": "",
        "number_of_persons": 2,
        "pricing_mode": "PER_DAY",
        "hire_rate_per_day": "12000",
        "driver_cost_per_day": "2500",
    }, format="json")
    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["quotation_number"] == 1
    assert body["customer_email"] is None
    assert body["total_amount"] == "72500.00"
    assert body["schedule"]["name"] == "Cultural Triangle"

    resp = api.post(f"/api/quotations/{body['id']}/status/", {"status": "ACCEPTED"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ACCEPTED"

    resp = api.post(f"/api/quotations/{body['id']}/status/", {"status": "LOST"}, format="json")
    assert resp.status_code == 400

    doc = api.get(f"/api/quotations/{body['id']}/print/").json()
    assert doc["lines"][1]["label"].startswith("Driver")
    assert doc["total"]["amount"] == "72500.00"


def test_api_rejects_zero_persons(api, schedule):
    resp = api.post("/api/quotations/", {
        "tour_schedule": schedule.pk,
        "customer_name": "Anne Fernando",
        "number_of_persons": 0,
    }, format="json")
    assert resp.status_code == 400
    assert "number_of_persons" in resp.json()


def test_schedule_with_quotations_is_counted(api, schedule):
    generate_quotation(_request(schedule))
    listed = api.get("/api/tour-schedules/").json()
    assert listed[0]["quotation_count"] == 1


def test_fractional_figures_reconcile_to_the_cent():
    schedule = create_schedule(
        {"name": "Airport Transfer", "days": 1},
        [{"day_number": 1, "title": "Colombo to Katunayake", "distance_km": Decimal("123.45")}],
    )
    quotation = generate_quotation({
        "tour_schedule": schedule,
        "customer_name": "Anne Fernando",
        "hire_rate_per_km": Decimal("55.55"),
        "markup": Decimal("15"),
    })

    assert quotation.transport_cost == Decimal("6857.65")
    assert quotation.subtotal == Decimal("6857.65")
    assert quotation.markup_amount == Decimal("1028.65")
    assert quotation.total_amount == Decimal("7886.30")
    assert quotation.subtotal + quotation.markup_amount - quotation.discount == quotation.total_amount

    doc = build_quotation_document(quotation, prefix="Rs. ")
    assert (Decimal(doc["subtotal"]["amount"]) + Decimal(doc["markup"]["amount"])
            - Decimal(doc["discount"]["amount"])) == Decimal(doc["total"]["amount"])
    assert sum(Decimal(line["amount"]) for line in doc["lines"]) == Decimal(doc["subtotal"]["amount"])


def test_number_taken_concurrently_is_retried(schedule, monkeypatch):
    generate_quotation(_request(schedule))
    real = services.next_number
    stale = iter([1])
    monkeypatch.setattr(services, "next_number", lambda model, field: next(stale, None) or real(model, field))

    quotation = generate_quotation(_request(schedule, customer_name="Ravi Jayasuriya"))
    assert quotation.quotation_number == 2
    assert Quotation.objects.count() == 2
