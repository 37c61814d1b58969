from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.testclient import TestClient

from apimuslim.adapters.calendar_formatter import IndonesianCalendarFormatter
from apimuslim.api import create_app
from apimuslim.domain.calendar import CalendarService
from apimuslim.domain.calendar.service import (
    CONVERSION_FAILED_MESSAGE,
    DATE_RANGE_MESSAGE,
    INVALID_GREGORIAN_MESSAGE,
)

if TYPE_CHECKING:
    from apimuslim.api import ApiContext


def test_today(client: TestClient) -> None:
    response = client.get("/cal/today")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] is True
    assert body["message"] == "success"
    assert body["data"]["method"] == "standar"
    assert body["data"]["ce"]["day"] == 21
    assert body["data"]["hijr"]["day"] == 7


def test_today_zone_aliases(client: TestClient) -> None:
    assert client.get("/cal/today", params={"tz": "UTC"}).json()["data"]["ce"]["day"] == 20
    assert client.get("/cal/today", params={"tz": "utc"}).json()["data"]["ce"]["day"] == 20
    both = client.get("/cal/today", params={"utc": "Asia/Jakarta", "tz": "UTC"})
    assert both.json()["data"]["ce"]["day"] == 21
    invalid = client.get("/cal/today", params={"tz": "Mars/Olympus"})
    assert invalid.json()["data"]["ce"]["day"] == 21


def test_method_aliases(client: TestClient) -> None:
    by_m = client.get("/cal/today", params={"m": "umalqura"})
    both = client.get("/cal/today", params={"method": "civil", "m": "umalqura"})

    assert by_m.json()["data"]["method"] == "islamic-umalqura"
    assert both.json()["data"]["method"] == "islamic-civil"


def test_gregorian_to_hijri(client: TestClient) -> None:
    response = client.get("/cal/hijr/2024-03-15", params={"adj": "1"})

    data = response.json()["data"]
    assert data["adjustment"] == 1
    assert (data["ce"]["year"], data["ce"]["month"], data["ce"]["day"]) == (2024, 3, 15)
    assert (data["hijr"]["year"], data["hijr"]["month"], data["hijr"]["day"]) == (1445, 9, 2)
    assert data["hijr"]["dayName"] == "Sabtu"


def test_gregorian_to_hijri_invalid_date(client: TestClient) -> None:
    response = client.get("/cal/hijr/2024-02-30")

    assert response.status_code == 400
    assert response.json() == {"status": False, "message": INVALID_GREGORIAN_MESSAGE}


def test_gregorian_to_hijri_date_before_zone_range(client: TestClient) -> None:
    response = client.get("/cal/hijr/0001-01-01")

    assert response.status_code == 400
    assert response.json() == {"status": False, "message": DATE_RANGE_MESSAGE}


def test_hijri_to_gregorian(client: TestClient) -> None:
    response = client.get("/cal/ce/1445-09-01", params={"adj": "-1"})

    data = response.json()["data"]
    assert (data["ce"]["year"], data["ce"]["month"], data["ce"]["day"]) == (2024, 3, 14)
    assert data["hijr"]["day"] == 1


def test_hijri_to_gregorian_conversion_failure(client: TestClient) -> None:
    response = client.get("/cal/ce/9999-01-01")

    assert response.status_code == 400
    assert response.json()["message"] == CONVERSION_FAILED_MESSAGE


def test_worked_example_with_indonesian_formatter(api_context: ApiContext) -> None:
    api_context.calendar = CalendarService(
        formatter=IndonesianCalendarFormatter(), default_time_zone="Asia/Jakarta"
    )

    with TestClient(create_app(api_context)) as client:
        to_hijri = client.get("/cal/hijr/2024-05-10", params={"method": "standar"})
        to_ce = client.get("/cal/ce/1445-11-02", params={"method": "standar"})

    hijr = to_hijri.json()["data"]["hijr"]
    assert (hijr["year"], hijr["month"], hijr["day"]) == (1445, 11, 2)
    assert hijr["today"] == "Jumat, 2 Zulkaidah 1445 H"
    ce = to_ce.json()["data"]["ce"]
    assert (ce["year"], ce["month"], ce["day"]) == (2024, 5, 10)
    assert ce["today"] == "Jumat, 10 Mei 2024"
