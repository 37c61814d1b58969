from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from fastapi.testclient import TestClient

from apimuslim.api import create_app
from apimuslim.domain.calendar import CalendarService
from tests.helpers.calendar import BrokenCalendarFormatter, fixed_clock

if TYPE_CHECKING:
    from apimuslim.api import ApiContext


def test_unknown_route(client: TestClient) -> None:
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"status": False, "message": "Data tidak ditemukan .."}


def test_docs_are_served(client: TestClient) -> None:
    assert client.get("/doc").status_code == 200
    schema = client.get("/doc/apimuslim").json()
    assert schema["info"]["version"] == "9.9.9"
    assert "/sholat/kota/all" not in schema["paths"]


def test_unhandled_errors_become_500(api_context: ApiContext) -> None:
    broken = CalendarService(formatter=BrokenCalendarFormatter(), clock=fixed_clock())
    api_context.calendar = broken

    with TestClient(create_app(api_context), raise_server_exceptions=False) as client:
        response = client.get("/cal/today")

    assert response.status_code == 500
    assert response.json() == {"status": False, "message": "internal server error"}


def test_stats_routes_count_requests(client: TestClient) -> None:
    client.get("/health")
    current = client.get("/stats")

    assert current.json()["data"] == {
        "avg": 2,
        "detail": [{"tahun": 2024, "bulan": 3, "hits": 2}],
    }
    assert client.get("/stats/all").json()["data"] == [{"tahun": 2024, "hits": 3}]
    assert client.get("/stats/2024").json()["data"]["detail"][0]["hits"] == 4


def test_stats_skip_loopback(client: TestClient) -> None:
    client.get("/health", headers={"x-forwarded-for": "127.0.0.1"})

    assert client.get("/stats/2024", headers={"x-forwarded-for": "127.0.0.1"}).json()[
        "data"
    ] == {"avg": 0, "detail": []}


def test_stats_invalid_year(client: TestClient) -> None:
    response = client.get("/stats/tahun")

    assert response.status_code == 400
    assert response.json()["message"] == "Tahun tidak valid."


def test_stats_disabled(api_context: ApiContext) -> None:
    context = replace(api_context, stats=None)

    with TestClient(create_app(context)) as client:
        response = client.get("/stats")

    assert response.status_code == 500
    assert response.json()["message"] == "Statistik tidak tersedia."
