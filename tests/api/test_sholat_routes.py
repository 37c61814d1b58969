from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from apimuslim.domain.sholat.locations import (
    KEYWORD_LETTER_START_MESSAGE,
    KEYWORD_REQUIRED_MESSAGE,
)
from apimuslim.domain.sholat.schedules import INVALID_PERIOD_MESSAGE

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


def test_info(client: TestClient) -> None:
    data = client.get("/sholat").json()["data"]

    assert data["last_update"] == "2024-03-01T00:00:00Z"
    assert data["source"] == "bimasislam.kemenag.go.id"


@pytest.mark.parametrize(
    "path",
    ["/sholat/kabkota/semua", "/sholat/kabkota/all", "/sholat/kota/semua", "/sholat/kota/all"],
)
def test_all_locations(client: TestClient, path: str) -> None:
    response = client.get(path)

    assert response.status_code == 200
    assert [item["id"] for item in response.json()["data"]] == ["1301", "1201", "1202"]


def test_location_by_id(client: TestClient) -> None:
    assert client.get("/sholat/kabkota/1201").json()["data"] == [
        {"id": "1201", "lokasi": "KAB. BANDUNG"}
    ]
    assert client.get("/sholat/kota/1301").json()["data"][0]["lokasi"] == "KOTA JAKARTA"


def test_location_by_id_not_found(client: TestClient) -> None:
    response = client.get("/sholat/kabkota/9999")

    assert response.status_code == 404
    assert response.json() == {"status": False, "message": "Data tidak ditemukan."}


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/sholat/kabkota/cari/bandung", ["1201", "1202"]),
        ("/sholat/kabkota/cari/Kabupaten%20Bandung", ["1201"]),
        ("/sholat/kota/find/jakarta", ["1301"]),
    ],
)
def test_search_by_path(client: TestClient, path: str, expected: list[str]) -> None:
    assert [item["id"] for item in client.get(path).json()["data"]] == expected


def test_search_rejects_bad_keyword(client: TestClient) -> None:
    response = client.get("/sholat/kabkota/cari/12abc")

    assert response.status_code == 400
    assert response.json()["message"] == KEYWORD_LETTER_START_MESSAGE


def test_search_without_match(client: TestClient) -> None:
    assert client.get("/sholat/kabkota/cari/surabaya").status_code == 404


def test_search_by_post(client: TestClient) -> None:
    response = client.post("/sholat/kabkota/cari", json={"keyword": "jakarta"})

    assert [item["id"] for item in response.json()["data"]] == ["1301"]


def test_search_by_post_alias_without_keyword(client: TestClient) -> None:
    response = client.post("/sholat/kota/find", content=b"not json")

    assert response.status_code == 400
    assert response.json()["message"] == KEYWORD_REQUIRED_MESSAGE


def test_schedule_today(client: TestClient) -> None:
    jakarta = client.get("/sholat/jadwal/1301/today").json()["data"]
    utc = client.get("/sholat/jadwal/1301/today", params={"tz": "UTC"}).json()["data"]

    assert list(jakarta["jadwal"]) == ["2024-03-21"]
    assert list(utc["jadwal"]) == ["2024-03-20"]
    assert jakarta["kabko"] == "KOTA JAKARTA"


def test_schedule_month_and_day(client: TestClient) -> None:
    month = client.get("/sholat/jadwal/1301/2024-03").json()["data"]
    day = client.get("/sholat/jadwal/1301/2024-3-15").json()["data"]

    assert len(month["jadwal"]) == 3
    assert list(day["jadwal"]) == ["2024-03-15"]


def test_schedule_invalid_period(client: TestClient) -> None:
    response = client.get("/sholat/jadwal/1301/2024-13")

    assert response.status_code == 400
    assert response.json()["message"] == INVALID_PERIOD_MESSAGE


@pytest.mark.parametrize(
    "path",
    [
        "/sholat/jadwal/1301/2025-01",
        "/sholat/jadwal/1301/2024-03-31",
        "/sholat/jadwal/9999/today",
    ],
)
def test_schedule_not_found(client: TestClient, path: str) -> None:
    assert client.get(path).status_code == 404


def test_imsakiyah_current(client: TestClient) -> None:
    data = client.get("/sholat/imsakiyah/1301").json()["data"]

    assert "2024-03-15" in data["jadwal"]


def test_imsakiyah_by_year(client: TestClient) -> None:
    by_hijri = client.get("/sholat/imsakiyah/1301/hijr/1445").json()["data"]
    by_ce = client.get("/sholat/imsakiyah/1301/ce/2024", params={"method": "standar"}).json()

    assert "2024-03-15" in by_hijri["jadwal"]
    assert "2024-03-15" in by_ce["data"]["jadwal"]


def test_imsakiyah_missing_schedule(client: TestClient) -> None:
    hijri = client.get("/sholat/imsakiyah/1301/hijr/1446")
    ce = client.get("/sholat/imsakiyah/1301/ce/2023")

    assert hijri.status_code == 404
    assert hijri.json()["message"] == "Data jadwal tidak tersedia untuk Ramadhan 1446H (2025-03)."
    assert ce.status_code == 404
    assert ce.json()["message"] == "Data jadwal tidak tersedia untuk Ramadhan dalam tahun 2023."


def test_imsakiyah_requires_four_digit_year(client: TestClient) -> None:
    response = client.get("/sholat/imsakiyah/1301/ce/24")

    assert response.status_code == 400
    assert response.json()["status"] is False
