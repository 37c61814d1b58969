from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from apimuslim.adapters.schedule_files import (
    JsonScheduleStore,
    ScheduleFileError,
    load_location_directory,
    load_locations,
    parse_schedule_file,
)
from apimuslim.domain.sholat import Location
from tests.helpers.data_files import write_kabkota, write_schedule

if TYPE_CHECKING:
    from pathlib import Path

    from apimuslim.config.storage import StorageConfig


def test_load_locations(storage: StorageConfig) -> None:
    locations, fetched_at = load_locations(storage.kabkota_path)

    assert fetched_at == "2024-03-01T00:00:00Z"
    assert locations == [
        Location("1301", "KOTA JAKARTA"),
        Location("1201", "KAB. BANDUNG"),
        Location("1202", "KOTA BANDUNG"),
    ]


def test_load_location_directory_sets_last_update(storage: StorageConfig) -> None:
    directory = load_location_directory(storage.kabkota_path, enable_cache=True)

    assert directory.last_update == "2024-03-01T00:00:00Z"
    assert directory.enable_cache
    assert len(directory.all()) == 3


def test_load_locations_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ScheduleFileError):
        load_locations(tmp_path / "kabkota.json")


def test_load_locations_unexpected_shape(tmp_path: Path) -> None:
    path = write_kabkota(tmp_path, payload=["not", "a", "map"])

    with pytest.raises(ScheduleFileError):
        load_locations(path)


def test_store_loads_month(storage: StorageConfig) -> None:
    store = JsonScheduleStore(storage.jadwal_dir)

    schedule = store.load_month("1301", 2024, 3)

    assert schedule is not None
    assert schedule.kabko == "KOTA JAKARTA"
    assert schedule.prov == "DKI JAKARTA"
    assert sorted(schedule.jadwal) == ["2024-03-15", "2024-03-20", "2024-03-21"]
    assert schedule.jadwal["2024-03-15"]["imsak"] == "04:25"


def test_store_missing_month(storage: StorageConfig) -> None:
    assert JsonScheduleStore(storage.jadwal_dir).load_month("1301", 2030, 1) is None


@pytest.mark.parametrize("location_id", ["../1301", "13/01", "", "1301.json"])
def test_store_rejects_unsafe_ids(storage: StorageConfig, location_id: str) -> None:
    assert JsonScheduleStore(storage.jadwal_dir).load_month(location_id, 2024, 3) is None


def test_store_corrupt_file(storage: StorageConfig) -> None:
    path = write_schedule(storage.jadwal_dir, "1202", 2024, 3, (1,))
    path.write_text("{not json", encoding="utf-8")

    assert JsonScheduleStore(storage.jadwal_dir).load_month("1202", 2024, 3) is None


def test_store_cache_keeps_loaded_month(storage: StorageConfig) -> None:
    store = JsonScheduleStore(storage.jadwal_dir, enable_cache=True)
    first = store.load_month("1301", 2024, 4)
    store.path_for("1301", 2024, 4).unlink()

    assert store.load_month("1301", 2024, 4) is first


def test_store_without_cache_rereads(storage: StorageConfig) -> None:
    store = JsonScheduleStore(storage.jadwal_dir)
    assert store.load_month("1301", 2024, 4) is not None
    store.path_for("1301", 2024, 4).unlink()

    assert store.load_month("1301", 2024, 4) is None


def test_parse_schedule_file_falls_back_to_nested_names() -> None:
    raw = json.loads(
        '{"prov": {"text": "JAWA BARAT"}, "kab": {"text": "KOTA BANDUNG"},'
        ' "jadwal": {"data": {"2024-03-01": {"subuh": "04:40"}}}}'
    )

    schedule = parse_schedule_file("1202", raw)

    assert schedule is not None
    assert (schedule.id, schedule.kabko, schedule.prov) == ("1202", "KOTA BANDUNG", "JAWA BARAT")


@pytest.mark.parametrize("raw", [[], {"jadwal": []}, {"jadwal": {"data": []}}])
def test_parse_schedule_file_rejects_unexpected_shapes(raw: object) -> None:
    assert parse_schedule_file("1202", raw) is None
