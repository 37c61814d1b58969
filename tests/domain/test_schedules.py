from __future__ import annotations

from datetime import UTC, datetime

import pytest

from apimuslim.domain.sholat import (
    MonthlySchedule,
    SchedulePeriod,
    parse_schedule_period,
    select_period,
    today_period,
)
from tests.helpers.calendar import fixed_clock
from tests.helpers.data_files import schedule_entry


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-03", SchedulePeriod(2024, 3)),
        ("2024-3", SchedulePeriod(2024, 3)),
        ("2024-03-15", SchedulePeriod(2024, 3, 15)),
        ("2024-3-5", SchedulePeriod(2024, 3, 5)),
    ],
)
def test_parse_schedule_period(value: str, expected: SchedulePeriod) -> None:
    assert parse_schedule_period(value) == expected


@pytest.mark.parametrize(
    "value", ["2024", "24-03", "2024-13", "2024-00", "2024-03-32", "2024-03-1.5", "abcd-01"]
)
def test_parse_schedule_period_rejects(value: str) -> None:
    assert parse_schedule_period(value) is None


def test_day_key_is_zero_padded() -> None:
    assert SchedulePeriod(2024, 3, 5).day_key == "2024-03-05"
    assert SchedulePeriod(2024, 3).day_key is None
    assert SchedulePeriod(2024, 3, 5).is_daily


def test_today_period_follows_zone() -> None:
    assert today_period("Asia/Jakarta", clock=fixed_clock()) == SchedulePeriod(2024, 3, 21)
    assert today_period("UTC", clock=fixed_clock()) == SchedulePeriod(2024, 3, 20)
    assert today_period(
        "UTC", clock=fixed_clock(datetime(2024, 1, 1, tzinfo=UTC))
    ) == SchedulePeriod(2024, 1, 1)


def _schedule() -> MonthlySchedule:
    return MonthlySchedule(
        id="1301",
        kabko="KOTA JAKARTA",
        prov="DKI JAKARTA",
        jadwal={
            "2024-03-15": schedule_entry("2024-03-15"),
            "2024-03-16": schedule_entry("2024-03-16"),
        },
    )


def test_select_period_keeps_month() -> None:
    schedule = _schedule()

    assert select_period(schedule, SchedulePeriod(2024, 3)) is schedule


def test_select_period_narrows_to_day() -> None:
    selected = select_period(_schedule(), SchedulePeriod(2024, 3, 16))

    assert selected is not None
    assert list(selected.jadwal) == ["2024-03-16"]
    assert selected.to_payload()["kabko"] == "KOTA JAKARTA"


def test_select_period_missing_day() -> None:
    assert select_period(_schedule(), SchedulePeriod(2024, 3, 31)) is None
