from __future__ import annotations

import pytest

from apimuslim.domain.qibla import (
    KAABA_LATITUDE,
    KAABA_LONGITUDE,
    Coordinate,
    parse_qibla_coordinate,
    qibla_direction,
)


def test_parse_qibla_coordinate_reads_decimal_degrees() -> None:
    assert parse_qibla_coordinate("-6.200000,106.816666") == Coordinate(-6.2, 106.816666)
    assert parse_qibla_coordinate(" 90 , -180 ") == Coordinate(90.0, -180.0)


@pytest.mark.parametrize(
    "value",
    ["", "abc", "1", "1,2,3", "abc,1", "1,", "-100,0", "91,0", "0,200", "0,181", "nan,0", "0,inf"],
)
def test_parse_qibla_coordinate_rejects_bad_input(value: str) -> None:
    assert parse_qibla_coordinate(value) is None


def test_qibla_direction_from_jakarta() -> None:
    assert qibla_direction(Coordinate(-6.2, 106.816666)) == pytest.approx(295.15, abs=0.1)


def test_qibla_direction_along_the_kaaba_meridian() -> None:
    south = Coordinate(0.0, KAABA_LONGITUDE)
    north = Coordinate(60.0, KAABA_LONGITUDE)

    assert qibla_direction(south) == pytest.approx(0.0)
    assert qibla_direction(north) == pytest.approx(180.0)


def test_qibla_direction_stays_within_a_full_turn() -> None:
    west = qibla_direction(Coordinate(KAABA_LATITUDE, -75.0))
    east = qibla_direction(Coordinate(KAABA_LATITUDE, 120.0))

    assert 0 < west < 90
    assert 270 < east < 360
