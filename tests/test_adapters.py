import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest

from core.exceptions import CoordinateError, UnsupportedSystemError
from modules.coord_transform import (
    Coordinate,
    CoordSystem,
    from_lat_lng,
    from_point,
    normalize_coordinate,
    to_lat_lng,
    to_point,
    transform,
    validate_coordinate,
)
from modules.coord_transform.adapters import ensure_sequence, resolve_system

COORD = Coordinate(longitude=116.404, latitude=39.915)


def test_to_point():
    point = to_point(COORD)
    assert point == (116.404, 39.915)
    assert len(point) == 2


def test_to_lat_lng():
    latlng = to_lat_lng(COORD)
    assert latlng == {"lat": 39.915, "lng": 116.404}


def test_output_adapters_accept_any_shape():
    assert to_point({"lat": 39.915, "lng": 116.404}) == (116.404, 39.915)
    assert to_lat_lng([116.404, 39.915]) == {"lat": 39.915, "lng": 116.404}


def test_from_point_and_from_lat_lng():
    assert from_point((116.404, 39.915)) == COORD
    assert from_point([116.404, 39.915]) == COORD
    assert from_lat_lng({"lat": 39.915, "lng": 116.404}) == COORD


def test_lat_lng_keys_take_precedence():
    coord = normalize_coordinate({"lat": 1.0, "lng": 2.0, "longitude": 3.0, "latitude": 4.0})
    assert coord == Coordinate(longitude=2.0, latitude=1.0)


def test_numeric_strings_are_coerced():
    assert normalize_coordinate(["116.404", "39.915"]) == COORD


@pytest.mark.parametrize(
    "value",
    [
        None,
        {},
        {"longitude": 116.404},
        {"latitude": 39.915},
        {"lat": 39.915},
        {"lng": 116.404},
        {"lat": None, "lng": 116.404},
        [116.404],
        [116.404, 39.915, 10.0],
        "116.404,39.915",
        ["abc", 39.915],
        [True, 39.915],
        [10 ** 400, 39.915],
        {"lat": 39.915, "lng": -(10 ** 400)},
        42,
    ],
)
def test_malformed_inputs_raise(value):
    with pytest.raises(CoordinateError):
        transform(value, CoordSystem.WGS84, CoordSystem.GCJ02)


def test_non_finite_after_normalization():
    with pytest.raises(CoordinateError):
        transform([float("nan"), 0], CoordSystem.WGS84, CoordSystem.GCJ02)
    with pytest.raises(CoordinateError):
        transform({"lat": float("nan"), "lng": 0}, CoordSystem.WGS84, CoordSystem.GCJ02)


def test_normalize_does_not_range_check():
    coord = normalize_coordinate([181, 91])
    with pytest.raises(CoordinateError) as exc_info:
        validate_coordinate(coord)
    assert exc_info.value.payload == {"longitude": 181.0, "latitude": 91.0}
    assert exc_info.value.code == 400


def test_validate_accepts_bounds():
    validate_coordinate(Coordinate(longitude=-180, latitude=-90))
    validate_coordinate(Coordinate(longitude=180, latitude=90))


def test_resolve_system():
    assert resolve_system(CoordSystem.BD09) is CoordSystem.BD09
    assert resolve_system(" bd09 ") is CoordSystem.BD09
    with pytest.raises(UnsupportedSystemError) as exc_info:
        resolve_system("CGCS2000", "目标")
    assert exc_info.value.payload == {"system": "CGCS2000"}


def test_ensure_sequence():
    assert ensure_sequence(iter([(1, 2)])) == [(1, 2)]
    assert ensure_sequence(()) == []
    for bad in (None, "abc", {"lat": 1, "lng": 2}, 5):
        with pytest.raises(CoordinateError):
            ensure_sequence(bad)
