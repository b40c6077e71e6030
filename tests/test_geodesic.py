"""Tests for geodesic.py"""

import pytest

from geodesic import (
    InvalidGeometryError,
    get_distance,
    get_line_string_distance,
    haversine,
    round_half_up,
)


def _line(coords):
    return {
        "type": "Feature",
        "properties": {"status": "done"},
        "geometry": {"type": "LineString", "coordinates": coords},
    }


class TestHaversine:
    def test_hundredth_degree_of_latitude_at_equator(self):
        # 6371000 * radians(0.01) = 1111.95 m
        assert haversine(0.0, 0.0, 0.01, 0.0) == 1112

    def test_hundredth_degree_of_longitude_at_equator(self):
        assert haversine(0.0, 0.0, 0.0, 0.01) == 1112

    def test_place_bellecour_to_place_des_terreaux(self):
        # dlat 0.0098 deg = 1089.71 m, dlon 0.0016 deg * cos(45.76) = 124.12 m
        # sqrt(1089.71^2 + 124.12^2) = 1096.76 m
        assert haversine(45.7578, 4.8320, 45.7676, 4.8336) == 1097

    def test_same_point_is_zero(self):
        assert haversine(45.75, 4.83, 45.75, 4.83) == 0

    def test_symmetric(self):
        assert haversine(45.75, 4.83, 45.77, 4.86) == haversine(45.77, 4.86, 45.75, 4.83)

    def test_returns_int(self):
        assert isinstance(haversine(45.75, 4.83, 45.77, 4.86), int)


class TestRoundHalfUp:
    def test_halves_go_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_nearest(self):
        assert round_half_up(1111.95) == 1112
        assert round_half_up(11.119) == 11


class TestLineStringDistance:
    def test_single_leg(self):
        assert get_line_string_distance(_line([[0.0, 0.0], [0.0, 0.01]])) == 1112

    def test_coordinates_are_lon_lat(self):
        # 0.01 degree of longitude at 60N is half as long as at the equator
        dist = get_line_string_distance(_line([[0.0, 60.0], [0.01, 60.0]]))
        assert dist == 556

    def test_legs_are_rounded_before_summing(self):
        # ten legs of 11.12 m: 10 * 11 = 110, not round(111.19) = 111
        coords = [[0.0, i / 10000] for i in range(11)]
        assert get_line_string_distance(_line(coords)) == 110

    def test_single_coordinate_is_zero(self):
        assert get_line_string_distance(_line([[4.83, 45.75]])) == 0

    def test_no_coordinates_is_zero(self):
        assert get_line_string_distance(_line([])) == 0

    def test_missing_coordinates_is_zero(self):
        feature = {"type": "Feature", "geometry": {"type": "LineString"}}
        assert get_line_string_distance(feature) == 0

    def test_altitude_is_ignored(self):
        coords = [[0.0, 0.0, 170.0], [0.0, 0.01, 180.0]]
        assert get_line_string_distance(_line(coords)) == 1112

    def test_point_raises(self):
        point = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [0.0, 0.0]}}
        with pytest.raises(InvalidGeometryError):
            get_line_string_distance(point)

    def test_missing_geometry_raises(self):
        with pytest.raises(InvalidGeometryError):
            get_line_string_distance({"type": "Feature", "properties": {}})

    def test_invalid_geometry_is_a_value_error(self):
        polygon = {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": []}}
        with pytest.raises(ValueError, match="LineString"):
            get_line_string_distance(polygon)


class TestDistance:
    def test_sums_features(self):
        features = [
            _line([[0.0, 0.0], [0.0, 0.01]]),
            _line([[0.0, 0.0], [0.0, 0.03]]),
        ]
        assert get_distance(features) == 1112 + 3336

    def test_empty(self):
        assert get_distance([]) == 0

    def test_does_not_filter_geometries(self):
        point = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [0.0, 0.0]}}
        with pytest.raises(InvalidGeometryError):
            get_distance([_line([[0.0, 0.0], [0.0, 0.01]]), point])
