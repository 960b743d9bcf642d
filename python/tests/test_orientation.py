"""Panel orientation transform tests."""

import pytest
from structlog.testing import capture_logs

from solar_fraction._types import GeoPoint
from solar_fraction.geometry import cos_angle_between
from solar_fraction.orientation import orient


def assert_point(actual, latitude, longitude, abs=1e-9):
    assert actual.latitude == pytest.approx(latitude, abs=abs), actual
    assert actual.longitude == pytest.approx(longitude, abs=abs), actual


LOCATIONS = [
    GeoPoint(53.0, 8.0),
    GeoPoint(-23.0, 179.0),
    GeoPoint(66.0, -70.0),
    GeoPoint(2.5, -99.3),
]
TILTS = [0, 10, 20, 30, 40, 50, 60, 70, 80, 90]


class TestNoTilt:
    @pytest.mark.parametrize("bearing", [0, 90, -7.5, 180, 270, 359.9, 1234.5])
    def test_returns_location(self, bearing):
        location = GeoPoint(45.0, 123.0)
        assert orient(location, 0, bearing) == location

    def test_equator(self):
        assert orient(GeoPoint(0, 0), 0, 0) == GeoPoint(0, 0)
        assert orient(GeoPoint(0, 0), 0, 90) == GeoPoint(0, 0)
        assert orient(GeoPoint(0, 0), 0, 180) == GeoPoint(0, 0)


class TestSouthFacing:
    def test_elevation_is_latitude_minus_tilt(self):
        assert_point(orient(GeoPoint(0, 0), 10, 180), -10, 0)
        assert_point(orient(GeoPoint(53, 8), 40, 180), 13, 8)

    def test_vertical_at_equator(self):
        assert_point(orient(GeoPoint(0, 0), 90, 180), -90, 0)

    def test_over_south_pole(self):
        assert_point(orient(GeoPoint(-60, 10), 40, 180), -80, -170)
        assert_point(orient(GeoPoint(-60, -10), 45, 180), -75, 170)

    def test_odd_multiples_of_180(self):
        assert_point(orient(GeoPoint(53, 8), 40, 540), 13, 8)
        assert_point(orient(GeoPoint(53, 8), 40, -180), 13, 8)


class TestNorthFacing:
    def test_elevation_is_latitude_plus_tilt(self):
        assert_point(orient(GeoPoint(-60, 180), 40, 0), -20, 180)
        assert_point(orient(GeoPoint(0, 0), 90, 0), 90, 0)

    def test_over_north_pole(self):
        assert_point(orient(GeoPoint(66, -70), 40, 0), 74, 110)
        assert_point(orient(GeoPoint(53, 8), 90, 0), 37, -172)

    def test_even_multiples_of_180(self):
        assert_point(orient(GeoPoint(10, 20), 30, 360), 40, 20)
        assert_point(orient(GeoPoint(10, 20), 30, -360), 40, 20)


class TestGeneralBearing:
    def test_east(self):
        assert_point(orient(GeoPoint(0, 0), 90, 90), 0, 90)
        assert_point(orient(GeoPoint(53, 8), 90, 90), 0, 98)

    def test_east_onto_antimeridian(self):
        result = orient(GeoPoint(0, 90), 90, 90)
        assert result.latitude == pytest.approx(0, abs=1e-9)
        assert abs(result.longitude) == pytest.approx(180, abs=1e-9)

    def test_west(self):
        assert_point(orient(GeoPoint(0, 0), 90, 270), 0, -90)
        assert_point(orient(GeoPoint(0, 0), 90, -90), 0, -90)

    def test_near_meridian(self):
        assert_point(orient(GeoPoint(0, 0), 90, 1), 89, 90)
        assert_point(orient(GeoPoint(0, 0), 90, 179), -89, 90)
        assert_point(orient(GeoPoint(0, 0), 90, 170), -80, 90)

    @pytest.mark.parametrize("location", LOCATIONS)
    @pytest.mark.parametrize("tilt", [15, 45, 90])
    @pytest.mark.parametrize("bearing", [30, 135, 222, 300])
    def test_central_angle_equals_tilt(self, location, tilt, bearing):
        result = orient(location, tilt, bearing)
        shifted = GeoPoint(location.latitude + tilt, location.longitude)
        assert cos_angle_between(location, result) == pytest.approx(
            cos_angle_between(location, shifted), abs=1e-9
        )

    @pytest.mark.parametrize("bearing", [30, 135, 222, 300])
    def test_bearing_reduced_mod_360(self, bearing):
        location = GeoPoint(53, 8)
        expected = orient(location, 40, bearing)
        assert_point(
            orient(location, 40, bearing + 720), *_coords(expected), abs=1e-6
        )


def _coords(point):
    return point.latitude, point.longitude


class TestFastPathAgreesWithRotation:
    @pytest.mark.parametrize("location", LOCATIONS)
    @pytest.mark.parametrize("tilt", TILTS)
    @pytest.mark.parametrize("bearing", [0, 180])
    @pytest.mark.parametrize("delta", [-0.01, 0.01])
    def test_continuity(self, location, tilt, bearing, delta):
        special = orient(location, tilt, bearing)
        general = orient(location, tilt, bearing + delta)
        context = (special, general)
        assert general.latitude == pytest.approx(special.latitude, abs=0.3), context
        assert general.longitude == pytest.approx(special.longitude, abs=0.3), context


class TestOutOfRangeTilt:
    def test_full_turn_normalizes(self):
        with capture_logs() as logs:
            result = orient(GeoPoint(0, 0), 360, 360)
        assert_point(result, 0, 0)
        assert logs[0]["event"] == "Normalizing out-of-range position"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["latitude"] == 360

    def test_large_south_tilt(self):
        with capture_logs():
            result = orient(GeoPoint(10, 20), 300, 180)
        # 10 - 300 = -290, one full turn short of 70
        assert_point(result, 70, 20)

    @pytest.mark.parametrize(
        "location", LOCATIONS + [GeoPoint(90, 0), GeoPoint(-90, 0)]
    )
    @pytest.mark.parametrize("bearing", [0, 180])
    def test_valid_tilts_never_normalize(self, location, bearing):
        with capture_logs() as logs:
            for tilt in range(0, 91, 5):
                result = orient(location, tilt, bearing)
                assert -90 <= result.latitude <= 90
                assert -180 <= result.longitude <= 180
        assert logs == []
