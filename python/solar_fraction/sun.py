"""Subsolar point model and sun visibility."""

import math
from datetime import datetime as DateTime

from ._types import GeoPoint, SeasonalTable
from .geometry import cos_angle_between
from .seasons import solar_year_phase, to_utc

EARTH_AXIAL_TILT = 23.45
DEGREES_PER_HOUR = 15.0


def sun_latitude(dt: DateTime, table: SeasonalTable | None = None) -> float:
    """Calculate the latitude where the sun is in zenith.

    Sinusoidal approximation: 0 at the equinoxes, +23.45 deg at the June
    solstice and -23.45 deg at the December solstice.
    """
    return EARTH_AXIAL_TILT * math.sin(2 * math.pi * solar_year_phase(dt, table))


def sun_longitude(dt: DateTime) -> float:
    """Calculate the longitude where the sun is in zenith.

    At 12:00 UTC the sun is over the prime meridian; each hour later moves
    it 15 degrees west.
    """
    utc = to_utc(dt)
    hours = utc.hour - 12 + utc.minute / 60.0 + utc.second / 3600.0
    return hours * -DEGREES_PER_HOUR


def sun_location(dt: DateTime, table: SeasonalTable | None = None) -> GeoPoint:
    """Subsolar point for a timezone-aware datetime."""
    return GeoPoint(latitude=sun_latitude(dt, table), longitude=sun_longitude(dt))


def is_visible(observer: GeoPoint, sun: GeoPoint) -> bool:
    """Returns True if a sun in zenith over sun is at or above observer's horizon."""
    return cos_angle_between(sun, observer) >= 0


def is_visible_at(
    location: GeoPoint, dt: DateTime, table: SeasonalTable | None = None
) -> bool:
    """Returns True if the sun is above the horizon at location at dt."""
    return is_visible(location, sun_location(dt, table))
