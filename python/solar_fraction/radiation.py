"""Fraction of maximum solar radiation reaching an oriented panel."""

from datetime import datetime as DateTime

from ._types import GeoPoint, SeasonalTable
from .geometry import cos_angle_between
from .orientation import orient
from .sun import is_visible, sun_location


def solar_radiation_fraction(
    location: GeoPoint,
    dt: DateTime,
    tilt: float,
    bearing: float,
    table: SeasonalTable | None = None,
) -> float:
    """Calculate the fraction of maximum radiation a panel receives.

    Args:
        location: Panel position
        dt: Timezone-aware datetime
        tilt: Degrees from horizontal (0 = flat, 90 = vertical)
        bearing: Direction the panel faces (0 = north, 90 = east, ...)

    Returns:
        Cosine of the incidence angle, 0.0 when the sun is below the horizon
        or behind the panel.
    """
    sun = sun_location(dt, table)
    if not is_visible(location, sun):
        return 0.0
    cos_incidence = cos_angle_between(sun, orient(location, tilt, bearing))
    return max(cos_incidence, 0.0)
