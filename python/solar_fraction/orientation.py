"""Map a tilted, rotated panel to the point where a flat panel faces the same way.

Tilt is in degrees from horizontal (0 = flat, 90 = vertical). Bearing is the
compass direction the panel faces (0 = north, 90 = east, 180 = south).
"""

import structlog

from ._types import GeoPoint
from .geometry import normalize_position, rotate

logger = structlog.get_logger()


def _pole_reflect(latitude: float, longitude: float) -> tuple[float, float]:
    """Fold a latitude that went over a pole back onto the far side of the globe."""
    flipped = longitude + (180.0 if longitude < 0 else -180.0)
    if 90.0 < latitude <= 270.0:
        return 180.0 - latitude, flipped
    if -270.0 <= latitude < -90.0:
        return -180.0 - latitude, flipped
    return latitude, longitude


def _orient_meridian(location: GeoPoint, tilt: float, bearing: float) -> GeoPoint:
    """Closed form for panels facing due north or due south."""
    direction = 1.0 if (bearing // 180) % 2 == 0 else -1.0
    lat, lon = _pole_reflect(location.latitude + tilt * direction, location.longitude)
    if -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0:
        return GeoPoint(latitude=lat, longitude=lon)

    # Only reachable for tilts outside [0, 180]
    logger.warning(
        "Normalizing out-of-range position",
        latitude=lat,
        longitude=lon,
        tilt=tilt,
        bearing=bearing,
    )
    return normalize_position(lat, lon)


def orient(location: GeoPoint, tilt: float, bearing: float) -> GeoPoint:
    """Calculate the flat-panel equivalent of a tilted panel at location.

    Tilting toward north is a pure latitude shift to lat + tilt. Any other
    bearing is that shifted point rotated about location by bearing degrees.

    Returns the point on earth whose surface normal points the same way as
    the panel's normal.
    """
    if tilt == 0:
        return location
    if bearing % 180 == 0:
        return _orient_meridian(location, tilt, bearing)
    elevation = GeoPoint(
        latitude=location.latitude + tilt, longitude=location.longitude
    )
    return rotate(elevation, location, bearing)
