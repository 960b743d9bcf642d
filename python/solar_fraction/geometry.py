"""Spherical geometry on the unit sphere.

All angles in degrees unless otherwise noted. Positive x passes through
(0, 0), positive y through (0, 90), positive z through the North Pole.
"""

import math

from ._types import GeoPoint, UnitVector

VECTOR_DIGITS = 15
GEO_DIGITS = 12


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def to_unit_vector(point: GeoPoint) -> UnitVector:
    """Convert latitude/longitude to a unit vector.

    Components are rounded to 15 decimals so that e.g. cos(90 deg) is exactly 0.
    """
    lat_rad = deg_to_rad(point.latitude)
    lon_rad = deg_to_rad(point.longitude)
    return UnitVector(
        x=round(math.cos(lat_rad) * math.cos(lon_rad), VECTOR_DIGITS),
        y=round(math.cos(lat_rad) * math.sin(lon_rad), VECTOR_DIGITS),
        z=round(math.sin(lat_rad), VECTOR_DIGITS),
    )


def to_geo(vector: UnitVector) -> GeoPoint:
    """Convert a unit vector to latitude/longitude rounded to 12 decimals."""
    # Clamp to [-1, 1] to handle floating point errors
    z = max(-1.0, min(1.0, vector.z))
    return GeoPoint(
        latitude=round(rad_to_deg(math.asin(z)), GEO_DIGITS),
        longitude=round(rad_to_deg(math.atan2(vector.y, vector.x)), GEO_DIGITS),
    )


def cos_angle_between(a: GeoPoint, b: GeoPoint) -> float:
    """Cosine of the central angle between two points.

    Equal to the dot product of their unit vectors. Non-negative means a sun
    in zenith over one point is above the horizon at the other.
    """
    lat_a = deg_to_rad(a.latitude)
    lat_b = deg_to_rad(b.latitude)
    dlon = deg_to_rad(a.longitude - b.longitude)
    return math.cos(lat_a) * math.cos(lat_b) * math.cos(dlon) + math.sin(
        lat_a
    ) * math.sin(lat_b)


def _cross(a: UnitVector, b: UnitVector) -> tuple[float, float, float]:
    return (
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def _dot(a: UnitVector, b: UnitVector) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def rotate(point: GeoPoint, axis: GeoPoint, angle: float) -> GeoPoint:
    """Rotate point around the axis through axis by angle degrees.

    Positive angles rotate counter-clockwise when looking from space down
    onto the surface where the axis emerges. Uses Rodrigues' rotation
    formula:

        v' = v cos(a) - (k x v) sin(a) + k (k . v) (1 - cos(a))
    """
    v = to_unit_vector(point)
    k = to_unit_vector(axis)
    theta = deg_to_rad(angle)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    kxv = _cross(k, v)
    scale = _dot(k, v) * (1.0 - cos_t)
    return to_geo(
        UnitVector(
            x=v.x * cos_t - kxv[0] * sin_t + k.x * scale,
            y=v.y * cos_t - kxv[1] * sin_t + k.y * scale,
            z=v.z * cos_t - kxv[2] * sin_t + k.z * scale,
        )
    )


def normalize_longitude(longitude: float) -> float:
    """Wrap longitude to [-180, 180]; wrapped values land in (-180, 180]."""
    if -180.0 <= longitude <= 180.0:
        return longitude
    wrapped = (longitude + 180.0) % 360.0 - 180.0
    return 180.0 if wrapped == -180.0 else wrapped


def normalize_position(latitude: float, longitude: float) -> GeoPoint:
    """Bring an arbitrary latitude/longitude back onto the globe.

    Latitude is reduced modulo 360 into [-180, 180); going past a pole
    reflects it back and moves longitude to the other side of the globe.
    """
    lat = (latitude + 180.0) % 360.0 - 180.0
    lon = longitude
    if lat > 90.0:
        lat = 180.0 - lat
        lon += 180.0 if lon < 0 else -180.0
    elif lat < -90.0:
        lat = -180.0 - lat
        lon += 180.0 if lon < 0 else -180.0
    return GeoPoint(latitude=lat, longitude=normalize_longitude(lon))


def antipode(point: GeoPoint) -> GeoPoint:
    """Return the point diametrically opposite on the globe."""
    lon = point.longitude + (180.0 if point.longitude <= 0 else -180.0)
    return GeoPoint(latitude=-point.latitude, longitude=lon)
