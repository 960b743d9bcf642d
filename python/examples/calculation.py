"""Demonstrate radiation fractions for a south-facing roof in Bremen in June."""

from datetime import datetime, timedelta, timezone

import structlog

from solar_fraction._types import GeoPoint
from solar_fraction.orientation import orient
from solar_fraction.radiation import solar_radiation_fraction
from solar_fraction.seasons import default_table, solar_year_phase, validity_window
from solar_fraction.sun import is_visible_at, sun_location

structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ]
)


def main():
    location = GeoPoint(latitude=53.1, longitude=8.8)
    tilt = 35.0
    bearing = 180.0
    cest = timezone(timedelta(hours=2))

    table = default_table()
    first, last = validity_window(table)
    dt = datetime(2026, 6, 21, 13, 30, tzinfo=cest)

    sun = sun_location(dt, table)
    panel = orient(location, tilt, bearing)

    print("=== Solar Radiation Fraction Example ===")
    print(f"Seasonal table: {table.version} ({first:%Y-%m-%d} to {last:%Y-%m-%d})")
    print(f"Location: Bremen ({location.latitude:.1f}°N, {location.longitude:.1f}°E)")
    print(f"Panel: tilt {tilt:.0f}°, bearing {bearing:.0f}° (0°=N, 90°=E, 180°=S)")
    print(f"Date/Time: {dt}")
    print()
    print("--- Sun ---")
    print(f"Solar year phase: {solar_year_phase(dt, table):.4f}")
    print(f"Subsolar point: {sun.latitude:.2f}°, {sun.longitude:.2f}°")
    print(f"Visible: {is_visible_at(location, dt, table)}")
    print()
    print("--- Panel ---")
    print(f"Flat-equivalent point: {panel.latitude:.2f}°, {panel.longitude:.2f}°")
    fraction = solar_radiation_fraction(location, dt, tilt, bearing, table)
    print(f"Radiation fraction: {fraction:.3f}")
    print()
    print("--- Hourly (UTC) ---")
    day = datetime(2026, 6, 21, tzinfo=timezone.utc)
    for hour in range(24):
        at = day + timedelta(hours=hour)
        fraction = solar_radiation_fraction(location, at, tilt, bearing, table)
        print(f"{at:%H:%M}  {fraction:.3f}  {'#' * round(fraction * 40)}")


if __name__ == "__main__":
    main()
