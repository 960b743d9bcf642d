"""Equinox/solstice reference table and solar-year interpolation.

The table is a versioned JSON dataset of UTC instants for the four seasonal
markers. A query instant is bracketed by the two surrounding markers and
linearly interpolated into a fraction of the solar year, which starts at the
March equinox.
"""

import bisect
import functools
import json
import os
from datetime import datetime as DateTime, timedelta, timezone
from pathlib import Path
from typing import Sequence

import structlog

from ._types import OutOfRangeError, SeasonalBracket, SeasonalTable, SeasonMarker

logger = structlog.get_logger()

DEFAULT_TABLE_PATH = Path(__file__).parent / "data" / "seasons.json"
TABLE_PATH_ENV = "SOLAR_FRACTION_SEASONS_FILE"
MARKERS_PER_YEAR = len(SeasonMarker)


def to_utc(dt: DateTime) -> DateTime:
    """Normalize a timezone-aware datetime to UTC."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError("dt must be timezone-aware")
    return dt.astimezone(timezone.utc)


def _parse_instants(marker: SeasonMarker, values: list) -> tuple[DateTime, ...]:
    instants = []
    for value in values:
        dt = DateTime.fromisoformat(value)
        if dt.tzinfo is None:
            raise ValueError(f"{marker}: timestamp {value!r} has no UTC offset")
        instants.append(dt.astimezone(timezone.utc))
    return tuple(instants)


def load_seasonal_table(path: str | Path) -> SeasonalTable:
    """Load and validate a seasonal marker dataset from a JSON file.

    The file holds ``version``, ``source`` and one list of ISO-8601
    timestamps per SeasonMarker value. All lists must have the same
    non-zero length and interleave into a strictly increasing sequence.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    missing = [m.value for m in SeasonMarker if m.value not in raw]
    if missing:
        raise ValueError(f"Seasonal table {path} is missing markers: {missing}")

    columns = {m: _parse_instants(m, raw[m.value]) for m in SeasonMarker}
    lengths = {len(c) for c in columns.values()}
    if len(lengths) != 1 or 0 in lengths:
        raise ValueError(
            f"Seasonal table {path} needs equally long, non-empty marker lists"
        )

    table = SeasonalTable(
        march_equinoxes=columns[SeasonMarker.MARCH_EQUINOX],
        june_solstices=columns[SeasonMarker.JUNE_SOLSTICE],
        september_equinoxes=columns[SeasonMarker.SEPTEMBER_EQUINOX],
        december_solstices=columns[SeasonMarker.DECEMBER_SOLSTICE],
        version=str(raw.get("version", "unversioned")),
        source=str(raw.get("source", "")),
    )
    combined = combined_markers(table)
    if any(a >= b for a, b in zip(combined, combined[1:])):
        raise ValueError(f"Seasonal table {path} is not in chronological order")

    logger.debug(
        "Seasonal table loaded",
        path=str(path),
        version=table.version,
        years=len(table.march_equinoxes),
    )
    return table


@functools.lru_cache(maxsize=1)
def default_table() -> SeasonalTable:
    """Return the process-wide table, honouring SOLAR_FRACTION_SEASONS_FILE."""
    return load_seasonal_table(os.environ.get(TABLE_PATH_ENV, DEFAULT_TABLE_PATH))


def combined_markers(table: SeasonalTable) -> list[DateTime]:
    """Interleave the four marker columns into one chronological list.

    Order is March, June, September, December, repeating, so the index of
    each entry modulo 4 identifies its marker.
    """
    columns = zip(
        table.march_equinoxes,
        table.june_solstices,
        table.september_equinoxes,
        table.december_solstices,
    )
    return [instant for year in columns for instant in year]


def validity_window(table: SeasonalTable) -> tuple[DateTime, DateTime]:
    """Return the closed-open range [first March equinox, last December solstice)."""
    return table.march_equinoxes[0], table.december_solstices[-1]


def surrounding_elements(sequence: Sequence, value, modulo: int | None = None) -> tuple:
    """Find the two elements of a sorted sequence that surround value.

    Returns (before, after, phase): before is the greatest element <= value,
    after is the element following it. With a modulo, phase is
    (index of before % modulo) / modulo, otherwise None.

    Raises OutOfRangeError if the sequence is empty or value lies outside
    [sequence[0], sequence[-1]).
    """
    if not sequence:
        raise OutOfRangeError("cannot bracket a value in an empty sequence")
    if value < sequence[0] or value >= sequence[-1]:
        raise OutOfRangeError(
            f"{value!r} is outside [{sequence[0]!r}, {sequence[-1]!r})"
        )

    index = bisect.bisect_right(sequence, value) - 1
    phase = (index % modulo) / modulo if modulo else None
    return sequence[index], sequence[index + 1], phase


def find_surrounding_seasonal_dates(
    dt: DateTime, table: SeasonalTable | None = None
) -> SeasonalBracket:
    """Find the equinox/solstice markers that bracket dt.

    dt may be in any time zone. The returned phase is 0.0, 0.25, 0.5 or 0.75
    for a bracket starting at a March equinox, June solstice, September
    equinox or December solstice respectively.
    """
    table = table or default_table()
    utc = to_utc(dt)
    first, last = validity_window(table)
    if utc < first or utc >= last:
        raise OutOfRangeError(
            f"{utc.isoformat()} is outside the seasonal table "
            f"[{first.isoformat()}, {last.isoformat()})"
        )
    start, end, phase = surrounding_elements(
        combined_markers(table), utc, MARKERS_PER_YEAR
    )
    return SeasonalBracket(start=start, end=end, phase=phase)


def solar_year_phase(dt: DateTime, table: SeasonalTable | None = None) -> float:
    """Calculate how far into the solar year dt is.

    Output: fraction in [0, 1); 0 at the March equinox, 0.25 at the June
    solstice, 0.5 at the September equinox, 0.75 at the December solstice.
    Linear between markers, good to about 30 minutes.
    """
    bracket = find_surrounding_seasonal_dates(dt, table)
    elapsed = to_utc(dt) - bracket.start
    return bracket.phase + elapsed / (bracket.end - bracket.start) / MARKERS_PER_YEAR


def average_repetition_period(instants: Sequence[DateTime]) -> timedelta:
    """Mean interval between consecutive instants."""
    if len(instants) < 2:
        raise ValueError("need at least two instants to measure a period")
    return (instants[-1] - instants[0]) / (len(instants) - 1)
