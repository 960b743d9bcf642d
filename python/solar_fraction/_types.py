"""Frozen dataclasses for all structured values and the package error type."""

from dataclasses import dataclass
from datetime import datetime as DateTime
from enum import StrEnum


class OutOfRangeError(ValueError):
    """Raised when a value falls outside the range covered by a sorted table."""


class SeasonMarker(StrEnum):
    MARCH_EQUINOX = "march_equinox"
    JUNE_SOLSTICE = "june_solstice"
    SEPTEMBER_EQUINOX = "september_equinox"
    DECEMBER_SOLSTICE = "december_solstice"


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class UnitVector:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class SeasonalBracket:
    start: DateTime
    end: DateTime
    phase: float


@dataclass(frozen=True)
class SeasonalTable:
    march_equinoxes: tuple[DateTime, ...]
    june_solstices: tuple[DateTime, ...]
    september_equinoxes: tuple[DateTime, ...]
    december_solstices: tuple[DateTime, ...]
    version: str = "unversioned"
    source: str = ""
