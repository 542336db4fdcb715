"""
Read-only value records returned by the reporting service.
"""

from dataclasses import dataclass
from enum import Enum


class DayType(str, Enum):
    """Classification of a ridership record."""

    WEEKDAY = "W"
    SATURDAY = "A"
    SUNDAY_HOLIDAY = "U"


@dataclass(frozen=True)
class Station:
    id: int
    name: str


@dataclass(frozen=True)
class Stop:
    id: int
    name: str
    station_id: int
    direction: str
    ada: bool
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class StationRidership:
    station: Station
    total_riders: int
