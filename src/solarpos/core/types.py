from __future__ import annotations
import math
from dataclasses import dataclass
from typing import NamedTuple, Optional

@dataclass(frozen=True)
class CivilDate:
    """Calendar date; `day` may be fractional (time of day as a day fraction)."""
    day: float
    month: int
    year: int

@dataclass(frozen=True)
class CivilDateTime:
    day: float
    month: int
    year: int
    hour: float = 0.0
    minute: float = 0.0
    second: float = 0.0

    @property
    def date(self) -> CivilDate:
        return CivilDate(self.day, self.month, self.year)

@dataclass(frozen=True)
class TimeZoneContext:
    zone_correction_hours: int = 0
    daylight_saving: bool = False

    @property
    def daylight_saving_hours(self) -> int:
        return 1 if self.daylight_saving else 0

@dataclass(frozen=True)
class GreenwichDateTime:
    """Greenwich calendar date (integral day) plus Universal Time in decimal hours."""
    day: int
    month: int
    year: int
    ut_hours: float

    @property
    def date(self) -> CivilDate:
        return CivilDate(self.day, self.month, self.year)

@dataclass(frozen=True)
class SolarEpoch:
    """Greenwich civil date anchoring the orbital elements of the approximate model."""
    day: float
    month: int
    year: int

EPOCH_2010 = SolarEpoch(0, 1, 2010)

@dataclass(frozen=True)
class EclipticCoordinate:
    longitude_deg: float
    latitude_deg: float = 0.0
    julian_date: Optional[float] = None

@dataclass(frozen=True)
class EquatorialCoordinate:
    right_ascension_hours: float
    declination_deg: float

    @property
    def right_ascension_deg(self) -> float:
        return self.right_ascension_hours * 15.0

@dataclass(frozen=True)
class SexagesimalTriple:
    """
    (unit, minute, second) decomposition of a decimal hours/degrees value.

    The sign lives on `unit` only. `unit` is a float holding an integral value so
    that a negative value smaller than one unit keeps its sign as -0.0.
    """
    unit: float
    minute: int
    second: float

    @property
    def is_negative(self) -> bool:
        return math.copysign(1.0, self.unit) < 0

    def to_decimal(self) -> float:
        mag = abs(self.unit) + (self.minute + self.second / 60.0) / 60.0
        return -mag if self.is_negative else mag


class SunPosition(NamedTuple):
    """Right ascension (h, m, s) and declination (d, m, s); unpacks as a six-tuple."""
    ra_hour: float
    ra_min: int
    ra_sec: float
    dec_deg: float
    dec_min: int
    dec_sec: float

    @property
    def right_ascension(self) -> SexagesimalTriple:
        return SexagesimalTriple(self.ra_hour, self.ra_min, self.ra_sec)

    @property
    def declination(self) -> SexagesimalTriple:
        return SexagesimalTriple(self.dec_deg, self.dec_min, self.dec_sec)

    @property
    def right_ascension_hours(self) -> float:
        return self.right_ascension.to_decimal()

    @property
    def declination_deg(self) -> float:
        return self.declination.to_decimal()
