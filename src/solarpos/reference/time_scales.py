from __future__ import annotations

import math

from solarpos.core.types import (
    CivilDate,
    CivilDateTime,
    GreenwichDateTime,
    TimeZoneContext,
)
from .angles import hms_to_decimal_hours


# ============================================================
# Epochs
# ============================================================

JD_1900 = 2415020.0  # 1900 January 0.5 (Greenwich noon), base of the 1900 element series
GREGORIAN_CUTOVER_JD = 2299160  # last integral JD of the Julian calendar (1582 Oct 4/15 boundary)
DAYS_PER_JULIAN_CENTURY = 36525.0


def julian_centuries_since_1900(jd: float) -> float:
    """T = (JD - 2415020.0) / 36525"""
    return (jd - JD_1900) / DAYS_PER_JULIAN_CENTURY


# ============================================================
# Calendar rules
# ============================================================

def is_gregorian(day: float, month: int, year: int) -> bool:
    """True for civil dates on or after 1582 October 15."""
    if year != 1582:
        return year > 1582
    if month != 10:
        return month > 10
    return day >= 15


def is_leap_year(year: int) -> bool:
    """
    Gregorian rule (divisible by 4, except centuries not divisible by 400);
    plain divisible-by-4 rule for Julian-calendar years before 1583.
    """
    if year < 1583:
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def days_in_month(month: int, year: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


# ============================================================
# Civil date <-> Julian Date
# ============================================================

def civil_date_to_julian_date(day: float, month: int, year: int) -> float:
    """
    Civil (Greenwich) calendar date -> Julian Date.

    `day` may be fractional to carry the time of day. Dates from 1582 Oct 15
    onward are Gregorian, earlier dates Julian. Month and day are not validated.

      (y, m) = (year-1, month+12) if month < 3 else (year, month)
      B = 2 - A + floor(A/4), A = floor(y/100)    (Gregorian; B = 0 otherwise)
      C = trunc(365.25*y - 0.75) if y < 0 else floor(365.25*y)
      D = floor(30.6001*(m + 1))
      JD = B + C + D + day + 1720994.5
    """
    if month < 3:
        y = float(year) - 1.0
        m = float(month) + 12.0
    else:
        y = float(year)
        m = float(month)

    if is_gregorian(day, month, year):
        a = math.floor(y / 100.0)
        b = 2.0 - a + math.floor(a / 4.0)
    else:
        b = 0.0

    if y < 0:
        c = float(math.trunc(365.25 * y - 0.75))
    else:
        c = float(math.floor(365.25 * y))
    d = float(math.floor(30.6001 * (m + 1.0)))

    return b + c + d + day + 1720994.5


def julian_date_to_civil_date(jd: float) -> CivilDate:
    """
    Julian Date -> civil date with fractional day (inverse of civil_date_to_julian_date).
    """
    i = math.floor(jd + 0.5)
    f = jd + 0.5 - i

    if i > GREGORIAN_CUTOVER_JD:
        a = math.floor((i - 1867216.25) / 36524.25)
        b = i + 1 + a - math.floor(a / 4.0)
    else:
        b = i

    c = b + 1524
    d = math.floor((c - 122.1) / 365.25)
    e = math.floor(365.25 * d)
    g = math.floor((c - e) / 30.6001)

    day = c - e + f - math.floor(30.6001 * g)
    month = g - 1 if g < 13.5 else g - 13
    year = d - 4716 if month > 2.5 else d - 4715

    return CivilDate(day=float(day), month=int(month), year=int(year))


def julian_date_day(jd: float) -> float:
    return julian_date_to_civil_date(jd).day

def julian_date_month(jd: float) -> int:
    return julian_date_to_civil_date(jd).month

def julian_date_year(jd: float) -> int:
    return julian_date_to_civil_date(jd).year


# ============================================================
# Local civil time <-> Greenwich date / Universal Time
# ============================================================

def _local_to_greenwich_jd(
    lct_hours: float,
    lct_minutes: float,
    lct_seconds: float,
    daylight_saving: int,
    zone_correction: int,
    local_day: float,
    local_month: int,
    local_year: int,
) -> float:
    """
    JD of the Greenwich instant. Hours outside [0,24) after removing the zone and
    daylight-saving offsets roll the day (and month/year) through the JD round trip.
    """
    lct = hms_to_decimal_hours(lct_hours, lct_minutes, lct_seconds)
    ut = lct - daylight_saving - zone_correction
    return civil_date_to_julian_date(local_day + ut / 24.0, local_month, local_year)


def local_civil_time_to_universal_time(
    lct_hours: float,
    lct_minutes: float,
    lct_seconds: float,
    daylight_saving: int,
    zone_correction: int,
    local_day: float,
    local_month: int,
    local_year: int,
) -> float:
    """Local civil time -> Universal Time (decimal hours, [0,24))."""
    jd = _local_to_greenwich_jd(lct_hours, lct_minutes, lct_seconds, daylight_saving,
                                zone_correction, local_day, local_month, local_year)
    e = julian_date_day(jd)
    return 24.0 * (e - math.floor(e))


def local_civil_time_greenwich_day(
    lct_hours: float,
    lct_minutes: float,
    lct_seconds: float,
    daylight_saving: int,
    zone_correction: int,
    local_day: float,
    local_month: int,
    local_year: int,
) -> int:
    jd = _local_to_greenwich_jd(lct_hours, lct_minutes, lct_seconds, daylight_saving,
                                zone_correction, local_day, local_month, local_year)
    return int(math.floor(julian_date_day(jd)))


def local_civil_time_greenwich_month(
    lct_hours: float,
    lct_minutes: float,
    lct_seconds: float,
    daylight_saving: int,
    zone_correction: int,
    local_day: float,
    local_month: int,
    local_year: int,
) -> int:
    jd = _local_to_greenwich_jd(lct_hours, lct_minutes, lct_seconds, daylight_saving,
                                zone_correction, local_day, local_month, local_year)
    return julian_date_month(jd)


def local_civil_time_greenwich_year(
    lct_hours: float,
    lct_minutes: float,
    lct_seconds: float,
    daylight_saving: int,
    zone_correction: int,
    local_day: float,
    local_month: int,
    local_year: int,
) -> int:
    jd = _local_to_greenwich_jd(lct_hours, lct_minutes, lct_seconds, daylight_saving,
                                zone_correction, local_day, local_month, local_year)
    return julian_date_year(jd)


def local_civil_time_to_greenwich(civil: CivilDateTime, tz: TimeZoneContext) -> GreenwichDateTime:
    """
    Value-typed form of the four converters above; one JD round trip serves all of them.
    """
    jd = _local_to_greenwich_jd(civil.hour, civil.minute, civil.second, tz.daylight_saving_hours,
                                tz.zone_correction_hours, civil.day, civil.month, civil.year)
    g = julian_date_to_civil_date(jd)
    day = math.floor(g.day)
    return GreenwichDateTime(
        day=int(day),
        month=g.month,
        year=g.year,
        ut_hours=24.0 * (g.day - day),
    )


def greenwich_julian_date(g: GreenwichDateTime) -> float:
    """JD of a Greenwich date plus its Universal Time."""
    return civil_date_to_julian_date(g.day, g.month, g.year) + g.ut_hours / 24.0


def universal_time_to_local_civil_time(
    ut_hours: float,
    ut_minutes: float,
    ut_seconds: float,
    daylight_saving: int,
    zone_correction: int,
    greenwich_day: float,
    greenwich_month: int,
    greenwich_year: int,
) -> CivilDateTime:
    """
    Universal Time on a Greenwich date -> local civil date and time
    (the inverse of local_civil_time_to_greenwich).
    """
    ut = hms_to_decimal_hours(ut_hours, ut_minutes, ut_seconds)
    lct = ut + zone_correction + daylight_saving
    jd = civil_date_to_julian_date(greenwich_day, greenwich_month, greenwich_year) + lct / 24.0
    c = julian_date_to_civil_date(jd)
    day = math.floor(c.day)
    return CivilDateTime(day=float(day), month=c.month, year=c.year, hour=24.0 * (c.day - day))
