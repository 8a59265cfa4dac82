from __future__ import annotations

import logging
from typing import Literal

from .core.types import (
    EPOCH_2010,
    CivilDateTime,
    EclipticCoordinate,
    EquatorialCoordinate,
    SolarEpoch,
    SunPosition,
    TimeZoneContext,
)
from .reference import coords
from .reference import solar
from .reference import time_scales as ts
from .reference.angles import decimal_degrees_to_dms, decimal_hours_to_hms

logger = logging.getLogger(__name__)

Method = Literal["approximate", "precise"]

# Seconds of RA and declination are reported to 0.01
OUTPUT_PLACES = 2


def _approximate(civil: CivilDateTime, tz: TimeZoneContext, epoch: SolarEpoch) -> EquatorialCoordinate:
    g = ts.local_civil_time_to_greenwich(civil, tz)
    jd = ts.greenwich_julian_date(g)
    sl = solar.approximate_solar_longitude(jd, epoch)
    logger.debug(
        "approximate: greenwich=%s jd=%.6f D=%.6f N=%.6f M=%.6f Ec=%.6f L=%.6f",
        g, jd, sl.days_since_epoch, sl.mean_anomaly_step_deg, sl.mean_anomaly_deg,
        sl.equation_of_center_deg, sl.true_longitude_deg,
    )
    ec = EclipticCoordinate(longitude_deg=sl.true_longitude_deg, latitude_deg=0.0, julian_date=jd)
    return coords.ecliptic_to_equatorial(ec, g.date)


def _precise(civil: CivilDateTime, tz: TimeZoneContext) -> EquatorialCoordinate:
    g = ts.local_civil_time_to_greenwich(civil, tz)
    lam = solar.precise_ecliptic_longitude(
        civil.hour, civil.minute, civil.second,
        tz.daylight_saving_hours, tz.zone_correction_hours,
        civil.day, civil.month, civil.year,
    )
    logger.debug("precise: greenwich=%s L=%.6f", g, lam)
    ec = EclipticCoordinate(longitude_deg=lam, latitude_deg=0.0, julian_date=ts.greenwich_julian_date(g))
    return coords.ecliptic_to_equatorial(ec, g.date)


def sun_position(
    civil: CivilDateTime,
    tz: TimeZoneContext = TimeZoneContext(),
    *,
    method: Method = "approximate",
    epoch: SolarEpoch = EPOCH_2010,
) -> EquatorialCoordinate:
    """
    Unrounded equatorial position of the Sun for a local civil date and time.
    `epoch` applies to the approximate model only.
    """
    if method == "approximate":
        return _approximate(civil, tz, epoch)
    if method == "precise":
        return _precise(civil, tz)
    raise ValueError("method must be one of: approximate, precise")


def to_sun_position(eq: EquatorialCoordinate, *, places: int = OUTPUT_PLACES) -> SunPosition:
    """Split an equatorial position into RA (h, m, s) and declination (d, m, s)."""
    ra = decimal_hours_to_hms(eq.right_ascension_hours, places)
    dec = decimal_degrees_to_dms(eq.declination_deg, places)
    return SunPosition(ra.unit, ra.minute, ra.second, dec.unit, dec.minute, dec.second)


def approximate_position_of_sun(
    lct_hours: float,
    lct_minutes: float,
    lct_seconds: float,
    local_day: float,
    local_month: int,
    local_year: int,
    is_daylight_saving: bool,
    zone_correction: int,
) -> SunPosition:
    """
    Approximate position of the Sun for a local date and time.

    Returns (ra_hour, ra_min, ra_sec, dec_deg, dec_min, dec_sec); the sign of the
    declination is carried on dec_deg.
    """
    civil = CivilDateTime(local_day, local_month, local_year, lct_hours, lct_minutes, lct_seconds)
    tz = TimeZoneContext(zone_correction, is_daylight_saving)
    return to_sun_position(_approximate(civil, tz, EPOCH_2010))


def precise_position_of_sun(
    lct_hours: float,
    lct_minutes: float,
    lct_seconds: float,
    local_day: float,
    local_month: int,
    local_year: int,
    is_daylight_saving: bool,
    zone_correction: int,
) -> SunPosition:
    """Precise position of the Sun for a local date and time (same layout as the approximate one)."""
    civil = CivilDateTime(local_day, local_month, local_year, lct_hours, lct_minutes, lct_seconds)
    tz = TimeZoneContext(zone_correction, is_daylight_saving)
    return to_sun_position(_precise(civil, tz))
