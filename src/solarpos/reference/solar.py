# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from solarpos.core.types import EPOCH_2010, SolarEpoch
from . import astro_args as aa
from . import time_scales as ts
from .angles import wrap_deg, wrap_rad


TROPICAL_YEAR_DAYS = 365.242191


@dataclass(frozen=True)
class ApproximateSolarLongitude:
    """Intermediate values of the approximate model (degrees; days)."""
    days_since_epoch: float
    mean_anomaly_step_deg: float  # N
    mean_anomaly_deg: float       # M
    equation_of_center_deg: float # Ec
    true_longitude_deg: float     # lambda


def approximate_solar_longitude(jd: float, epoch: SolarEpoch = EPOCH_2010) -> ApproximateSolarLongitude:
    """
    First-order model from orbital elements fixed at `epoch`:
      D  = JD - JD(epoch)
      N  = 360 D / 365.242191
      M  = wrap(N + eg - wg)
      Ec = 360 e sin(M) / pi
      L  = wrap(N + Ec + eg)
    """
    el = aa.solar_elements(epoch)

    d_days = jd - el.epoch_jd
    n_deg = 360.0 * d_days / TROPICAL_YEAR_DAYS
    m_deg = wrap_deg(n_deg + el.mean_longitude_deg - el.perigee_longitude_deg)
    ec_deg = 360.0 * el.eccentricity * math.sin(math.radians(m_deg)) / math.pi
    l_deg = wrap_deg(n_deg + ec_deg + el.mean_longitude_deg)

    return ApproximateSolarLongitude(
        days_since_epoch=d_days,
        mean_anomaly_step_deg=n_deg,
        mean_anomaly_deg=m_deg,
        equation_of_center_deg=ec_deg,
        true_longitude_deg=l_deg,
    )


def approximate_ecliptic_longitude(jd: float, epoch: SolarEpoch = EPOCH_2010) -> float:
    """Ecliptic longitude of the Sun (degrees, [0,360)) from the approximate model."""
    return approximate_solar_longitude(jd, epoch).true_longitude_deg


def approximate_mean_anomaly(jd: float, epoch: SolarEpoch = EPOCH_2010) -> float:
    """Mean anomaly of the Sun (degrees, [0,360)) from the approximate model."""
    return approximate_solar_longitude(jd, epoch).mean_anomaly_deg


def precise_ecliptic_longitude(
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
    Ecliptic longitude of the Sun (degrees, [0,360)) from the 1900-based series:
    Kepler solve for the true anomaly, perturbations by Venus, Jupiter and the
    Moon, and a long-period term. No nutation or aberration is applied.

    27 July 1988, 0h UT -> RA 8h 26m 03.83s, Dec +19 12' 49.72"
    """
    gd = ts.local_civil_time_greenwich_day(lct_hours, lct_minutes, lct_seconds, daylight_saving,
                                           zone_correction, local_day, local_month, local_year)
    gm = ts.local_civil_time_greenwich_month(lct_hours, lct_minutes, lct_seconds, daylight_saving,
                                             zone_correction, local_day, local_month, local_year)
    gy = ts.local_civil_time_greenwich_year(lct_hours, lct_minutes, lct_seconds, daylight_saving,
                                            zone_correction, local_day, local_month, local_year)
    ut = ts.local_civil_time_to_universal_time(lct_hours, lct_minutes, lct_seconds, daylight_saving,
                                               zone_correction, local_day, local_month, local_year)

    # 876600 = 24 * 36525 hours per Julian century
    T = aa.T_1900(gd, gm, gy) + ut / 876600.0
    T2 = T * T

    l_deg = 279.69668 + 0.0003025 * T2 + aa.revolutions_deg(100.0021359, T)
    m1_deg = 358.47583 - (0.00015 + 0.0000033 * T) * T2 + aa.revolutions_deg(99.99736042, T)
    ec = aa.eccentricity_at(T)
    nu = aa.true_anomaly(math.radians(m1_deg), ec)

    a1 = math.radians(153.23 + aa.revolutions_deg(62.55209472, T))   # Venus
    b1 = math.radians(216.57 + aa.revolutions_deg(125.1041894, T))   # Venus
    c1 = math.radians(312.69 + aa.revolutions_deg(91.56766028, T))   # Jupiter
    d1 = math.radians(350.74 - 0.00144 * T2 + aa.revolutions_deg(1236.853095, T))  # Moon
    e1 = math.radians(231.19 + 20.2 * T)                             # long period
    perturbation_deg = (
        0.00134 * math.cos(a1)
        + 0.00154 * math.cos(b1)
        + 0.002 * math.cos(c1)
        + 0.00179 * math.sin(d1)
        + 0.00178 * math.sin(e1)
    )

    sr = wrap_rad(nu + math.radians(l_deg - m1_deg + perturbation_deg))
    return wrap_deg(math.degrees(sr))
