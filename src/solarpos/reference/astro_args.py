from __future__ import annotations

import math
from dataclasses import dataclass

from solarpos.core.types import SolarEpoch
from .angles import frac01, wrap_deg, wrap_rad
from .time_scales import civil_date_to_julian_date, julian_centuries_since_1900


# ------------------------------------------------------------
# Time variable
# ------------------------------------------------------------

def T_1900(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> float:
    """Julian centuries from 1900 January 0.5 for a Greenwich civil date."""
    return julian_centuries_since_1900(
        civil_date_to_julian_date(greenwich_day, greenwich_month, greenwich_year)
    )


def revolutions_deg(rate: float, T: float) -> float:
    """
    Fractional part of `rate * T` revolutions, in degrees.
    The whole turns are dropped before scaling so large rates keep precision.
    """
    return 360.0 * frac01(rate * T)


# ------------------------------------------------------------
# Sun orbital elements (1900-based polynomials)
# ------------------------------------------------------------

def sun_mean_ecliptic_longitude(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> float:
    """
    Mean ecliptic longitude of the Sun at the epoch (degrees, [0,360)):
      eg = 279.6966778 + 36000.76892 T + 0.0003025 T^2
    """
    T = T_1900(greenwich_day, greenwich_month, greenwich_year)
    return wrap_deg(279.6966778 + 36000.76892 * T + 0.0003025 * T * T)


def sun_perigee_longitude(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> float:
    """
    Longitude of the Sun at perigee (degrees, [0,360)):
      wg = 281.2208444 + 1.719175 T + 0.000452778 T^2
    """
    T = T_1900(greenwich_day, greenwich_month, greenwich_year)
    return wrap_deg(281.2208444 + 1.719175 * T + 0.000452778 * T * T)


def sun_eccentricity(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> float:
    """
    Eccentricity of the Sun-Earth orbit:
      e = 0.01675104 - 0.0000418 T - 0.000000126 T^2
    """
    T = T_1900(greenwich_day, greenwich_month, greenwich_year)
    return eccentricity_at(T)


def eccentricity_at(T: float) -> float:
    return 0.01675104 - 0.0000418 * T - 0.000000126 * T * T


@dataclass(frozen=True)
class SolarElements:
    """Orbital elements of the Sun at an epoch (degrees; eccentricity dimensionless)."""
    mean_longitude_deg: float
    perigee_longitude_deg: float
    eccentricity: float
    epoch_jd: float


def solar_elements(epoch: SolarEpoch) -> SolarElements:
    """Elements at `epoch`; recomputed on each call."""
    d, m, y = epoch.day, epoch.month, epoch.year
    return SolarElements(
        mean_longitude_deg=sun_mean_ecliptic_longitude(d, m, y),
        perigee_longitude_deg=sun_perigee_longitude(d, m, y),
        eccentricity=sun_eccentricity(d, m, y),
        epoch_jd=civil_date_to_julian_date(d, m, y),
    )


# ------------------------------------------------------------
# Kepler's equation
# ------------------------------------------------------------

KEPLER_TOLERANCE_RAD = 1e-6
KEPLER_MAX_ITER = 50

def eccentric_anomaly(mean_anomaly_rad: float, eccentricity: float) -> float:
    """
    Solve E - e sin E = M by Newton iteration (radians).
    Converges in a handful of steps for the Earth's orbit.
    """
    m = wrap_rad(mean_anomaly_rad)
    ea = m
    for _ in range(KEPLER_MAX_ITER):
        d = ea - eccentricity * math.sin(ea) - m
        if abs(d) < KEPLER_TOLERANCE_RAD:
            break
        ea -= d / (1.0 - eccentricity * math.cos(ea))
    return ea


def true_anomaly(mean_anomaly_rad: float, eccentricity: float) -> float:
    """True anomaly (radians) from mean anomaly via the eccentric anomaly."""
    ea = eccentric_anomaly(mean_anomaly_rad, eccentricity)
    a = math.sqrt((1.0 + eccentricity) / (1.0 - eccentricity)) * math.tan(ea / 2.0)
    return 2.0 * math.atan(a)


# ------------------------------------------------------------
# Nutation (short 1900-based series)
# ------------------------------------------------------------

@dataclass(frozen=True)
class NutationArgs:
    """Arguments of the nutation series (radians) and T."""
    T: float
    l2: float  # 2 * mean longitude of the Sun
    d2: float  # 2 * mean longitude of the Moon
    m1: float  # mean anomaly of the Sun
    m2: float  # mean anomaly of the Moon
    n1: float  # longitude of the Moon's ascending node
    n2: float  # 2 * n1


def nutation_args(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> NutationArgs:
    T = T_1900(greenwich_day, greenwich_month, greenwich_year)
    T2 = T * T

    l1 = 279.6967 + 0.000303 * T2 + revolutions_deg(100.0021358, T)
    d1 = 270.4342 - 0.001133 * T2 + revolutions_deg(1336.855231, T)
    m1 = 358.4758 - 0.00015 * T2 + revolutions_deg(99.99736056, T)
    m2 = 296.1046 + 0.009192 * T2 + revolutions_deg(1325.552359, T)
    n1 = 259.1833 + 0.002078 * T2 - revolutions_deg(5.372616667, T)

    n1_rad = math.radians(n1)
    return NutationArgs(
        T=T,
        l2=2.0 * math.radians(l1),
        d2=2.0 * math.radians(d1),
        m1=math.radians(m1),
        m2=math.radians(m2),
        n1=n1_rad,
        n2=2.0 * n1_rad,
    )


def nutation_in_longitude(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> float:
    """Nutation in ecliptic longitude (degrees)."""
    a = nutation_args(greenwich_day, greenwich_month, greenwich_year)
    T = a.T

    dp = (-17.2327 - 0.01737 * T) * math.sin(a.n1)
    dp += (-1.2729 - 0.00013 * T) * math.sin(a.l2) + 0.2088 * math.sin(a.n2)
    dp += -0.2037 * math.sin(a.d2) + (0.1261 - 0.00031 * T) * math.sin(a.m1)
    dp += 0.0675 * math.sin(a.m2) - (0.0497 - 0.00012 * T) * math.sin(a.l2 + a.m1)
    dp += -0.0342 * math.sin(a.d2 - a.n1) - 0.0261 * math.sin(a.d2 + a.m2)
    dp += 0.0214 * math.sin(a.l2 - a.m1) - 0.0149 * math.sin(a.l2 - a.d2 + a.m2)
    dp += 0.0124 * math.sin(a.l2 - a.n1) + 0.0114 * math.sin(a.d2 - a.m2)

    return dp / 3600.0


def nutation_in_obliquity(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> float:
    """Nutation in obliquity (degrees)."""
    a = nutation_args(greenwich_day, greenwich_month, greenwich_year)
    T = a.T

    ddo = (9.21 + 0.00091 * T) * math.cos(a.n1)
    ddo += (0.5522 - 0.00029 * T) * math.cos(a.l2) - 0.0904 * math.cos(a.n2)
    ddo += 0.0884 * math.cos(a.d2) + 0.0216 * math.cos(a.l2 + a.m1)
    ddo += 0.0183 * math.cos(a.d2 - a.n1) + 0.0113 * math.cos(a.d2 + a.m2)
    ddo += -0.0093 * math.cos(a.l2 - a.m1) - 0.0066 * math.cos(a.l2 - a.n1)

    return ddo / 3600.0


# ------------------------------------------------------------
# Obliquity of the ecliptic
# ------------------------------------------------------------

def mean_obliquity(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> float:
    """
    Mean obliquity (degrees), c in Julian centuries from J2000.0:
      eps0 = 23.43929167 - (46.815 c + 0.0006 c^2 - 0.00181 c^3) / 3600
    """
    c = T_1900(greenwich_day, greenwich_month, greenwich_year) - 1.0
    d = c * (46.815 + c * (0.0006 - c * 0.00181))
    return 23.43929167 - d / 3600.0


def obliquity(greenwich_day: float, greenwich_month: int, greenwich_year: int) -> float:
    """True obliquity of the ecliptic (degrees): mean obliquity plus nutation in obliquity."""
    return (
        mean_obliquity(greenwich_day, greenwich_month, greenwich_year)
        + nutation_in_obliquity(greenwich_day, greenwich_month, greenwich_year)
    )
