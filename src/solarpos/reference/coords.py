from __future__ import annotations

import math

from solarpos.core.types import CivilDate, EclipticCoordinate, EquatorialCoordinate
from . import astro_args as aa
from .angles import clamp_unit, decimal_degrees_to_degree_hours, wrap_deg


def ecliptic_right_ascension(
    longitude_deg: float,
    latitude_deg: float,
    greenwich_day: float,
    greenwich_month: int,
    greenwich_year: int,
) -> float:
    """
    Right ascension (degrees, [0,360)) of an ecliptic position, rotated through the
    true obliquity of the Greenwich date:
      alpha = atan2(sin(lam) cos(eps) - tan(beta) sin(eps), cos(lam))
    """
    lam = math.radians(longitude_deg)
    beta = math.radians(latitude_deg)
    eps = math.radians(aa.obliquity(greenwich_day, greenwich_month, greenwich_year))

    y = math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps)
    x = math.cos(lam)
    return wrap_deg(math.degrees(math.atan2(y, x)))


def ecliptic_declination(
    longitude_deg: float,
    latitude_deg: float,
    greenwich_day: float,
    greenwich_month: int,
    greenwich_year: int,
) -> float:
    """
    Declination (degrees, [-90,90]):
      delta = asin(sin(beta) cos(eps) + cos(beta) sin(eps) sin(lam))
    """
    lam = math.radians(longitude_deg)
    beta = math.radians(latitude_deg)
    eps = math.radians(aa.obliquity(greenwich_day, greenwich_month, greenwich_year))

    s = math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(eps) * math.sin(lam)
    return math.degrees(math.asin(clamp_unit(s)))


def ecliptic_to_equatorial(ec: EclipticCoordinate, greenwich: CivilDate) -> EquatorialCoordinate:
    ra_deg = ecliptic_right_ascension(ec.longitude_deg, ec.latitude_deg,
                                      greenwich.day, greenwich.month, greenwich.year)
    dec_deg = ecliptic_declination(ec.longitude_deg, ec.latitude_deg,
                                   greenwich.day, greenwich.month, greenwich.year)
    return EquatorialCoordinate(
        right_ascension_hours=decimal_degrees_to_degree_hours(ra_deg),
        declination_deg=dec_deg,
    )


def equatorial_to_ecliptic(eq: EquatorialCoordinate, greenwich: CivilDate) -> EclipticCoordinate:
    """
    Inverse rotation:
      lam  = atan2(sin(alpha) cos(eps) + tan(delta) sin(eps), cos(alpha))
      beta = asin(sin(delta) cos(eps) - cos(delta) sin(eps) sin(alpha))
    """
    alpha = math.radians(eq.right_ascension_deg)
    delta = math.radians(eq.declination_deg)
    eps = math.radians(aa.obliquity(greenwich.day, greenwich.month, greenwich.year))

    y = math.sin(alpha) * math.cos(eps) + math.tan(delta) * math.sin(eps)
    x = math.cos(alpha)
    s = math.sin(delta) * math.cos(eps) - math.cos(delta) * math.sin(eps) * math.sin(alpha)

    return EclipticCoordinate(
        longitude_deg=wrap_deg(math.degrees(math.atan2(y, x))),
        latitude_deg=math.degrees(math.asin(clamp_unit(s))),
    )
