# tests/test_coords.py

import random

import pytest

from solarpos.core.types import CivilDate, EclipticCoordinate, EquatorialCoordinate
from solarpos.reference import astro_args as aa
from solarpos.reference import coords
from solarpos.reference.angles import dms_to_decimal_degrees, hms_to_decimal_hours, wrap180


def test_ecliptic_to_equatorial_6_july_2009():
    """
    lambda = 139 41' 10", beta = 4 52' 31", Greenwich date 2009 July 6
      -> RA 9h 34m 53.4s, Dec +19 32' 08.5"
    """
    lam = dms_to_decimal_degrees(139, 41, 10)
    beta = dms_to_decimal_degrees(4, 52, 31)

    ra_deg = coords.ecliptic_right_ascension(lam, beta, 6, 7, 2009)
    dec_deg = coords.ecliptic_declination(lam, beta, 6, 7, 2009)

    assert ra_deg / 15.0 == pytest.approx(hms_to_decimal_hours(9, 34, 53.4), abs=2e-4)
    assert dec_deg == pytest.approx(dms_to_decimal_degrees(19, 32, 8.52), abs=3e-3)

@pytest.mark.parametrize(
    "lam, ra_hours, dec_sign",
    [(0.0, 0.0, 0), (90.0, 6.0, 1), (180.0, 12.0, 0), (270.0, 18.0, -1)],
)
def test_cardinal_points(lam, ra_hours, dec_sign):
    eps = aa.obliquity(21, 6, 2020)
    eq = coords.ecliptic_to_equatorial(EclipticCoordinate(lam), CivilDate(21, 6, 2020))
    assert 0.0 <= eq.right_ascension_hours < 24.0
    assert wrap180((eq.right_ascension_hours - ra_hours) * 15.0) == pytest.approx(0.0, abs=1e-9)
    assert eq.declination_deg == pytest.approx(dec_sign * eps, abs=1e-9)

def test_right_ascension_range():
    random.seed(42)
    for _ in range(2000):
        lam = random.uniform(-720.0, 720.0)
        beta = random.uniform(-80.0, 80.0)
        ra = coords.ecliptic_right_ascension(lam, beta, 1, 1, 2000)
        dec = coords.ecliptic_declination(lam, beta, 1, 1, 2000)
        assert 0.0 <= ra < 360.0
        assert -90.0 <= dec <= 90.0

def test_declination_at_ecliptic_pole_is_clamped():
    # sin(beta) cos(eps) + cos(beta) sin(eps) sin(lam) may drift past 1 near the poles
    for lam in (90.0, 90.0 + 1e-12):
        dec = coords.ecliptic_declination(lam, 90.0 - aa.obliquity(1, 1, 2000), 1, 1, 2000)
        assert dec == pytest.approx(90.0, abs=1e-5)

def test_equatorial_ecliptic_roundtrip():
    random.seed(42)
    g = CivilDate(27, 7, 2003)
    for _ in range(1000):
        ec = EclipticCoordinate(random.uniform(0.0, 360.0), random.uniform(-60.0, 60.0))
        eq = coords.ecliptic_to_equatorial(ec, g)
        back = coords.equatorial_to_ecliptic(eq, g)
        assert wrap180(back.longitude_deg - ec.longitude_deg) == pytest.approx(0.0, abs=1e-8)
        assert back.latitude_deg == pytest.approx(ec.latitude_deg, abs=1e-8)

def test_obliquity_is_time_dependent():
    eq_1900 = coords.ecliptic_to_equatorial(EclipticCoordinate(90.0), CivilDate(1, 1, 1900))
    eq_2100 = coords.ecliptic_to_equatorial(EclipticCoordinate(90.0), CivilDate(1, 1, 2100))
    # ~47" per century
    assert (eq_1900.declination_deg - eq_2100.declination_deg) * 3600.0 == pytest.approx(93.6, abs=25.0)

def test_equatorial_coordinate_degrees():
    assert EquatorialCoordinate(6.0, 0.0).right_ascension_deg == pytest.approx(90.0)
