# tests/test_astro_args.py

import math

import pytest

from solarpos.core.types import EPOCH_2010, SolarEpoch
from solarpos.reference import astro_args as aa
from solarpos.reference import time_scales as ts


def test_T_1900():
    assert aa.T_1900(0.5, 1, 1900) == pytest.approx(0.0, abs=1e-12)
    assert aa.T_1900(1.5, 1, 2000) == pytest.approx(1.0, abs=1e-12)

def test_elements_at_epoch_2010():
    """
    Orbital elements of the Sun at epoch 2010.0 (2010 January 0.0):
      eg = 279.557208 deg, wg = 283.112438 deg, e = 0.016705
    """
    el = aa.solar_elements(EPOCH_2010)
    assert el.mean_longitude_deg == pytest.approx(279.557208, abs=1e-4)
    assert el.perigee_longitude_deg == pytest.approx(283.112438, abs=1e-4)
    assert el.eccentricity == pytest.approx(0.016705, abs=1e-6)
    assert el.epoch_jd == pytest.approx(2455196.5)

    assert aa.sun_mean_ecliptic_longitude(0, 1, 2010) == el.mean_longitude_deg
    assert aa.sun_perigee_longitude(0, 1, 2010) == el.perigee_longitude_deg
    assert aa.sun_eccentricity(0, 1, 2010) == el.eccentricity

def test_elements_depend_on_epoch():
    a = aa.solar_elements(SolarEpoch(0, 1, 1990))
    b = aa.solar_elements(EPOCH_2010)
    # perigee advances ~1.7 deg per century
    assert b.perigee_longitude_deg - a.perigee_longitude_deg == pytest.approx(0.3438, abs=1e-3)
    assert a.eccentricity > b.eccentricity
    for el in (a, b):
        assert 0.0 <= el.mean_longitude_deg < 360.0
        assert 0.0 <= el.perigee_longitude_deg < 360.0

@pytest.mark.parametrize("m", [0.0, 0.5, 1.0, 3.0, math.pi, 4.5, 6.2, -1.0, 20.0])
def test_kepler_solution(m):
    e = 0.016713
    ea = aa.eccentric_anomaly(m, e)
    m_wrapped = m - 2.0 * math.pi * math.floor(m / (2.0 * math.pi))
    assert ea - e * math.sin(ea) == pytest.approx(m_wrapped, abs=1e-6)

def test_true_anomaly_circular_orbit():
    for m in (0.1, 1.0, 2.0, 3.0):
        assert aa.true_anomaly(m, 0.0) == pytest.approx(m, abs=1e-9)

def test_true_anomaly_leads_mean_anomaly_on_way_out():
    # between perihelion and aphelion the true anomaly runs ahead
    e = 0.016713
    nu = aa.true_anomaly(1.0, e)
    assert nu > 1.0
    # first-order equation of centre: 2 e sin M
    assert nu - 1.0 == pytest.approx(2.0 * e * math.sin(1.0), abs=5e-4)

def test_mean_obliquity_j2000():
    assert aa.mean_obliquity(1.5, 1, 2000) == pytest.approx(23.43929167, abs=1e-8)

def test_obliquity_6_july_2009():
    # mean obliquity, 2009 July 6 (0h): 23.438055 deg
    assert aa.mean_obliquity(6, 7, 2009) == pytest.approx(23.438055, abs=2e-6)
    true_eps = aa.obliquity(6, 7, 2009)
    assert true_eps == pytest.approx(aa.mean_obliquity(6, 7, 2009) + aa.nutation_in_obliquity(6, 7, 2009))
    assert true_eps != aa.mean_obliquity(6, 7, 2009)

def test_nutation_bounded():
    for year in (1900, 1950, 2000, 2010, 2050):
        for month in range(1, 13):
            dpsi = aa.nutation_in_longitude(1, month, year) * 3600.0
            deps = aa.nutation_in_obliquity(1, month, year) * 3600.0
            assert abs(dpsi) < 20.0
            assert abs(deps) < 11.0

def test_obliquity_continuous_across_century():
    for year in (1900, 2000, 2100):
        jd0 = ts.civil_date_to_julian_date(1, 1, year) - 30.0
        prev = None
        for k in range(60):
            c = ts.julian_date_to_civil_date(jd0 + k)
            eps = aa.obliquity(c.day, c.month, c.year)
            assert 23.0 < eps < 24.0
            if prev is not None:
                # well under an arcsecond per day
                assert abs(eps - prev) < 1e-4
            prev = eps

def test_mean_obliquity_decreasing():
    eps = [aa.mean_obliquity(1, 1, y) for y in range(1800, 2201, 50)]
    for a, b in zip(eps, eps[1:]):
        assert b < a
        # ~47" per century
        assert (a - b) * 3600.0 == pytest.approx(23.4, abs=0.5)
