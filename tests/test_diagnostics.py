# tests/test_diagnostics.py

import sys
from unittest.mock import patch

import pytest

from solarpos.core.errors import EphemerisUnavailableError, SolarposError
from solarpos.diagnostics import compare_variants as cv
from solarpos.ephemeris import require_ephemeris


def test_variant_differences_over_a_year():
    diffs = cv.variant_differences(2003, step_days=30.0)
    assert len(diffs) == 13
    max_ra, mean_ra, max_dec, mean_dec = cv.summarize(diffs)
    # seconds of time / arcseconds
    assert max_ra < 60.0
    assert max_dec < 180.0
    assert mean_ra <= max_ra
    assert mean_dec <= max_dec

def test_variant_differences_sample_instants():
    diffs = cv.variant_differences(2003, step_days=100.0, hour=6.0)
    assert diffs[0].jd == pytest.approx(2452640.5 + 0.25)
    assert [round(b.jd - a.jd, 9) for a, b in zip(diffs, diffs[1:])] == [100.0] * (len(diffs) - 1)

def test_missing_ephemeris_extras_raise():
    with patch.dict(sys.modules, {"skyfield": None, "jplephem": None}):
        with pytest.raises(EphemerisUnavailableError) as exc:
            require_ephemeris()
    assert isinstance(exc.value, SolarposError)
    assert "solarpos[ephemeris]" in str(exc.value)
