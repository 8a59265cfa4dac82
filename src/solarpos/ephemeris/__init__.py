"""Ephemeris adapters (optional).

Thin wrapper around skyfield/JPL ephemerides used to validate the analytical models.
Install with:
  pip install "solarpos[ephemeris]"
"""

from solarpos.core.errors import EphemerisUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('Ephemeris support requires: pip install "solarpos[ephemeris]"') from e
