class SolarposError(Exception):
    """Base error."""

class EphemerisUnavailableError(SolarposError):
    """Raised when the optional ephemeris extras (skyfield, jplephem) are not installed."""
