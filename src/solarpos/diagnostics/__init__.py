"""Diagnostics package.

- diagnostics: always available, light-weight checks (no ephemeris)
- diagnostics.ephem: optional (requires ephemeris extras + a JPL kernel)
"""

__all__ = ["compare_variants"]
