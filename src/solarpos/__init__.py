"""solarpos public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    approximate_position_of_sun,
    precise_position_of_sun,
    sun_position,
    to_sun_position,
)
from .core.types import (
    EPOCH_2010,
    CivilDate,
    CivilDateTime,
    EclipticCoordinate,
    EquatorialCoordinate,
    SexagesimalTriple,
    SolarEpoch,
    SunPosition,
    TimeZoneContext,
)

__all__ = [
    "approximate_position_of_sun",
    "precise_position_of_sun",
    "sun_position",
    "to_sun_position",
    "EPOCH_2010",
    "CivilDate",
    "CivilDateTime",
    "EclipticCoordinate",
    "EquatorialCoordinate",
    "SexagesimalTriple",
    "SolarEpoch",
    "SunPosition",
    "TimeZoneContext",
]
