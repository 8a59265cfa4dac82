from __future__ import annotations

import math
from typing import Optional

from solarpos.core.types import SexagesimalTriple


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """
    Wrap degrees to [0,360) using a true floor:
      x - 360*floor(x/360)
    Negative inputs wrap upward; exactly 360 reduces to 0.
    """
    y = x_deg - 360.0 * math.floor(x_deg / 360.0)
    # -1e-15 wraps to 360.0 after rounding
    if y >= 360.0:
        return 0.0
    return y

def wrap_rad(x_rad: float) -> float:
    """Wrap radians to [0, 2*pi)."""
    tau = 2.0 * math.pi
    y = x_rad - tau * math.floor(x_rad / tau)
    if y >= tau:
        return 0.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return wrap_deg(deg + 180.0) - 180.0

def degrees_to_radians(deg: float) -> float:
    return deg * math.pi / 180.0

def radians_to_degrees(rad: float) -> float:
    return rad * 180.0 / math.pi

def decimal_degrees_to_degree_hours(deg: float) -> float:
    return deg / 15.0

def degree_hours_to_decimal_degrees(hours: float) -> float:
    return hours * 15.0

def frac01(x: float) -> float:
    """Return fractional part in [0,1)."""
    return x - math.floor(x)

def clamp_unit(x: float) -> float:
    """Clamp to [-1,1] before asin/acos; floating-point drift can overshoot."""
    return max(-1.0, min(1.0, x))


# ------------------------------------------------------------
# Sexagesimal decomposition
# ------------------------------------------------------------

def _is_negative(x: float) -> bool:
    return math.copysign(1.0, x) < 0

def to_sexagesimal(value: float, places: Optional[int] = None) -> SexagesimalTriple:
    """
    Decompose a signed decimal value (hours or degrees) into (unit, minute, second).

    With `places`, the total number of seconds is rounded first so that a second
    rounding up to 60 carries into the minute (and the minute into the unit).
    """
    total = abs(value) * 3600.0
    if places is not None:
        total = round(total, places)
    whole_minutes, second = divmod(total, 60.0)
    unit, minute = divmod(int(whole_minutes), 60)
    if places is not None:
        second = round(second, places)
    unit_f = float(unit)
    return SexagesimalTriple(
        unit=-unit_f if value < 0 else unit_f,
        minute=minute,
        second=second,
    )

def from_sexagesimal(unit: float, minute: float, second: float) -> float:
    """Recompose; negative if any component is negative (a -0.0 unit counts)."""
    mag = abs(unit) + (abs(minute) + abs(second) / 60.0) / 60.0
    if _is_negative(unit) or minute < 0 or second < 0:
        return -mag
    return mag


def decimal_hours_to_hms(hours: float, places: Optional[int] = None) -> SexagesimalTriple:
    return to_sexagesimal(hours, places)

def decimal_degrees_to_dms(deg: float, places: Optional[int] = None) -> SexagesimalTriple:
    return to_sexagesimal(deg, places)

def hms_to_decimal_hours(hours: float, minutes: float, seconds: float) -> float:
    return from_sexagesimal(hours, minutes, seconds)

def dms_to_decimal_degrees(degrees: float, minutes: float, seconds: float) -> float:
    return from_sexagesimal(degrees, minutes, seconds)


def decimal_hours_hour(hours: float, places: Optional[int] = None) -> float:
    return decimal_hours_to_hms(hours, places).unit

def decimal_hours_minute(hours: float, places: Optional[int] = None) -> int:
    return decimal_hours_to_hms(hours, places).minute

def decimal_hours_second(hours: float, places: Optional[int] = None) -> float:
    return decimal_hours_to_hms(hours, places).second

def decimal_degrees_degrees(deg: float, places: Optional[int] = None) -> float:
    return decimal_degrees_to_dms(deg, places).unit

def decimal_degrees_minutes(deg: float, places: Optional[int] = None) -> int:
    return decimal_degrees_to_dms(deg, places).minute

def decimal_degrees_seconds(deg: float, places: Optional[int] = None) -> float:
    return decimal_degrees_to_dms(deg, places).second
