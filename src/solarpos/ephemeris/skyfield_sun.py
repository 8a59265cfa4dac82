#ephemeris/skyfield_sun.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from solarpos.core.types import EquatorialCoordinate
from . import require_ephemeris


@dataclass
class SkyfieldSun:
    """
    Apparent geocentric RA/Dec of the Sun (true equator and equinox of date)
    from a JPL kernel via skyfield.
    """
    timescale: Any
    earth: Any
    sun: Any

    @classmethod
    def load(cls, kernel: str = "de421.bsp", directory: Optional[str] = None) -> "SkyfieldSun":
        require_ephemeris()
        from skyfield.api import Loader

        loader = Loader(directory or ".")
        eph = loader(kernel)
        return cls(timescale=loader.timescale(), earth=eph["earth"], sun=eph["sun"])

    def apparent_position(self, jd_ut: float) -> EquatorialCoordinate:
        t = self.timescale.ut1_jd(jd_ut)
        app = self.earth.at(t).observe(self.sun).apparent()
        ra, dec, _ = app.radec(epoch="date")
        return EquatorialCoordinate(right_ascension_hours=ra.hours, declination_deg=dec.degrees)
