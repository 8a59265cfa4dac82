from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import math
import re
import sys
from typing import Tuple


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{1,2}-\d{1,2}(\.\d+)?$")
_VERBOSE_FLAGS = ("-v", "--verbose")


def _parse_ymd(s: str) -> Tuple[int, int, float]:
    """YYYY-MM-DD (day may be fractional, year may be negative)."""
    neg = s.startswith("-")
    y, m, d = (s[1:] if neg else s).split("-")
    return (-int(y) if neg else int(y)), int(m), float(d)


def _parse_hms(s: str) -> Tuple[float, float, float]:
    parts = [float(x) for x in s.split(":")]
    while len(parts) < 3:
        parts.append(0.0)
    return parts[0], parts[1], parts[2]


def _fmt_hms(h: float, m: float, s: float) -> str:
    return f"{int(h):02d}h {int(m):02d}m {s:05.2f}s"


def _fmt_dms(d: float, m: float, s: float) -> str:
    sign = "-" if math.copysign(1.0, d) < 0 else "+"
    return f"{sign}{abs(int(d)):02d}° {int(m):02d}′ {s:05.2f}″"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _position_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("date", help="local civil date YYYY-MM-DD")
    p.add_argument("time", nargs="?", default="00:00:00", help="local civil time HH:MM:SS (default 00:00:00)")
    p.add_argument("--zone", type=int, default=0, help="time zone correction in hours (east positive)")
    p.add_argument("--dst", action="store_true", help="daylight saving in effect")
    return p


def cmd_position(argv: list[str], *, method: str) -> int:
    from solarpos import api

    prog = "solarpos approx" if method == "approximate" else "solarpos precise"
    p = _position_parser(prog, f"{method.capitalize()} position of the Sun for a local date and time")
    args = p.parse_args(argv)

    year, month, day = _parse_ymd(args.date)
    h, mi, s = _parse_hms(args.time)
    fn = api.approximate_position_of_sun if method == "approximate" else api.precise_position_of_sun
    pos = fn(h, mi, s, day, month, year, args.dst, args.zone)

    print(f"Sun ({method}) at {args.date} {args.time} (zone {args.zone:+d}h{', DST' if args.dst else ''}):")
    print(f"  Right Ascension = {_fmt_hms(pos.ra_hour, pos.ra_min, pos.ra_sec)}")
    print(f"  Declination     = {_fmt_dms(pos.dec_deg, pos.dec_min, pos.dec_sec)}")
    return 0


def cmd_compare(argv: list[str]) -> int:
    from solarpos import api
    from solarpos.reference.angles import wrap180

    p = _position_parser("solarpos compare", "Approximate vs precise position of the Sun")
    args = p.parse_args(argv)

    year, month, day = _parse_ymd(args.date)
    h, mi, s = _parse_hms(args.time)
    a = api.approximate_position_of_sun(h, mi, s, day, month, year, args.dst, args.zone)
    b = api.precise_position_of_sun(h, mi, s, day, month, year, args.dst, args.zone)

    # RA may straddle 0h
    d_ra = wrap180((b.right_ascension_hours - a.right_ascension_hours) * 15.0) / 15.0 * 3600.0
    d_dec = (b.declination_deg - a.declination_deg) * 3600.0

    print(f"{'':12} {'RA':>18} {'Dec':>20}")
    print(f"{'approximate':12} {_fmt_hms(*a[:3]):>18} {_fmt_dms(*a[3:]):>20}")
    print(f"{'precise':12} {_fmt_hms(*b[:3]):>18} {_fmt_dms(*b[3:]):>20}")
    print(f"{'difference':12} {d_ra:>16.2f} s {d_dec:>18.2f} ″")
    return 0


def cmd_julian_date(argv: list[str]) -> int:
    from solarpos.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="solarpos julian-date", description="Civil date <-> Julian Date.")
    p.add_argument("value", help="YYYY-MM-DD (fractional day allowed) or a Julian Date")
    args = p.parse_args(argv)

    if _DATE_RE.match(args.value):
        year, month, day = _parse_ymd(args.value)
        jd = ts.civil_date_to_julian_date(day, month, year)
        print(f"JD = {jd:.6f}")
    else:
        c = ts.julian_date_to_civil_date(float(args.value))
        print(f"Civil date = {c.year}-{c.month:02d}-{c.day:.6f}")
    return 0


def cmd_obliquity(argv: list[str]) -> int:
    from solarpos.reference import astro_args as aa

    p = argparse.ArgumentParser(prog="solarpos obliquity", description="Obliquity of the ecliptic and nutation for a Greenwich date.")
    p.add_argument("date", help="Greenwich date YYYY-MM-DD")
    args = p.parse_args(argv)

    year, month, day = _parse_ymd(args.date)
    print(f"Greenwich date = {args.date}")
    print(f"  Mean obliquity          = {aa.mean_obliquity(day, month, year):.8f} deg")
    print(f"  Nutation in obliquity   = {aa.nutation_in_obliquity(day, month, year) * 3600.0:.4f} arcsec")
    print(f"  True obliquity          = {aa.obliquity(day, month, year):.8f} deg")
    print(f"  Nutation in longitude   = {aa.nutation_in_longitude(day, month, year) * 3600.0:.4f} arcsec")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # -v/--verbose is accepted anywhere on the command line
    verbose = any(a in _VERBOSE_FLAGS for a in argv)
    argv = [a for a in argv if a not in _VERBOSE_FLAGS]
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("solarpos").setLevel(logging.DEBUG)

    # Shorthand: `solarpos YYYY-MM-DD [HH:MM:SS] ...` -> approximate position
    if argv and _DATE_RE.match(argv[0]):
        return cmd_position(argv, method="approximate")

    p = argparse.ArgumentParser(prog="solarpos", description="Position of the Sun for a local date and time.")
    p.add_argument("-v", "--verbose", action="store_true", help="log intermediate values")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("approx", help="Approximate position of the Sun (epoch 2010.0 elements)")
    sub.add_parser("precise", help="Precise position of the Sun (1900-based series)")
    sub.add_parser("compare", help="Approximate vs precise position side by side")
    sub.add_parser("julian-date", help="Civil date <-> Julian Date")
    sub.add_parser("obliquity", help="Obliquity of the ecliptic and nutation for a date")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument("tool", choices=["compare-variants"], help="Which diagnostic to run")

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-ref"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "approx":
        return cmd_position(rest, method="approximate")

    if args.cmd == "precise":
        return cmd_position(rest, method="precise")

    if args.cmd == "compare":
        return cmd_compare(rest)

    if args.cmd == "julian-date":
        return cmd_julian_date(rest)

    if args.cmd == "obliquity":
        return cmd_obliquity(rest)

    if args.cmd == "diag":
        tool_map = {
            "compare-variants": "solarpos.diagnostics.compare_variants",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-ref": "solarpos.diagnostics.ephem.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
