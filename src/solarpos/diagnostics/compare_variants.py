#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from solarpos.api import sun_position
from solarpos.core.types import CivilDateTime, TimeZoneContext
from solarpos.reference import time_scales as ts
from solarpos.reference.angles import wrap180


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarpos[diagnostics]"') from e


@dataclass(frozen=True)
class VariantDiff:
    jd: float
    d_ra_seconds: float   # precise - approximate, seconds of time
    d_dec_arcsec: float   # precise - approximate, arcseconds


def variant_differences(year: int, step_days: float = 1.0, hour: float = 0.0) -> List[VariantDiff]:
    """Sample one calendar year (Greenwich) and difference the two models."""
    tz = TimeZoneContext()
    jd = ts.civil_date_to_julian_date(1, 1, year) + hour / 24.0
    jd_end = ts.civil_date_to_julian_date(1, 1, year + 1)

    out: List[VariantDiff] = []
    while jd < jd_end:
        c = ts.julian_date_to_civil_date(jd)
        day = int(c.day)
        civil = CivilDateTime(day, c.month, c.year, hour=24.0 * (c.day - day))
        a = sun_position(civil, tz, method="approximate")
        p = sun_position(civil, tz, method="precise")
        d_ra_deg = wrap180(p.right_ascension_deg - a.right_ascension_deg)
        out.append(VariantDiff(
            jd=jd,
            d_ra_seconds=d_ra_deg / 15.0 * 3600.0,
            d_dec_arcsec=(p.declination_deg - a.declination_deg) * 3600.0,
        ))
        jd += step_days
    return out


def summarize(diffs: Sequence[VariantDiff]) -> Tuple[float, float, float, float]:
    """(max |dRA| s, mean |dRA| s, max |dDec| ", mean |dDec| ")"""
    ra = [abs(d.d_ra_seconds) for d in diffs]
    dec = [abs(d.d_dec_arcsec) for d in diffs]
    return max(ra), sum(ra) / len(ra), max(dec), sum(dec) / len(dec)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare the approximate and precise solar position models.")
    p.add_argument("--year", type=int, default=2003)
    p.add_argument("--step-days", type=float, default=1.0)
    p.add_argument("--hour", type=float, default=0.0, help="UT hour of each sample")
    p.add_argument("--out-png", default=None, help="optional plot of the differences")
    args = p.parse_args(argv)

    diffs = variant_differences(args.year, args.step_days, args.hour)
    max_ra, mean_ra, max_dec, mean_dec = summarize(diffs)

    print(f"Samples: {len(diffs)} ({args.year}, every {args.step_days:g} d at {args.hour:g}h UT)")
    print("Precise - approximate:")
    print(f"  RA   max |d| = {max_ra:8.3f} s    mean |d| = {mean_ra:8.3f} s")
    print(f"  Dec  max |d| = {max_dec:8.3f} \"   mean |d| = {mean_dec:8.3f} \"")

    if args.out_png:
        plt = _need_matplotlib()
        days = [d.jd - diffs[0].jd for d in diffs]
        fig, (ax1, ax2) = plt.subplots(2, 1, sharex=True, figsize=(10, 6))
        ax1.plot(days, [d.d_ra_seconds for d in diffs], lw=1)
        ax1.set_ylabel("dRA (s)")
        ax1.grid(True, alpha=0.3)
        ax2.plot(days, [d.d_dec_arcsec for d in diffs], lw=1, color="tab:orange")
        ax2.set_ylabel("dDec (arcsec)")
        ax2.set_xlabel(f"days since {args.year}-01-01")
        ax2.grid(True, alpha=0.3)
        fig.suptitle("Precise minus approximate solar position")
        fig.tight_layout()
        fig.savefig(args.out_png, dpi=120)
        print(f"Wrote {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
