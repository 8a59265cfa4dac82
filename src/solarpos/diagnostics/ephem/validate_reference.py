#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from solarpos.api import sun_position
from solarpos.core.types import CivilDateTime, TimeZoneContext
from solarpos.ephemeris.skyfield_sun import SkyfieldSun
from solarpos.reference import time_scales as ts
from solarpos.reference.angles import wrap180


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "solarpos[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarpos[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the analytical solar models against a JPL kernel (skyfield).")
    p.add_argument("--year-start", type=int, default=1950)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--step-days", type=int, default=37)
    p.add_argument("--kernel", default="de421.bsp")
    p.add_argument("--kernel-dir", default=None)
    p.add_argument("--out-png", default=None)
    args = p.parse_args(argv)

    np = _need_numpy()

    print(f"Loading {args.kernel} ...")
    ref = SkyfieldSun.load(args.kernel, args.kernel_dir)

    jd_start = ts.civil_date_to_julian_date(1, 1, args.year_start)
    jd_end = ts.civil_date_to_julian_date(1, 1, args.year_end)
    jds = np.arange(jd_start, jd_end, args.step_days)

    tz = TimeZoneContext()
    err = {"approximate": ([], []), "precise": ([], [])}
    for jd in jds:
        c = ts.julian_date_to_civil_date(float(jd))
        day = int(c.day)
        civil = CivilDateTime(day, c.month, c.year, hour=24.0 * (c.day - day))
        truth = ref.apparent_position(float(jd))
        for method, (d_ra, d_dec) in err.items():
            pos = sun_position(civil, tz, method=method)
            d_ra.append(wrap180(pos.right_ascension_deg - truth.right_ascension_deg) * 3600.0)
            d_dec.append((pos.declination_deg - truth.declination_deg) * 3600.0)

    print(f"Samples: {len(jds)}  ({args.year_start}..{args.year_end}, step {args.step_days} d)")
    print("model        RA rms \"  RA max \" Dec rms \" Dec max \"")
    for method, (d_ra, d_dec) in err.items():
        ra = np.asarray(d_ra)
        dec = np.asarray(d_dec)
        print(
            f"{method:<12} {np.sqrt(np.mean(ra ** 2)):10.2f} {np.max(np.abs(ra)):10.2f} "
            f"{np.sqrt(np.mean(dec ** 2)):10.2f} {np.max(np.abs(dec)):10.2f}"
        )

    if args.out_png:
        plt = _need_matplotlib()
        years = args.year_start + (jds - jd_start) / 365.25
        fig, axes = plt.subplots(2, 1, sharex=True, figsize=(11, 6))
        for method, (d_ra, d_dec) in err.items():
            axes[0].plot(years, d_ra, lw=0.8, label=method)
            axes[1].plot(years, d_dec, lw=0.8, label=method)
        axes[0].set_ylabel("RA error (arcsec)")
        axes[1].set_ylabel("Dec error (arcsec)")
        axes[1].set_xlabel("year")
        for ax in axes:
            ax.grid(True, alpha=0.3)
            ax.legend()
        fig.tight_layout()
        fig.savefig(args.out_png, dpi=120)
        print(f"Wrote {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
