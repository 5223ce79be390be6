#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import ethiocal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ethiocal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ethiocal[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian year of each Enkutatash and its day of September (Sep 1 = 1)."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, gy in enumerate(years):
        y[i] = float(ethiocal.new_year_offset(int(gy)))
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the September day of Enkutatash across centuries.")
    p.add_argument("--start-year", type=int, default=1600, help="First Gregorian year.")
    p.add_argument("--end-year", type=int, default=2400, help="Last Gregorian year.")
    p.add_argument("--outbase", default="enkutatash_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.start_year, args.end_year)
    leap_before = np.array([ethiocal.is_gregorian_leap(int(gy) + 1) for gy in x])

    fig, ax = plt.subplots(figsize=(9.2, 4.0), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day of September")
    ax.set_title("Enkutatash (1 Meskerem) in the Gregorian calendar")

    ax.scatter(x[~leap_before], y[~leap_before], s=8, c="tab:blue", alpha=0.5, label="ordinary")
    ax.scatter(x[leap_before], y[leap_before], s=8, c="tab:red", alpha=0.5, label="before Gregorian leap year")
    ax.legend(loc="upper left", frameon=False)

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
