#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import coptcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "coptcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "coptcal[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Civil years, Nayrouz day-of-September and Coptic year length (days)."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    day = np.empty_like(years)
    length = np.empty_like(years)
    for i, Y in enumerate(years):
        ny = coptcal.compute_coptic_new_year(int(Y))
        day[i] = ny.day
        length[i] = coptcal.compute_coptic_new_year(int(Y) + 1) - ny
    return years, day, length


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Nayrouz dates and Coptic year lengths.")
    p.add_argument("--start-year", type=int, default=1880)
    p.add_argument("--end-year", type=int, default=2220)
    p.add_argument("--outbase", default="nayrouz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    years, day, length = build_series(np, args.start_year, args.end_year)
    leap = np.array([(int(Y) - 283) % 4 == 3 for Y in years])

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(9.2, 5.6), sharex=True, constrained_layout=True)
    for ax in (ax0, ax1):
        ax.set_axisbelow(True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax0.scatter(years, day, s=10, c="tab:blue", alpha=0.6)
    ax0.set_ylabel("Nayrouz (September day)")
    ax0.set_yticks([11, 12])
    ax0.set_title("Coptic New Year in the civil calendar")

    ax1.scatter(years[~leap], length[~leap], s=10, c="0.45", alpha=0.6, label="common (year mod 4 != 3)")
    ax1.scatter(years[leap], length[leap], s=18, facecolors="none", edgecolors="tab:red", label="leap (year mod 4 == 3)")
    ax1.set_ylabel("Coptic year length (days)")
    ax1.set_xlabel("Civil year of Nayrouz")
    ax1.set_yticks([365, 366])
    ax1.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")

    odd = years[leap & (length == 365)]
    if len(odd):
        print("Leap-labelled years with a 365-day civil span (Nesi 6 absent):", ", ".join(str(int(Y) - 283) for Y in odd))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
