#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import histcal
from histcal.core.types import HistoricEra


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "histcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "histcal[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 14.0
    offset: float = 0.0


def build_series(np, name: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    h = histcal.get_history(name)
    years = np.arange(start_year, end_year + 1, dtype=int)
    lengths = np.empty_like(years)
    for i, Y in enumerate(years):
        lengths[i] = h.year_length(HistoricEra.AD, int(Y))
    return years, lengths


def anomalies(years, lengths) -> List[Tuple[int, int]]:
    """Years whose length is neither 365 nor 366."""
    mask = (lengths != 365) & (lengths != 366)
    return [(int(y), int(n)) for y, n in zip(years[mask], lengths[mask])]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Year lengths across histories (plot + table of irregular years).")
    p.add_argument("--from-year", type=int, default=1560)
    p.add_argument("--to-year", type=int, default=1780)
    p.add_argument("--outbase", default="year_lengths", help="Output base name (writes .png)")
    p.add_argument("--no-plot", action="store_true", help="Only print the irregular years.")
    args = p.parse_args(argv)

    np = _need_numpy()

    styles: Dict[str, Style] = {
        "proleptic-gregorian":    Style("Proleptic Gregorian", "0.55", "_", size=18, offset=-0.15),
        "proleptic-julian":       Style("Proleptic Julian", "0.30", "|", size=18, offset=-0.05),
        "first-gregorian-reform": Style("Gregorian reform 1582", "tab:blue", "o", size=12, offset=0.05),
        "sweden":                 Style("Sweden", "tab:red", "s", size=12, offset=0.15),
    }

    series = {name: build_series(np, name, args.from_year, args.to_year) for name in styles}

    for name, (years, lengths) in series.items():
        irregular = anomalies(years, lengths)
        print(f"{name}: " + (", ".join(f"{y}={n}" for y, n in irregular) or "no irregular years"))

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(9.2, 4.0), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Year (AD)")
    ax.set_ylabel("Days in year")
    ax.set_title("Historic year lengths")

    for name, st in styles.items():
        years, lengths = series[name]
        ax.scatter(years, lengths + st.offset, s=st.size, marker=st.marker, c=st.color, alpha=0.6, label=st.label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)
    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
