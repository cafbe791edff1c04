from __future__ import annotations

import argparse
from typing import List, Optional

import histcal
from histcal.core.time import MIN_LINEAR_DAY


def format_rows(history: histcal.History) -> List[str]:
    rows = [f"{'start (MJD)':>12}  {'from':<10} {'to':<10} {'last old date':<16} {'first new date':<16} skipped"]
    for ev in history.events:
        start = "-inf" if ev.start == MIN_LINEAR_DAY else str(ev.start)
        if ev.start == MIN_LINEAR_DAY:
            before, at = "-", "-"
        else:
            before, at = str(ev.date_before_cutover), str(ev.date_at_cutover)
        rows.append(
            f"{start:>12}  {str(ev.previous):<10} {str(ev.algorithm):<10} {before:<16} {at:<16} {ev.skipped_days}"
        )
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the cutover table of one or more histories.")
    p.add_argument("histories", nargs="*", help="History names (default: all registered).")
    args = p.parse_args(argv)

    names = args.histories or histcal.list_histories()
    for name in names:
        h = histcal.get_history(name)
        print(f"{name}: {h!r}")
        for row in format_rows(h):
            print("  " + row)
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
