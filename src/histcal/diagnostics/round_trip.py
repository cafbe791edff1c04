from __future__ import annotations

import argparse
import random
from typing import List

import histcal


def parse_histories(s: str) -> List[str]:
    # "sweden,first-gregorian-reform" -> ["sweden", ...]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    name: str,
    N: int,
    start: int,
    end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Random linear days -> historic date -> linear day, plus a check that
    consecutive days never run backwards.
    """
    random.seed(seed)
    h = histcal.get_history(name)
    failures = 0

    for _ in range(N):
        x = random.randint(start, end)
        d = h.from_linear_day(x)
        back = h.to_linear_day(d) if h.is_valid(d) else None
        nxt = h.from_linear_day(x + 1)

        if back != x or not d < nxt:
            failures += 1
            print("\nFAIL")
            print("history:", name)
            print("day:", x)
            print("date:", d, "next:", nxt)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: linear day -> historic date -> linear day.")
    p.add_argument("--histories", type=str, default="proleptic-gregorian,proleptic-julian,first-gregorian-reform,sweden",
                   help="Comma-separated history list.")
    p.add_argument("--N", type=int, default=20000, help="Trials per history.")
    p.add_argument("--start", type=int, default=-1_000_000, help="First linear day (MJD).")
    p.add_argument("--end", type=int, default=1_000_000, help="Last linear day (MJD).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per history.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for name in parse_histories(args.histories):
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(name, N=args.N, start=args.start, end=args.end, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
