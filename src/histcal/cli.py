from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from .core.errors import HistcalError
from .core.types import HistoricDate, HistoricEra


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


def _iso(mjd: int) -> str:
    from .core.time import from_linear_day
    try:
        return from_linear_day(mjd).isoformat()
    except ValueError:
        return "out of datetime range"


def cmd_to_day(args: argparse.Namespace) -> int:
    import histcal

    d = HistoricDate.parse(args.date)
    mjd = histcal.to_linear_day(d, history=args.history)
    print(f"{d}  ->  MJD {mjd}  (proleptic Gregorian {_iso(mjd)})")
    return 0


def cmd_from_day(args: argparse.Namespace) -> int:
    import histcal

    d = histcal.from_linear_day(args.mjd, history=args.history)
    print(f"MJD {args.mjd}  ->  {d}")
    return 0


def cmd_from_date(args: argparse.Namespace) -> int:
    import histcal
    from .core.time import to_linear_day
    from datetime import date

    g = date.fromisoformat(args.date)
    mjd = to_linear_day(g)
    print(f"{g.isoformat()}  ->  MJD {mjd}  ->  {histcal.from_linear_day(mjd, history=args.history)}")
    return 0


def cmd_valid(args: argparse.Namespace) -> int:
    import histcal

    d = HistoricDate.parse(args.date)
    ok = histcal.is_valid(d, history=args.history)
    print(f"{d}: {'valid' if ok else 'invalid'} in {args.history}")
    return 0 if ok else 1


def cmd_year_length(args: argparse.Namespace) -> int:
    import histcal

    n = histcal.year_length(HistoricEra(args.era), args.year, history=args.history)
    if n < 0:
        print(f"{args.era}-{args.year}: not representable in {args.history}", file=sys.stderr)
        return 1
    print(n)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    import histcal

    for name in histcal.list_histories():
        print(f"{name:<24} {histcal.get_history(name)!r}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="histcal", description="Historic Julian/Gregorian calendar conversions.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    def history_opt(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--history", default="first-gregorian-reform", help="Registered history name (see 'list').")

    p_to = sub.add_parser("to-day", help="Historic date -> linear day (MJD)")
    p_to.add_argument("date", help="[AD-|BC-]YYYY-MM-DD")
    history_opt(p_to)

    p_from = sub.add_parser("from-day", help="Linear day (MJD) -> historic date")
    p_from.add_argument("mjd", type=int)
    history_opt(p_from)

    p_fd = sub.add_parser("from-date", help="Proleptic Gregorian YYYY-MM-DD -> historic date")
    p_fd.add_argument("date", help="YYYY-MM-DD")
    history_opt(p_fd)

    p_valid = sub.add_parser("valid", help="Check whether a historic date existed")
    p_valid.add_argument("date", help="[AD-|BC-]YYYY-MM-DD")
    history_opt(p_valid)

    p_len = sub.add_parser("year-length", help="Number of days in a historic year")
    p_len.add_argument("era", nargs="?", choices=("AD", "BC"), default="AD")
    p_len.add_argument("year", type=int)
    history_opt(p_len)

    sub.add_parser("list", help="List registered histories")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "cutovers", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "histcal.diagnostics.round_trip",
            "cutovers": "histcal.diagnostics.cutover_table",
            "year-lengths": "histcal.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    commands = {
        "to-day": cmd_to_day,
        "from-day": cmd_from_day,
        "from-date": cmd_from_date,
        "valid": cmd_valid,
        "year-length": cmd_year_length,
        "list": cmd_list,
    }
    try:
        return commands[args.cmd](args)
    except (HistcalError, ValueError, KeyError) as e:
        print(f"histcal: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
