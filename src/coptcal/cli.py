from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import os
import re
import sys
from datetime import date

from coptcal.core.errors import CoptcalError
from coptcal.core.types import CivilDate

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^-?\d+-\d{2}-\d{2}$")


def _default_engine() -> str:
    return os.environ.get("COPTCAL_ENGINE", "standard")


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


def _print_day(info) -> None:
    c = info.coptic
    d = info.civil_date
    print(f"{d}  ->  {c.day} {c.month_name} {c.year}")
    print(f"  month   : {c.month} ({c.month_name}), day {c.day} of {c.days_in_month}")
    print(f"  season  : {c.season}")
    if info.feasts:
        print("  feasts  : " + "; ".join(info.feasts))
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k:<8}: {v}")
    if info.debug:
        print(f"  debug   : {info.debug}")


def cmd_day(argv: list[str]) -> int:
    import coptcal

    p = argparse.ArgumentParser(prog="coptcal day", description="Gregorian -> Coptic day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default=_default_engine())
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = coptcal.day_info(CivilDate.parse(args.date), engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    _print_day(info)
    return 0


def cmd_today(argv: list[str]) -> int:
    # the only place the current date is read
    return cmd_day([date.today().isoformat()] + argv)


def cmd_to_civil(argv: list[str]) -> int:
    import coptcal

    p = argparse.ArgumentParser(prog="coptcal to-civil", description="Coptic -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1..13 (13 = Nesi)")
    p.add_argument("day", type=int)
    p.add_argument("--engine", default=_default_engine())
    args = p.parse_args(argv)

    from coptcal.engines.coptic import coptic_date
    t = coptic_date(args.year, args.month, args.day)
    for d in coptcal.to_gregorian(t, engine=args.engine):
        print(d.isoformat())
    return 0


def _dispatch(argv: list[str]) -> int:
    # Shorthand: `coptcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="coptcal", description="Coptic calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Coptic day label", add_help=False)
    sub.add_parser("today", help="Coptic label of today's local date", add_help=False)
    sub.add_parser("to-civil", help="Coptic -> Gregorian date", add_help=False)
    sub.add_parser("pretty-month", help="Print Coptic/Gregorian month calendars", add_help=False)
    sub.add_parser("new-years", help="Print the Nayrouz table", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "nayrouz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "to-civil":
        return cmd_to_civil(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("coptcal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("coptcal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "coptcal.diagnostics.round_trip",
            "nayrouz-scatter": "coptcal.diagnostics.nayrouz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    if "-v" in argv or "--verbose" in argv:
        argv = [a for a in argv if a not in ("-v", "--verbose")]
        logging.getLogger("coptcal").setLevel(logging.DEBUG)

    try:
        return _dispatch(argv)
    except CoptcalError as e:
        logger.debug("command failed", exc_info=True)
        print(f"coptcal: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
