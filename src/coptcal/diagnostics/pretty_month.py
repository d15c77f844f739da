from __future__ import annotations

import argparse

import coptcal
from coptcal.core.types import CivilDate
from coptcal.core.time import days_in_civil_month


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def weeks_from(first: CivilDate, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.jdn() % 7  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def coptic_month_calendar(engine: str, Y: int, M: int) -> list[str]:
    rows = coptcal.days_in_month(Y, M, engine=engine)
    days = []
    feasts = []
    for r in rows:
        d = r["date"]
        mark = "*" if r["feasts"] else ""
        days.append((f"{r['day']:2d}{mark}", f"{d.month:02d}-{d.day:02d}"))
        for name in r["feasts"]:
            feasts.append(f"  {r['day']:2d}  {name}")

    b = coptcal.month_bounds(Y, M, as_date=False)
    title = f"{engine} Coptic month  {b['name']} {Y}  ({b['first']} .. {b['last']})"
    print_grid(title, weeks_from(b["first"], days))
    if feasts:
        print("Feasts (*):")
        print("\n".join(feasts))
        print()
    return feasts


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    first = CivilDate(gy, gm, 1)
    days = []
    for k in range(days_in_civil_month(gy, gm)):
        info = coptcal.day_info(first.shift(k), engine=engine)
        t = info.coptic
        mark = "*" if info.feasts else ""
        days.append((f"{k + 1:2d}{mark}", f"{t.month:02d}-{t.day:02d}"))

    title = f"{engine} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, weeks_from(first, days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Coptic-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--engine", default="standard", help="standard|basic (default: standard)")
    p.add_argument("--coptic", nargs=2, type=int, metavar=("Y", "M"),
                   help="Coptic month to print: Y M (e.g. 1743 1)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 9)")
    args = p.parse_args(argv)

    if not args.coptic and not args.greg:
        # sensible default demo
        coptic_month_calendar(args.engine, Y=1743, M=1)
        gregorian_month_calendar(args.engine, gy=2026, gm=9)
        return 0

    if args.coptic:
        Y, M = args.coptic
        coptic_month_calendar(args.engine, Y=Y, M=M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
