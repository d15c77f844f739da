from __future__ import annotations

import argparse

import coptcal
from coptcal.core.types import CivilDate


def mmdd(d: CivilDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Nayrouz (Coptic New Year) table: civil date, Coptic year and its length."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in the Nayrouz column (default: mmdd).",
    )
    args = p.parse_args(argv)

    def fmt(d: CivilDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Nayrouz", "Coptic", "Days", "Nesi"]
    colw = [5, 10, 6, 4, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        ny = coptcal.new_year_day(Y, as_date=False)
        d = ny["civil"]
        length = coptcal.compute_coptic_new_year(Y + 1) - d
        nesi = coptcal.month_bounds(ny["coptic_year"], 13, as_date=False)
        nesi_days = nesi["last"] - nesi["first"] + 1
        row = [str(Y), fmt(d), str(ny["coptic_year"]), str(length), str(nesi_days)]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
