from __future__ import annotations

import argparse
import random

import coptcal
from coptcal.core.types import CivilDate


def random_date(start: CivilDate, end: CivilDate) -> CivilDate:
    return start.shift(random.randint(0, end - start))


def roundtrip_test(engine: str, N: int, start: CivilDate, end: CivilDate, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        info = coptcal.day_info(d0, engine=engine, debug=False)
        t = info.coptic

        back = coptcal.to_gregorian(t, engine=engine)
        if back != [d0]:
            failures += 1
            print("\nFAIL")
            print("engine:", engine)
            print("d0:", d0)
            print("coptic:", t)
            print("back:", back)
            print("day_info(debug=True):", coptcal.day_info(d0, engine=engine, debug=True))
            if failures >= max_failures:
                return failures

    return failures


def continuity_test(start: CivilDate, end: CivilDate, *, max_failures: int) -> int:
    """Consecutive civil days advance one Coptic day or open the next month."""
    failures = 0
    prev = coptcal.convert_to_coptic(start)
    for k in range(1, end - start + 1):
        d = start.shift(k)
        cur = coptcal.convert_to_coptic(d)
        same_month = (cur.year, cur.month, cur.day) == (prev.year, prev.month, prev.day + 1)
        if prev.month == 13:
            rollover = (cur.year, cur.month, cur.day) == (prev.year + 1, 1, 1)
        else:
            rollover = (cur.year, cur.month, cur.day) == (prev.year, prev.month + 1, 1)
        if not (same_month or rollover):
            failures += 1
            print(f"\nFAIL continuity at {d}: {prev} -> {cur}")
            if failures >= max_failures:
                return failures
        prev = cur
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> coptic -> gregorian.")
    p.add_argument("--engines", type=str, default="standard,basic", help="Comma-separated engine list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per engine.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    p.add_argument("--continuity", action="store_true", help="Also walk every day from start to end.")
    args = p.parse_args(argv)

    engines = [x.strip() for x in args.engines.split(",") if x.strip()]
    start = CivilDate.parse(args.start)
    end = CivilDate.parse(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for eng in engines:
        print(f"Testing {eng} ...")
        total_fail += roundtrip_test(eng, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if args.continuity:
        print("Walking day by day ...")
        total_fail += continuity_test(start, end, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
