from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import ethiocal


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        e = ethiocal.gregorian_to_ethiopian(d0)
        back = ethiocal.ethiopian_to_gregorian(e)
        if back != d0 or e.weekday != (d0.isoweekday() % 7):
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("eth:", e, "weekday:", e.weekday)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> ethiopian -> gregorian.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="0008-08-27", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    failures = roundtrip_test(
        args.N, parse_date(args.start), parse_date(args.end), args.seed,
        max_failures=args.max_failures,
    )
    print(f"round-trip: {args.N} trials, {failures} failures")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
