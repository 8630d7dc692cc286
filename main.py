from __future__ import annotations

import argparse
import sys

from towers.report import stack_line
from towers.selector import build_towers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Two Towers: 将面积为 1..n 的方块分成高度尽量接近的两座塔",
    )
    parser.add_argument("n", type=int, help="方块总数")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.n < 0:
        parser.error(f"n 必须 >= 0，当前为 {args.n}")

    towers = build_towers(args.n)

    print(f"There are {args.n} total blocks.")
    print(f"The half height (h/2) is {towers.half_height!r}")

    for label, record in (("best", towers.best), ("second best", towers.second_best)):
        line, ok = stack_line(label, record)
        print(line)
        if not ok:
            return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
