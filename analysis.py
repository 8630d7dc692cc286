from __future__ import annotations

import argparse
import logging

from towers.subset_iterator import SubsetIterator
from towers.utils import parse_csv_list


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two Towers 穷举实验与子集枚举工具")
    parser.add_argument("--verbose", action="store_true", help="输出调试日志")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sweep = sub.add_parser("sweep", help="对一组 n 运行穷举搜索并记录耗时")
    p_sweep.add_argument("--config", default="configs/sweep.yaml")
    p_sweep.add_argument("--n-values", default=None, help="逗号分隔，如 4,8,12")
    p_sweep.add_argument("--n-min", type=int, default=None)
    p_sweep.add_argument("--n-max", type=int, default=None)
    p_sweep.add_argument("--repeats", type=int, default=None)
    p_sweep.add_argument("--output-root", default=None)
    p_sweep.add_argument("--with-plots", dest="with_plots", action="store_true")
    p_sweep.add_argument("--no-plots", dest="with_plots", action="store_false")
    p_sweep.set_defaults(with_plots=None)

    p_plot = sub.add_parser("plot", help="基于 sweep 结果 CSV 重绘图")
    p_plot.add_argument("--sweep-dir", required=True)

    p_subsets = sub.add_parser("subsets", help="按枚举顺序打印 [1..size] 的全部子集")
    p_subsets.add_argument("--size", type=int, default=8)

    return parser


def cmd_sweep(args: argparse.Namespace) -> None:
    from towers.sweep import run_sweep

    overrides: dict[str, object] = {}
    if args.n_values is not None:
        overrides["sweep.n_values"] = parse_csv_list(args.n_values, cast=int)
    if args.n_min is not None:
        overrides["sweep.n_min"] = args.n_min
    if args.n_max is not None:
        overrides["sweep.n_max"] = args.n_max
    if args.repeats is not None:
        overrides["sweep.repeats"] = args.repeats
    if args.output_root is not None:
        overrides["output.root"] = args.output_root
    if args.with_plots is not None:
        overrides["output.generate_plots"] = bool(args.with_plots)

    run_dir = run_sweep(config_path=args.config, overrides=overrides)
    print(f"穷举实验完成: {run_dir}")


def cmd_plot(args: argparse.Namespace) -> None:
    from towers.visualize import plot_from_sweep_dir

    paths = plot_from_sweep_dir(args.sweep_dir)
    print("绘图完成:")
    for path in paths:
        print(path)


def cmd_subsets(args: argparse.Namespace) -> None:
    for subset in SubsetIterator(range(1, args.size + 1)):
        print(subset)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "subsets" and args.size < 0:
        parser.error(f"size 必须 >= 0，当前为 {args.size}")

    if args.command == "sweep":
        cmd_sweep(args)
    elif args.command == "plot":
        cmd_plot(args)
    elif args.command == "subsets":
        cmd_subsets(args)
    else:
        parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main()
