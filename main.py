#main.py

import argparse
import constants as C
import logger
from benchmark import run_benchmark, run_benchmark_series
from graphing_manager import GraphingManager
from stopwatch import Stopwatch


def build_parser():
    parser = argparse.ArgumentParser(description="Quadtree range search: benchmark and interactive viewer.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub, default_capacity):
        sub.add_argument("--capacity", type=int, default=default_capacity,
                         help="points a node holds before it subdivides")
        sub.add_argument("--distribution", choices=C.POINT_DISTRIBUTIONS, default=C.DEFAULT_POINT_DISTRIBUTION)
        sub.add_argument("--seed", type=int, default=None)

    bench = subparsers.add_parser("benchmark", help="time quadtree search against a naive scan")
    bench.add_argument("--points", type=int, default=C.BENCHMARK_TOTAL_POINTS)
    bench.add_argument("--profile", action="store_true", help="print a cProfile report of the search phase")
    add_common(bench, C.QUADTREE_CAPACITY)

    series = subparsers.add_parser("series", help="benchmark several dataset sizes and save graphs")
    series.add_argument("--sizes", type=int, nargs="+", default=list(C.BENCHMARK_SERIES_SIZES))
    series.add_argument("--output-dir", default=C.GRAPH_OUTPUT_DIR)
    series.add_argument("--show", action="store_true", help="display the graphs after saving")
    add_common(series, C.QUADTREE_CAPACITY)

    view = subparsers.add_parser("view", help="open the interactive viewer")
    view.add_argument("--points", type=int, default=C.VIEWER_POINT_COUNT)
    add_common(view, C.VIEWER_CAPACITY)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.capacity < 1:
        logger.log(f"ERROR: --capacity must be at least 1, got {args.capacity}")
        return 2
    counts = args.sizes if args.command == "series" else [args.points]
    if any(count < 0 for count in counts):
        logger.log(f"ERROR: point counts must not be negative, got {counts}")
        return 2

    stopwatch = Stopwatch().start()
    logger.set_stopwatch(stopwatch)
    logger.log(f"--- {args.command.capitalize()} Start ---")

    if args.command == "benchmark":
        result = run_benchmark(total_points=args.points, capacity=args.capacity,
                               distribution=args.distribution, seed=args.seed, profile=args.profile)
        status = 0 if result.results_match else 1
    elif args.command == "series":
        results = run_benchmark_series(args.sizes, capacity=args.capacity,
                                       distribution=args.distribution, seed=args.seed)
        graphs = GraphingManager()
        graphs.add_results(results)
        graphs.generate_and_save_graphs(args.output_dir, show=args.show)
        status = 0 if all(r.results_match for r in results) else 1
    else:
        # pygame is only needed for the viewer.
        from viewer import run_viewer
        run_viewer(args.points, args.capacity, args.distribution, args.seed)
        status = 0

    logger.log(f"--- {args.command.capitalize()} Exit ---")
    return status


if __name__ == '__main__':
    raise SystemExit(main())
