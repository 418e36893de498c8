# benchmark.py

import cProfile
import pstats
from collections import Counter
import constants as C
import logger as log
from baseline import naive_search
from point_generator import generate_points, make_rng
from quadtree import Rectangle, create_quad_tree, world_boundary
from stopwatch import Stopwatch, format_duration


class BenchmarkResult:
    """The counts and timings of one quadtree-vs-naive comparison."""
    def __init__(self, total_points, distribution, capacity, query):
        self.total_points = total_points
        self.distribution = distribution
        self.capacity = capacity
        self.query = query
        self.inserted_points = 0
        self.build_seconds = 0.0
        self.quadtree_search_seconds = 0.0
        self.naive_search_seconds = 0.0
        self.quadtree_found = 0
        self.naive_found = 0
        self.results_match = False
        self.tree_depth = 0
        self.node_count = 0

    @property
    def speedup(self):
        """How many times faster the quadtree search ran than the naive scan."""
        if self.quadtree_search_seconds <= 0:
            return float("inf") if self.naive_search_seconds > 0 else 1.0
        return self.naive_search_seconds / self.quadtree_search_seconds

    def __repr__(self):
        return (f"BenchmarkResult(points={self.total_points}, distribution={self.distribution!r}, "
                f"found={self.quadtree_found}, match={self.results_match}, speedup={self.speedup:.1f}x)")


def default_query():
    return Rectangle(C.BENCHMARK_QUERY_X1, C.BENCHMARK_QUERY_Y1, C.BENCHMARK_QUERY_X2, C.BENCHMARK_QUERY_Y2)


def same_points(found_a, found_b):
    """Compares two search results as multisets of coordinates."""
    return Counter((p.x, p.y) for p in found_a) == Counter((p.x, p.y) for p in found_b)


def print_profile(profiler, line_count=None):
    print("\n\n--- PROFILER REPORT ---")
    stats = pstats.Stats(profiler)
    # Sort the stats by the cumulative time spent in each function
    stats.sort_stats(pstats.SortKey.CUMULATIVE)
    stats.print_stats(line_count or C.PROFILER_PRINT_LINE_COUNT)


def run_benchmark(total_points=None, query=None, capacity=None, distribution=None, seed=None,
                  boundary=None, profile=False):
    """
    Populates a flat list and a quadtree with the same random points, then
    times a range search over 'query' with both and checks they agree.
    """
    total_points = C.BENCHMARK_TOTAL_POINTS if total_points is None else total_points
    query = query or default_query()
    capacity = C.QUADTREE_CAPACITY if capacity is None else capacity
    distribution = distribution or C.DEFAULT_POINT_DISTRIBUTION
    boundary = boundary or world_boundary()

    result = BenchmarkResult(total_points, distribution, capacity, query)
    log.log(f"Total number of points in our 2 dimensional space {total_points:,} ({distribution})")

    rng = make_rng(seed)
    quadtree = create_quad_tree(boundary, capacity)

    with Stopwatch() as build_timer:
        # points list represents the flat collection for our naive search
        points = generate_points(distribution, total_points, boundary, rng)
        result.inserted_points = quadtree.insert_many(points)
    result.build_seconds = build_timer.elapsed_seconds
    log.log(f"Elapsed time for populating points and quadtree: {format_duration(result.build_seconds)}")

    if result.inserted_points != total_points:
        log.log(f"WARNING: {total_points - result.inserted_points:,} points fell outside {boundary!r} and were not inserted.")

    profiler = cProfile.Profile() if profile else None
    if profiler:
        profiler.enable()

    with Stopwatch() as search_timer:
        quadtree_found = quadtree.search(query)
    result.quadtree_search_seconds = search_timer.elapsed_seconds
    result.quadtree_found = len(quadtree_found)
    log.log(f"Quadtree search yielded {result.quadtree_found:,} points")
    log.log(f"Elapsed time Quadtree search: {format_duration(result.quadtree_search_seconds)}")

    with Stopwatch() as naive_timer:
        naive_found = naive_search(points, query)
    result.naive_search_seconds = naive_timer.elapsed_seconds
    result.naive_found = len(naive_found)
    log.log(f"Naive search yielded {result.naive_found:,} points")
    log.log(f"Elapsed time Naive search: {format_duration(result.naive_search_seconds)}")

    if profiler:
        profiler.disable()
        print_profile(profiler)

    result.results_match = same_points(quadtree_found, naive_found)
    if not result.results_match:
        log.log(f"ERROR: Quadtree and naive search disagree ({result.quadtree_found} vs {result.naive_found} points).")

    result.tree_depth = quadtree.max_depth()
    result.node_count = quadtree.node_count()
    log.log(f"Tree depth {result.tree_depth}, {result.node_count:,} nodes, speedup x{result.speedup:.1f}")
    return result


def run_benchmark_series(sizes=None, **kwargs):
    """Runs one benchmark per dataset size."""
    sizes = sizes or C.BENCHMARK_SERIES_SIZES
    results = []
    for size in sizes:
        log.log(f"\n--- Benchmark: {size:,} points ---")
        results.append(run_benchmark(total_points=size, **kwargs))
    return results
