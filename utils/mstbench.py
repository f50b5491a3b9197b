## Throughput benchmark for the sequential Kruskal implementation

import logging
import time

from typing import Any, Callable

import networkx as nx

import graphgen
import nx_utils
from kruskal import Graph, kruskal_mst

logger = logging.getLogger(__name__)


def time_kruskal(graph: Graph, reps: int) -> dict[str, Any]:
    """Rebuild the forest `reps` times over the same graph.

    The edge list is copied outside the timed region on every rep, since
    kruskal_mst sorts it in place.
    """
    compute_times = []
    weights = []

    for _ in range(reps):
        test_graph = Graph(graph.n_vertices, list(graph.edges))

        start = time.perf_counter()
        _, total_weight = kruskal_mst(test_graph)
        compute_times.append(time.perf_counter() - start)

        weights.append(total_weight)

    metrics = {
        'n_vertices': graph.n_vertices,
        'n_edges': len(graph.edges),
        'compute_times': compute_times,
        'avg_compute_time': sum(compute_times)/len(compute_times) if compute_times else 0.0,
        'min_compute_time': min(compute_times, default=0.0),
    }

    if weights and min(weights) == max(weights):
        metrics['weight'] = weights[0]
    elif weights:
        logger.error(f'Inconsistent MST weights across reps: {sorted(set(weights))}')

    return metrics


def print_stats(all_metrics: dict[str, dict[str, Any]]) -> None:
    for (test, metrics) in all_metrics.items():
        print(f'{test} ({len(metrics["compute_times"])} runs, '
              f'V={metrics["n_vertices"]}, E={metrics["n_edges"]}):')

        if 'weight' not in metrics:
            print('  Inconsistent result on this test')
            continue

        print(f'  Weight = {metrics["weight"]}')
        print(f'  Avg compute time = {metrics["avg_compute_time"]:0.6f}s,  '
              f'Min compute time = {metrics["min_compute_time"]:0.6f}s')
        print()


def default_tests(seed: int, min_weight: int, max_weight: int) -> dict[str, Callable[[], Graph]]:
    def create_nx_test(g_fxn: Callable[..., nx.Graph], g_args: tuple) -> Callable[[], Graph]:
        def inner():
            return nx_utils.from_nx_graph(g_fxn(*g_args),
                                          nx_utils.arbitrary_weight(min_weight, max_weight, seed))

        return inner

    return {
        'Random multigraph n=1000 m=5000':
            lambda: graphgen.random_graph(1000, 5000, min_weight, max_weight, seed),

        '2-degree Circulant n=50000':
            create_nx_test(nx.circulant_graph, (50000, [1, 2])),

        'Binomial Graph, p=8e-5 n=35000':
            create_nx_test(nx.fast_gnp_random_graph, (35000, 8e-5, seed)),
    }


if __name__ == '__main__':
    import argparse

    from logging_config import setup_logging

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark the Kruskal MST implementation')
    parser.add_argument('-r', '--reps',
                        default=20,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=100,
                        help='the maximum edge weight in random graphs',
                        type=int)
    parser.add_argument('--only-default',
                        action='store_true',
                        help='only run the 1000 vertex / 5000 edge random graph')
    parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args()
    setup_logging(args.verbose)

    tests = default_tests(args.seed, args.min_weight, args.max_weight)
    if args.only_default:
        tests = dict(list(tests.items())[:1])

    all_metrics = {}

    for (test_name, test_gen) in tests.items():
        logger.info(f'Generating graph for test "{test_name}"...')
        graph = test_gen()

        logger.info(f'  Running {args.reps} reps on test "{test_name}"...')
        all_metrics[test_name] = time_kruskal(graph, args.reps)

    print_stats(all_metrics)
