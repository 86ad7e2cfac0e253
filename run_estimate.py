#!/usr/bin/env python3
"""Entry point for running resistance distance estimates on synthetic graphs.

Builds a graph from a named synthetic family, runs the push estimator, the
absorbing random walk estimator, or both, and prints one JSON record per
estimate.

Usage:
    python run_estimate.py --graph path --size 5 --s 2 --t 4 --v 0
    python run_estimate.py --graph grid --size 4 --s 0 --t 15 --v 5 --algorithm walk --times 50000
    python run_estimate.py --graph cycle --size 8 --s 0 --t 4 --v 2 --config config.json --verbose
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from resdist.config import DEFAULT_CONFIG, config_from_json, estimate_config_hash
from resdist.graph import (
    GENERATORS,
    InvalidGraphError,
    InvalidParameterError,
    generate_synthetic_graph,
    graph_from_edge_list,
)
from resdist.results import format_error_metrics, record_to_dict, run_and_record
from resdist.walk import WalkDidNotAbsorbError

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate landmark-absorbed resistance distance on a synthetic graph"
    )
    parser.add_argument(
        "--graph",
        choices=sorted(GENERATORS),
        required=True,
        help="Synthetic graph family",
    )
    parser.add_argument(
        "--size",
        type=int,
        required=True,
        help="Family size parameter (nodes, side length, or hypercube dimension)",
    )
    parser.add_argument(
        "--graph-seed",
        type=int,
        default=0,
        help="Seed for randomized graph families",
    )
    parser.add_argument("--s", type=int, required=True, help="First query node")
    parser.add_argument("--t", type=int, required=True, help="Second query node")
    parser.add_argument("--v", type=int, required=True, help="Absorbing landmark node")
    parser.add_argument(
        "--algorithm",
        choices=["push", "walk", "both"],
        default="both",
        help="Estimator to run",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to estimator config JSON file",
    )
    parser.add_argument("--rmax", type=float, default=None, help="Override push rmax")
    parser.add_argument("--times", type=int, default=None, help="Override walks per anchor")
    parser.add_argument("--seed", type=int, default=None, help="Override walk seed")
    parser.add_argument(
        "--ground-truth",
        type=float,
        default=None,
        help="Reference value for absolute/relative error metrics",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = DEFAULT_CONFIG
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            return 1
        config = config_from_json(config_path.read_text())

    try:
        if args.rmax is not None:
            config = replace(config, push=replace(config.push, rmax=args.rmax))
        if args.times is not None:
            config = replace(config, walk=replace(config.walk, times=args.times))
        if args.seed is not None:
            config = replace(config, walk=replace(config.walk, seed=args.seed))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    log.info("Config hash: %s", estimate_config_hash(config))

    edges = generate_synthetic_graph(args.graph, args.size, seed=args.graph_seed)
    graph = graph_from_edge_list(edges)

    algorithms = ["push", "walk"] if args.algorithm == "both" else [args.algorithm]
    for algorithm in algorithms:
        try:
            record = run_and_record(
                algorithm, graph, args.s, args.t, args.v, config,
                ground_truth=args.ground_truth,
            )
        except (InvalidGraphError, InvalidParameterError, WalkDidNotAbsorbError) as exc:
            log.error("%s estimate failed: %s", algorithm, exc)
            return 1

        if record.metrics is not None:
            log.info("%s vs ground truth: %s", algorithm, format_error_metrics(record.metrics))
        print(json.dumps(record_to_dict(record), sort_keys=True))

    return 0


if __name__ == "__main__":
    sys.exit(main())
