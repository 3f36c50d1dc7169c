#!/usr/bin/env python3
"""
Build and reduce the cost matrix of a single branch-and-bound node.

The problem file is YAML with a square `costs` table and optional `include` /
`exclude` edge lists. Edges given on the command line are added to the ones
found in the file.

Examples:
  - python -m little_tsp problem.yaml
  - python -m little_tsp problem.yaml --exclude-diagonal --include 0 1
  - python -m little_tsp -vv --json problem.yaml --exclude 2 0
"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

# --- Local Application Imports ---
from little_tsp.cost_matrix import CostMatrix, CostMatrixConfig
from little_tsp.errors import InfeasibleSubproblemError, NotAvailableError
from little_tsp.graph import load_problem
from little_tsp.structures import Edge
from little_tsp.utils.logging_config import setup_logger

logger = logging.getLogger(__name__)


def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None, json_output: bool = False) -> None:
    """
    Configures the package logger from the `-v` count: 0 WARNING, 1 INFO, 2+ DEBUG.

    With `json_output` the console handler writes to stderr so stdout holds
    only the JSON document.
    """
    level_map = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    log_level = level_map.get(min(verbose_level, 2), logging.INFO)
    stream = sys.stderr if json_output else sys.stdout
    setup_logger("little_tsp", level=log_level, log_file=log_file, stream=stream)


def format_matrix(cost_matrix: CostMatrix) -> str:
    """
    Renders the condensed matrix as text, labelled with original vertex numbers.
    """
    dense = cost_matrix.as_dense()
    labels = [str(v) for v in cost_matrix.available_columns()]
    cells = [["inf" if value == float("inf") else str(int(value)) for value in row] for row in dense]
    width = max([len(label) for label in labels] + [len(c) for row in cells for c in row] + [1])

    lines = [" " * (width + 3) + " ".join(label.rjust(width) for label in labels)]
    for u, row in zip(cost_matrix.available_rows(), cells):
        lines.append(f"{str(u).rjust(width)} | " + " ".join(c.rjust(width) for c in row))
    return "\n".join(lines)


def _edges(raw: Optional[List[List[int]]]) -> List[Edge]:
    return [Edge(u, v) for u, v in (raw or [])]


def main(argv=None) -> int:
    """
    Parses command-line arguments, reduces the node's matrix and prints the result.
    """
    parser = argparse.ArgumentParser(description="Condense and reduce a TSP cost matrix.")
    parser.add_argument("problem", help="Path to a YAML problem file with a 'costs' table.")
    parser.add_argument("--include", nargs=2, type=int, action="append", metavar=("U", "V"),
                        help="Force edge U->V into the tour (repeatable).")
    parser.add_argument("--exclude", nargs=2, type=int, action="append", metavar=("U", "V"),
                        help="Forbid edge U->V (repeatable).")
    parser.add_argument("--exclude-diagonal", action="store_true",
                        help="Forbid every self loop (i, i).")
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of human-readable text.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", default=None,
                        help="Append log records to this file.")

    cli_args = parser.parse_args(argv)
    setup_cli_logging(cli_args.verbose, cli_args.log_file, json_output=cli_args.json)

    try:
        problem = load_problem(cli_args.problem)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load problem: {e}")
        if not cli_args.json:
            print(f"Failed to load problem YAML: {e}", file=sys.stderr)
        return 2

    include = problem.include + _edges(cli_args.include)
    exclude = problem.exclude + _edges(cli_args.exclude)
    if cli_args.exclude_diagonal:
        exclude += problem.graph.self_loops()
    logger.info(f"Loaded {problem.graph.num_vertices} vertices; include={len(include)}, exclude={len(exclude)}")

    config = CostMatrixConfig(verbose=cli_args.verbose >= 2)
    try:
        cost_matrix = CostMatrix(problem.graph, include=include, exclude=exclude, config=config)
        bound = cost_matrix.reduce()
    except (ValueError, NotAvailableError, InfeasibleSubproblemError) as e:
        logger.error(f"Reduction failed: {e}")
        if not cli_args.json:
            print(f"Reduction failed: {e}", file=sys.stderr)
        return 2

    if cli_args.json:
        dense = cost_matrix.as_dense()
        print(json.dumps({
            "size": cost_matrix.size,
            "rows": list(cost_matrix.available_rows()),
            "columns": list(cost_matrix.available_columns()),
            "matrix": [[None if value == float("inf") else int(value) for value in row] for row in dense],
            "bound_increment": bound,
        }, indent=2))
    else:
        print(format_matrix(cost_matrix))
        print(f"Bound increment: {bound}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
