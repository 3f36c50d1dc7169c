from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
import math

import yaml

from little_tsp.graph.cost_graph import CostGraph
from little_tsp.structures.edge import Edge, as_edges


@dataclass(frozen=True, slots=True)
class CostProblem:
    """
    A cost table together with the decisions of one search-tree node.

    Attributes
    ----------
    graph : CostGraph
        The full pairwise cost table.
    include : List[Edge]
        Edges forced into the tour.
    exclude : List[Edge]
        Edges forbidden from the tour.
    """
    graph: CostGraph
    include: List[Edge] = field(default_factory=list)
    exclude: List[Edge] = field(default_factory=list)


def read_problem_yaml(path: str | Path) -> Dict[str, Any]:
    """
    Reads a YAML problem file into a mapping.

    Raises
    ------
    ValueError
        If the file is not a `.yml`/`.yaml` file, or its top level is not a mapping.
    """
    path_obj = Path(path)
    if path_obj.suffix.lower() not in {".yml", ".yaml"}:
        raise ValueError("Only YAML files are supported.")

    document = yaml.safe_load(path_obj.read_text(encoding="utf-8")) or {}
    if not isinstance(document, dict):
        raise ValueError(f"{path_obj.name}: top level must be a mapping with a 'costs' entry.")
    return document


def parse_costs(raw_costs: Any) -> List[List[float]]:
    """
    Validates the `costs` entry of a problem file.

    Each row is a list with one entry per vertex. Entries are non-negative
    whole numbers, `.inf`, or `~` (null); the last two mark forbidden edges.

    Returns
    -------
    List[List[float]]
        Rows of floats, `math.inf` for forbidden edges.
    """
    if not isinstance(raw_costs, list) or not raw_costs:
        raise ValueError("YAML must contain a non-empty 'costs' list.")

    n = len(raw_costs)
    rows: List[List[float]] = []
    for u, raw_row in enumerate(raw_costs):
        if not isinstance(raw_row, list) or len(raw_row) != n:
            raise ValueError(f"costs[{u}] must be a list of {n} entries.")
        row = []
        for v, entry in enumerate(raw_row):
            if entry is None:
                row.append(math.inf)
                continue
            if isinstance(entry, bool) or not isinstance(entry, (int, float)):
                raise ValueError(f"costs[{u}][{v}] is not a number: {entry!r}")
            if entry < 0:
                raise ValueError(f"costs[{u}][{v}] must be non-negative, got {entry}.")
            if not math.isinf(entry) and not float(entry).is_integer():
                raise ValueError(f"costs[{u}][{v}] must be a whole number, got {entry}.")
            row.append(float(entry))
        rows.append(row)
    return rows


def _parse_edges(raw_edges: Any, key: str) -> List[Edge]:
    if raw_edges is None:
        return []
    if not isinstance(raw_edges, list):
        raise ValueError(f"'{key}' must be a list of [u, v] pairs.")
    return as_edges(raw_edges)


def load_cost_graph(yaml_path: str | Path) -> CostGraph:
    """
    Loads the cost table of a YAML problem file.

    Parameters
    ----------
    yaml_path : str | Path
        Path to a file of the form::

            costs:
              - [.inf, 10, 20]
              - [15, .inf, 5]
              - [25, 30, .inf]

    Returns
    -------
    CostGraph
        The parsed cost table.
    """
    document = read_problem_yaml(yaml_path)
    return CostGraph.from_rows(parse_costs(document.get("costs")))


def load_problem(yaml_path: str | Path) -> CostProblem:
    """
    Loads a cost table plus optional `include` / `exclude` edge lists.

    Returns
    -------
    CostProblem
        The graph and the node decisions found in the file.
    """
    document = read_problem_yaml(yaml_path)
    graph = CostGraph.from_rows(parse_costs(document.get("costs")))
    return CostProblem(
        graph=graph,
        include=_parse_edges(document.get("include"), "include"),
        exclude=_parse_edges(document.get("exclude"), "exclude"),
    )
