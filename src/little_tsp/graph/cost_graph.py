from __future__ import annotations
from typing import List, Protocol, Sequence, runtime_checkable
import math

import numpy as np

from little_tsp.structures.edge import Edge


@runtime_checkable
class CostSource(Protocol):
    """
    Anything that can price a directed edge of a complete graph.

    `cost(u, v)` must return a finite non-negative number, or `math.inf` for
    an edge that can never be used, for every `0 <= u, v < num_vertices`.
    Symmetry is not assumed.
    """
    @property
    def num_vertices(self) -> int: ...

    def cost(self, u: int, v: int) -> float: ...


class CostGraph:
    """
    A dense, square cost table backed by a NumPy array.

    Infinite entries mark forbidden edges. Finite entries are exposed as
    Python integers.
    """
    __slots__ = ("_costs",)

    def __init__(self, costs: np.ndarray | Sequence[Sequence[float]]):
        array = np.array(costs, dtype=np.float64)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Cost table must be square, got shape {array.shape}.")
        if np.isnan(array).any():
            raise ValueError("Cost table must not contain NaN.")
        if np.isneginf(array).any():
            raise ValueError("Cost table must not contain -inf.")
        finite = array[np.isfinite(array)]
        if (finite != np.round(finite)).any():
            raise ValueError("Finite costs must be whole numbers.")
        array.setflags(write=False)
        self._costs = array

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> CostGraph:
        """
        Builds a graph from a list of rows.

        Parameters
        ----------
        rows : Sequence[Sequence[float]]
            `rows[u][v]` is the cost of travelling from `u` to `v`. Use
            `math.inf` (or `float("inf")`) for forbidden edges.

        Returns
        -------
        CostGraph
            The cost table.
        """
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("Every row of the cost table must have one entry per vertex.")
        return cls(rows if len(rows) else np.zeros((0, 0)))

    @property
    def num_vertices(self) -> int:
        return int(self._costs.shape[0])

    def cost(self, u: int, v: int) -> float:
        """
        Returns the cost of edge `(u, v)`: an `int`, or `math.inf` if forbidden.

        Raises
        ------
        IndexError
            If either vertex is outside `[0, num_vertices)`.
        """
        n = self.num_vertices
        if u < 0 or v < 0 or u >= n or v >= n:
            raise IndexError(f"Edge ({u}, {v}) is out of range for {n} vertices")
        value = self._costs[u, v]
        if np.isinf(value):
            return math.inf
        return int(value)

    def self_loops(self) -> List[Edge]:
        """
        The diagonal edges `(i, i)`.

        A tour never uses them, so callers usually pass them in the exclude set.
        """
        return [Edge(i, i) for i in range(self.num_vertices)]

    def as_array(self) -> np.ndarray:
        """A read-only view of the underlying float64 table."""
        return self._costs

    def __repr__(self) -> str:
        return f"CostGraph(num_vertices={self.num_vertices})"
