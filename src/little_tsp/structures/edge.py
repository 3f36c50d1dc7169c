from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

EdgeLike = Union["Edge", Sequence[int]]


@dataclass(frozen=True, slots=True)
class Edge:
    """
    Immutable directed edge `(u, v)` of the cost graph.

    Parameters
    ----------
    u : int
        Departure vertex (0-based). Addresses a row of the cost matrix.
    v : int
        Arrival vertex (0-based). Addresses a column of the cost matrix.
    """
    u: int
    v: int

    def as_tuple(self) -> Tuple[int, int]:
        """
        Edge endpoints as a `(u, v)` tuple.

        Returns
        -------
        Tuple[int, int]
            The pair ``(u, v)``.
        """
        return self.u, self.v


def as_edge(edge: EdgeLike) -> Edge:
    """
    Coerces an `Edge` or a `(u, v)` pair into an `Edge`.

    Raises
    ------
    ValueError
        If `edge` is not an `Edge` and does not hold exactly two items.
    """
    if isinstance(edge, Edge):
        return edge
    if len(edge) != 2:
        raise ValueError(f"An edge needs exactly two endpoints, got {edge!r}.")
    u, v = edge
    return Edge(int(u), int(v))


def as_edges(edges: Iterable[EdgeLike]) -> List[Edge]:
    """Coerces every item of `edges` with `as_edge`, keeping order and duplicates."""
    return [as_edge(edge) for edge in edges]
