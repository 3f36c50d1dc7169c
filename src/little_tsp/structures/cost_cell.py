from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple
import math

from little_tsp.structures.edge import Edge


@total_ordering
@dataclass(slots=True, eq=False)
class CostCell:
    """
    A single cost-matrix cell: a finite non-negative integer or an infinite
    (forbidden) marker, tagged with the original edge it stands for.

    Cells are mutable because reduction subtracts from them in place. The
    infinite flag is absorbing: nothing clears it once it is set.

    Attributes
    ----------
    value : int
        The finite cost. Meaningless while `is_infinite` is True.
    edge : Optional[Edge]
        The original (uncondensed) edge this cell represents, or None for a
        default-initialised cell.
    is_infinite : bool
        True if the cell is forbidden.
    """
    value: int = 0
    edge: Optional[Edge] = None
    is_infinite: bool = False

    __hash__ = None  # mutable

    @classmethod
    def infinite(cls, edge: Optional[Edge] = None) -> CostCell:
        """Builds a forbidden cell for `edge`."""
        return cls(value=0, edge=edge, is_infinite=True)

    @classmethod
    def from_cost(cls, cost: float, edge: Optional[Edge] = None) -> CostCell:
        """
        Builds a cell from a raw cost as returned by a cost source.

        Parameters
        ----------
        cost : float
            A finite cost, or `math.inf` for a forbidden edge.
        edge : Optional[Edge]
            The original edge the cell represents.

        Returns
        -------
        CostCell
            An infinite cell if `cost` is `+inf`, otherwise a finite cell
            holding `int(cost)`.

        Raises
        ------
        ValueError
            If `cost` is `-inf`, NaN, or a finite number with a fractional part.
        """
        if math.isinf(cost) and cost > 0:
            return cls.infinite(edge)
        if not math.isfinite(cost) or not float(cost).is_integer():
            raise ValueError(f"Cost of edge {edge} must be a whole number or +inf, got {cost}.")
        return cls(value=int(cost), edge=edge)

    def subtract(self, delta: CostCell) -> None:
        """
        Decreases the value by `delta.value`; infinite cells are left as they are.

        Raises
        ------
        ValueError
            If `delta` itself is infinite.
        """
        if delta.is_infinite:
            raise ValueError("Cannot subtract an infinite cell.")
        if self.is_infinite:
            return
        self.value -= delta.value

    def set_infinite(self) -> None:
        self.is_infinite = True

    def copy(self) -> CostCell:
        return CostCell(value=self.value, edge=self.edge, is_infinite=self.is_infinite)

    def as_float(self) -> float:
        """The cell as a plain number, `math.inf` when infinite."""
        return math.inf if self.is_infinite else float(self.value)

    def _key(self) -> Tuple[bool, int]:
        # Infinite cells all compare equal regardless of their stale value.
        return (True, 0) if self.is_infinite else (False, self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostCell):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: CostCell) -> bool:
        if not isinstance(other, CostCell):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return "inf" if self.is_infinite else str(self.value)
