from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from little_tsp.structures.cost_cell import CostCell
from little_tsp.structures.index_map import CondensedIndexMap
from little_tsp.structures.matrix import Matrix


class CostVector(ABC):
    """
    A live view over one condensed row or column of a cost store.

    Positions are condensed indices `0 .. len(view) - 1`. Items are the
    stored cells themselves, so mutating them mutates the matrix. Iteration
    is lazy and restartable: every `iter()` starts again at position 0.
    """
    __slots__ = ("_store", "_index", "_index_map")

    def __init__(self, store: Matrix[CostCell], index: int, index_map: CondensedIndexMap):
        self._store = store
        self._index = index
        self._index_map = index_map

    @property
    def index(self) -> int:
        """The condensed row/column number this view is fixed to."""
        return self._index

    @property
    def original_index(self) -> int:
        """The original vertex number this view is fixed to."""
        return self._index_map.to_original(self._index)

    @abstractmethod
    def _position(self, cell_num: int) -> Tuple[int, int]:
        """Store coordinates of the `cell_num`-th cell of the view."""

    @abstractmethod
    def __len__(self) -> int: ...

    def __getitem__(self, cell_num: int) -> CostCell:
        if cell_num < 0 or cell_num >= len(self):
            raise IndexError(f"{type(self).__name__} position {cell_num} out of range for size {len(self)}")
        return self._store[self._position(cell_num)]

    def __iter__(self) -> Iterator[CostCell]:
        for cell_num in range(len(self)):
            yield self._store[self._position(cell_num)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostVector):
            return NotImplemented
        return type(self) is type(other) and self._store is other._store and self._index == other._index

    def __hash__(self) -> int:
        return hash((type(self).__name__, id(self._store), self._index))

    def min_position(self) -> Optional[int]:
        """
        Condensed position of the smallest cell, first occurrence on ties.

        Returns
        -------
        Optional[int]
            The position, or None for an empty view.
        """
        best_pos: Optional[int] = None
        best_cell: Optional[CostCell] = None
        for pos, cell in enumerate(self):
            if best_cell is None or cell < best_cell:
                best_pos, best_cell = pos, cell
        return best_pos

    def min_cell(self) -> Optional[CostCell]:
        """The smallest cell of the view (a live reference), or None if empty."""
        pos = self.min_position()
        return None if pos is None else self[pos]

    def __repr__(self) -> str:
        cells = " ".join(str(cell) for cell in self)
        return f"{type(self).__name__}(original={self.original_index}, [{cells}])"


class CostRow(CostVector):
    """A condensed row: fixed row, condensed columns vary."""
    __slots__ = ()

    def _position(self, cell_num: int) -> Tuple[int, int]:
        return self._index, cell_num

    def __len__(self) -> int:
        return self._store.num_cols


class CostColumn(CostVector):
    """A condensed column: fixed column, condensed rows vary."""
    __slots__ = ()

    def _position(self, cell_num: int) -> Tuple[int, int]:
        return cell_num, self._index

    def __len__(self) -> int:
        return self._store.num_rows
