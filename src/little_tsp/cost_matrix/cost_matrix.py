from __future__ import annotations
from typing import Iterable, Iterator, Optional, Tuple, Union
import logging

import numpy as np

from little_tsp.cost_matrix.config import CostMatrixConfig
from little_tsp.cost_matrix.cost_vector import CostColumn, CostRow, CostVector
from little_tsp.errors import InfeasibleSubproblemError
from little_tsp.graph.cost_graph import CostSource
from little_tsp.structures import CondensedIndexMap, CostCell, Edge, Matrix, as_edge, as_edges
from little_tsp.structures.edge import EdgeLike

logger = logging.getLogger(__name__)

CellKey = Union[Edge, Tuple[int, int]]


class CostMatrix:
    """
    The condensed, reducible cost matrix of one branch-and-bound node.

    Rows and columns whose vertex is already fixed by an included edge are
    dropped ("condensed matrix"); the rest are renumbered `0 .. size - 1` in
    ascending original order. All public accessors take *original* vertex
    numbers and translate them, and every cell carries the original edge it
    stands for, so a caller can go from a cell found by value straight back
    to the graph edge.

    Parameters
    ----------
    cost_source : CostSource
        The full pairwise cost table.
    include : Iterable[EdgeLike]
        Edges forced into the tour. Row `u` and column `v` of each are removed.
    exclude : Iterable[EdgeLike]
        Edges forbidden from the tour. Their cells are marked infinite; edges
        touching a removed row or column are skipped.
    config : Optional[CostMatrixConfig]
        Construction and logging settings.

    Raises
    ------
    ValueError
        If an edge endpoint is out of range, if the include set leaves a
        different number of rows and columns, or (with
        `config.validate_costs`) if a finite cost is negative.
    """
    __slots__ = ("_num_vertices", "_row_map", "_column_map", "_store", "_config")

    def __init__(
        self,
        cost_source: CostSource,
        include: Iterable[EdgeLike] = (),
        exclude: Iterable[EdgeLike] = (),
        config: Optional[CostMatrixConfig] = None,
    ):
        self._config = config if config is not None else CostMatrixConfig()
        n = cost_source.num_vertices
        self._num_vertices = n
        include_edges = as_edges(include)
        exclude_edges = as_edges(exclude)
        self._check_in_range(include_edges, "include")
        self._check_in_range(exclude_edges, "exclude")

        # --- 1. Availability masks from the included edges ---
        row_available = [True] * n
        column_available = [True] * n
        for edge in include_edges:
            row_available[edge.u] = False
            column_available[edge.v] = False

        # --- 2. Condensed index maps and store ---
        self._row_map = CondensedIndexMap.from_mask(row_available, axis="row")
        self._column_map = CondensedIndexMap.from_mask(column_available, axis="column")
        if len(self._row_map) != len(self._column_map):
            raise ValueError(
                f"Include set leaves {len(self._row_map)} rows but {len(self._column_map)} columns; "
                "a vertex cannot be left or entered by two included edges."
            )
        self._store: Matrix[CostCell] = Matrix(factory=CostCell)
        self._store.resize(len(self._row_map), len(self._column_map))

        # --- 3. Populate the available cells with their original edges ---
        for row, i in enumerate(self._row_map.original_indices()):
            for col, j in enumerate(self._column_map.original_indices()):
                cost = cost_source.cost(i, j)
                if self._config.validate_costs and cost < 0:
                    raise ValueError(f"Cost of edge ({i}, {j}) must be non-negative, got {cost}.")
                self._store.set(row, col, CostCell.from_cost(cost, Edge(i, j)))

        # --- 4. Forbid the excluded edges that still have a row and a column ---
        for edge in exclude_edges:
            if not self.is_row_available(edge.u) or not self.is_column_available(edge.v):
                continue
            self.cell(edge.u, edge.v).set_infinite()

        logger.debug(
            f"CostMatrix: {n} vertices condensed to {self.size}x{self.size} "
            f"(include={len(include_edges)}, exclude={len(exclude_edges)})"
        )

    def _check_in_range(self, edges: Iterable[Edge], label: str) -> None:
        n = self._num_vertices
        for edge in edges:
            if not (0 <= edge.u < n and 0 <= edge.v < n):
                raise ValueError(f"{label} edge ({edge.u}, {edge.v}) is out of range for {n} vertices.")

    # ------------------------------------------------------------------
    # Dimensions and availability
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        """The condensed dimension; rows and columns always match."""
        return len(self._row_map)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._store.shape

    @property
    def num_vertices(self) -> int:
        """Number of vertices of the full cost source."""
        return self._num_vertices

    @property
    def config(self) -> CostMatrixConfig:
        return self._config

    def is_row_available(self, row_num: int) -> bool:
        return self._row_map.is_available(row_num)

    def is_column_available(self, column_num: int) -> bool:
        return self._column_map.is_available(column_num)

    def available_rows(self) -> Tuple[int, ...]:
        """Original vertex numbers still present as rows, ascending."""
        return self._row_map.original_indices()

    def available_columns(self) -> Tuple[int, ...]:
        """Original vertex numbers still present as columns, ascending."""
        return self._column_map.original_indices()

    # ------------------------------------------------------------------
    # Access by original vertex numbers
    # ------------------------------------------------------------------
    def cell(self, row_num: int, column_num: int) -> CostCell:
        """
        Returns the live cell for original edge `(row_num, column_num)`.

        Raises
        ------
        NotAvailableError
            If the row or the column was removed by an included edge.
        """
        return self._store.get(
            self._row_map.to_condensed(row_num),
            self._column_map.to_condensed(column_num),
        )

    def __getitem__(self, key: CellKey) -> CostCell:
        edge = as_edge(key)
        return self.cell(edge.u, edge.v)

    def row(self, row_num: int) -> CostRow:
        """View over the condensed row of original vertex `row_num`."""
        return CostRow(self._store, self._row_map.to_condensed(row_num), self._row_map)

    def column(self, column_num: int) -> CostColumn:
        """View over the condensed column of original vertex `column_num`."""
        return CostColumn(self._store, self._column_map.to_condensed(column_num), self._column_map)

    def rows(self) -> Iterator[CostRow]:
        """Yields a view for every condensed row, in condensed order."""
        for condensed in range(len(self._row_map)):
            yield CostRow(self._store, condensed, self._row_map)

    def columns(self) -> Iterator[CostColumn]:
        """Yields a view for every condensed column, in condensed order."""
        for condensed in range(len(self._column_map)):
            yield CostColumn(self._store, condensed, self._column_map)

    def __iter__(self) -> Iterator[CostCell]:
        return self.iter_cells()

    def iter_cells(self) -> Iterator[CostCell]:
        """
        Yields every cell in row-major order of the condensed matrix.

        Each call starts again at condensed position `(0, 0)`.
        """
        yield from self._store

    # ------------------------------------------------------------------
    # Reduction
    # ------------------------------------------------------------------
    def reduce(self) -> int:
        """
        Reduces every row, then every column, by its minimum.

        After reduction each row and column holds at least one zero. The sum
        of all minima is returned; it is an additive lower-bound contribution
        for every tour consistent with this node. Reducing an already reduced
        matrix returns 0.

        Returns
        -------
        int
            The total amount subtracted from the matrix.

        Raises
        ------
        InfeasibleSubproblemError
            If a row or column has no finite cell left.
        """
        row_total = sum(self._reduce_vector(cost_row) for cost_row in self.rows())
        column_total = sum(self._reduce_vector(cost_column) for cost_column in self.columns())
        total = row_total + column_total

        log = logger.info if self._config.verbose else logger.debug
        log(f"CostMatrix reduced by {total} (rows={row_total}, columns={column_total}) on {self.size}x{self.size}")
        return total

    def _reduce_vector(self, vector: CostVector) -> int:
        min_cell = vector.min_cell()
        if min_cell is None:
            return 0
        if min_cell.is_infinite:
            kind = "row" if isinstance(vector, CostRow) else "column"
            raise InfeasibleSubproblemError(
                f"Every cell of {kind} {vector.original_index} is infinite; the subproblem is infeasible."
            )

        # The minimum cell is itself one of the cells being decremented.
        minimum = min_cell.copy()
        for cell in vector:
            cell.subtract(minimum)

        if self._config.verbose:
            kind = "row" if isinstance(vector, CostRow) else "column"
            logger.debug(f"  {kind} {vector.original_index}: minimum {minimum.value}")
        return minimum.value

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def as_dense(self) -> np.ndarray:
        """
        A float64 copy of the condensed matrix, `inf` for infinite cells.

        Row `r` of the array is original vertex `available_rows()[r]`, column
        `c` is `available_columns()[c]`.
        """
        dense = np.empty(self.shape, dtype=np.float64)
        for row, col in self._store.iter_indices():
            dense[row, col] = self._store.get(row, col).as_float()
        return dense

    def __repr__(self) -> str:
        return f"CostMatrix(num_vertices={self._num_vertices}, size={self.size})"
