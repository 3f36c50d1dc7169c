from __future__ import annotations
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class Matrix(Generic[T]):
    """
    A resizable, dense, row-major 2D store.

    Cells live in one flat list of length `num_rows * num_cols`. New cells are
    produced by calling `factory()`, so mutable cell types get one fresh object
    per position rather than a shared default. `get()` hands back the stored
    object itself, which lets callers mutate mutable cells in place.
    """
    __slots__ = ("_num_rows", "_num_cols", "_factory", "_cells")

    def __init__(self, num_rows: int = 0, num_cols: int = 0, factory: Optional[Callable[[], T]] = None):
        self._factory: Callable[[], T] = factory if factory is not None else (lambda: None)
        self._num_rows = 0
        self._num_cols = 0
        self._cells: List[T] = []
        self.resize(num_rows, num_cols)

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Returns the matrix shape as a tuple `(num_rows, num_cols)`."""
        return self._num_rows, self._num_cols

    def resize(self, num_rows: int, num_cols: int) -> None:
        """
        Reallocates the store and default-initialises every cell.

        Any previous contents are discarded, including cells whose position
        would still be in range after the resize.

        Raises
        ------
        ValueError
            If either dimension is negative.
        """
        if num_rows < 0 or num_cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got ({num_rows}, {num_cols}).")
        self._num_rows = num_rows
        self._num_cols = num_cols
        self._cells = [self._factory() for _ in range(num_rows * num_cols)]

    def _offset(self, row: int, col: int) -> int:
        """Calculates the flat offset of `(row, col)` and validates indices."""
        if row < 0 or col < 0 or row >= self._num_rows or col >= self._num_cols:
            raise IndexError(
                f"Matrix invalid index: (row={row}, col={col}) for shape {self.shape}"
            )
        return row * self._num_cols + col

    def get(self, row: int, col: int) -> T:
        """
        Retrieves the object stored at `(row, col)`.

        Parameters
        ----------
        row : int
            The row index (0-based).
        col : int
            The column index (0-based).

        Returns
        -------
        T
            The stored object (not a copy).
        """
        return self._cells[self._offset(row, col)]

    def set(self, row: int, col: int, value: T) -> None:
        self._cells[self._offset(row, col)] = value

    def __getitem__(self, index: Tuple[int, int]) -> T:
        row, col = index
        return self.get(row, col)

    def __iter__(self) -> Iterator[T]:
        """Yields every stored object in row-major order."""
        return iter(list(self._cells))

    def iter_indices(self) -> Iterator[Tuple[int, int]]:
        """
        Yields all `(row, col)` index tuples in row-major order.

        Yields
        ------
        Iterator[Tuple[int, int]]
            An iterator over the valid index tuples.
        """
        for row in range(self._num_rows):
            for col in range(self._num_cols):
                yield row, col
