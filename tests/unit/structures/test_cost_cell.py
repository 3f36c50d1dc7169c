"""
Unit tests for the `CostCell` scalar.

A cost cell is either a finite non-negative integer or an infinite marker for
a forbidden edge. The infinite flag must be absorbing under subtraction, and
ordering must place every infinite cell above every finite one.
"""
import math
import pytest

from little_tsp.structures import CostCell, Edge


# ------------------------------
# Construction
# ------------------------------
def test_default_cell_is_finite_zero_without_edge():
    """
    A default-initialised cell (as produced by the 2D store) is a finite zero
    with no edge association.
    """
    cell = CostCell()
    assert cell.value == 0
    assert cell.edge is None
    assert not cell.is_infinite


def test_from_cost_maps_inf_to_infinite_cell():
    """
    `from_cost` turns `math.inf` into an infinite cell and finite costs into ints.
    """
    finite = CostCell.from_cost(12, Edge(0, 1))
    assert finite.value == 12 and isinstance(finite.value, int)
    assert finite.edge == Edge(0, 1)
    assert not finite.is_infinite

    forbidden = CostCell.from_cost(math.inf, Edge(2, 2))
    assert forbidden.is_infinite
    assert forbidden.edge == Edge(2, 2)


def test_from_cost_accepts_integral_floats():
    """
    A whole number stored as a float (as NumPy hands it out) becomes an int.
    """
    cell = CostCell.from_cost(7.0, Edge(0, 1))
    assert cell.value == 7 and isinstance(cell.value, int)


@pytest.mark.parametrize("cost", [2.9, 0.5, -math.inf, math.nan])
def test_from_cost_rejects_fractional_and_non_finite_costs(cost):
    """
    Fractional costs would be truncated and `-inf`/NaN have no integer value,
    so all of them are rejected with a `ValueError` instead of being coerced.
    """
    with pytest.raises(ValueError):
        CostCell.from_cost(cost, Edge(0, 1))


# ------------------------------
# Arithmetic
# ------------------------------
def test_subtract_decrements_finite_cell():
    cell = CostCell(10, Edge(0, 1))
    cell.subtract(CostCell(4))
    assert cell.value == 6
    # The edge tag never changes.
    assert cell.edge == Edge(0, 1)


def test_subtract_leaves_infinite_cell_unchanged():
    """
    Subtraction is a no-op on infinite cells; the flag survives any number of calls.
    """
    cell = CostCell.infinite(Edge(1, 1))
    for _ in range(3):
        cell.subtract(CostCell(7))
    assert cell.is_infinite
    assert math.isinf(cell.as_float())


def test_subtract_infinite_delta_is_rejected():
    cell = CostCell(5)
    with pytest.raises(ValueError):
        cell.subtract(CostCell.infinite())


def test_set_infinite_is_idempotent():
    cell = CostCell(3)
    cell.set_infinite()
    cell.set_infinite()
    assert cell.is_infinite


def test_copy_is_independent():
    """
    Reduction copies the minimum before subtracting it from its own row, so
    the copy must not alias the original.
    """
    cell = CostCell(9, Edge(0, 2))
    snapshot = cell.copy()
    cell.subtract(CostCell(9))
    assert cell.value == 0
    assert snapshot.value == 9
    assert snapshot.edge == Edge(0, 2)


# ------------------------------
# Ordering
# ------------------------------
def test_infinite_is_greater_than_every_finite_value():
    assert CostCell(10 ** 12) < CostCell.infinite()
    assert CostCell.infinite() > CostCell(0)
    assert not (CostCell.infinite() < CostCell(3))


def test_finite_cells_compare_by_value_and_ignore_edge():
    assert CostCell(3, Edge(0, 1)) < CostCell(4, Edge(0, 0))
    assert CostCell(5, Edge(0, 1)) == CostCell(5, Edge(2, 3))
    assert CostCell(5) <= CostCell(5)


def test_infinite_cells_are_equal_regardless_of_stale_value():
    first = CostCell(3)
    first.set_infinite()
    assert first == CostCell.infinite()
    assert not (first < CostCell.infinite())


def test_min_over_cells_picks_first_smallest():
    """
    Python's `min` keeps the first minimum it sees, which is the tie rule
    reduction relies on.
    """
    cells = [CostCell.infinite(), CostCell(2, Edge(0, 1)), CostCell(2, Edge(0, 2))]
    assert min(cells).edge == Edge(0, 1)


def test_cells_are_unhashable():
    with pytest.raises(TypeError):
        hash(CostCell(1))


def test_str_renders_inf():
    assert str(CostCell(4)) == "4"
    assert str(CostCell.infinite()) == "inf"
