"""
Unit tests for the immutable `Edge` pair and its coercion helpers.
"""
from dataclasses import FrozenInstanceError
import pytest

from little_tsp.structures import Edge, as_edge, as_edges


def test_edge_fields_and_tuple():
    """
    An edge exposes its endpoints as fields and as a plain tuple.
    """
    edge = Edge(2, 5)
    assert edge.u == 2
    assert edge.v == 5
    assert edge.as_tuple() == (2, 5)


def test_edge_is_frozen_and_hashable():
    """
    Edges are immutable values usable as set members and dict keys.
    """
    edge = Edge(0, 1)
    with pytest.raises(FrozenInstanceError):
        edge.u = 3
    assert {Edge(0, 1), Edge(0, 1), Edge(1, 0)} == {Edge(0, 1), Edge(1, 0)}


def test_as_edge_accepts_edges_and_pairs():
    """
    Edges pass through unchanged; two-item sequences are converted.
    """
    edge = Edge(1, 2)
    assert as_edge(edge) is edge
    assert as_edge((1, 2)) == edge
    assert as_edge([1, 2]) == edge


def test_as_edge_rejects_wrong_arity():
    """
    Anything other than exactly two endpoints is refused.
    """
    with pytest.raises(ValueError):
        as_edge((1, 2, 3))


def test_as_edges_keeps_order_and_duplicates():
    """
    Coercion of a collection is element-wise; duplicates are not collapsed.
    """
    assert as_edges([(0, 1), Edge(0, 1), [2, 0]]) == [Edge(0, 1), Edge(0, 1), Edge(2, 0)]
