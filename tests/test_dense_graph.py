"""
Unit tests for DenseGraph.
"""

from fractions import Fraction

import numpy as np
import pytest

from weighted_graph import DenseGraph, GraphType, MissingArcError, NodeIndexError


def _ring(gtype: GraphType) -> DenseGraph:
    g = DenseGraph(4, gtype)
    g.add_arc(0, 1, 1.0)
    g.add_arc(1, 2, 2.0)
    g.add_arc(2, 3, 3.0)
    g.add_arc(3, 0, 4.0)
    return g


def test_direct_graph_matrix_cells():
    g = _ring(GraphType.DIRECT)

    for i in range(4):
        assert sum(g.has_arc(i, j) for j in range(4)) == 1

    assert g.cost(0, 1) == 1.0
    assert g.cost(1, 2) == 2.0
    assert g.cost(2, 3) == 3.0
    assert g.cost(3, 0) == 4.0

    # Reverse cells stay empty in a directed graph
    for src, dst in [(1, 0), (2, 1), (3, 2), (0, 3)]:
        assert not g.has_arc(src, dst)


def test_reinsertion_keeps_weight_and_count():
    g = DenseGraph(3, GraphType.DIRECT)
    g.add_arc(0, 1, 1.0)
    g.add_arc(0, 1, 9.0)

    assert g.cost(0, 1) == 1.0
    assert g.arc_count() == 1


def test_undirect_reinsertion_in_reverse_is_noop():
    g = DenseGraph(3, GraphType.UNDIRECT)
    g.add_arc(0, 1, 1.0)
    g.add_arc(1, 0, 7.0)

    assert g.arc_count() == 2
    assert g.cost(0, 1) == 1.0
    assert g.cost(1, 0) == 1.0


def test_undirected_self_loop_is_stored_once():
    g = DenseGraph(1, GraphType.UNDIRECT)
    g.add_arc(0, 0, 3.0)

    assert g.arc_count() == 1
    assert list(g.iter_arcs()) == [(0, 0, 3.0)]


def test_update_all_arcs_weight_undirect_row_major():
    g = _ring(GraphType.UNDIRECT)
    calls = []

    def double(i, j, w):
        calls.append((i, j))
        return 2.0 * w

    g.update_all_arcs_weight(double)

    # One call per stored direction, in row-major order
    assert calls == [(0, 1), (0, 3), (1, 0), (1, 2), (2, 1), (2, 3), (3, 0), (3, 2)]
    assert g.cost(0, 1) == 2.0
    assert g.cost(1, 2) == 4.0
    assert g.cost(2, 3) == 6.0
    assert g.cost(3, 0) == 8.0
    assert g.cost(1, 0) == 2.0
    assert g.cost(2, 1) == 4.0
    assert g.cost(3, 2) == 6.0
    assert g.cost(0, 3) == 8.0


def test_iter_arcs_is_row_major_regardless_of_insertion():
    g = DenseGraph(3, GraphType.DIRECT)
    g.add_arc(2, 0, 5.0)
    g.add_arc(0, 2, 1.0)
    g.add_arc(0, 1, 2.0)

    assert list(g.iter_arcs()) == [(0, 1, 2.0), (0, 2, 1.0), (2, 0, 5.0)]
    assert list(g.successors(0)) == [(0, 1, 2.0), (0, 2, 1.0)]


def test_values_come_back_as_builtin_numbers():
    g = _ring(GraphType.DIRECT)
    g.update_all_nodes_weight(lambda i, _: 1.5 * i)

    for _, w in g.iter_nodes():
        assert type(w) is float
    assert type(g.cost(0, 1)) is float


def test_out_of_range_access_fails_fast():
    g = DenseGraph(4, GraphType.DIRECT)

    with pytest.raises(NodeIndexError):
        g.add_arc(0, 4, 1.0)
    with pytest.raises(NodeIndexError):
        g.cost(4, 0)
    with pytest.raises(IndexError):
        g.successors(-1)

    assert g.arc_count() == 0


def test_cost_missing_arc_raises():
    g = _ring(GraphType.DIRECT)

    with pytest.raises(MissingArcError):
        g.cost(0, 2)


def test_integer_dtype():
    g = DenseGraph(3, GraphType.DIRECT, dtype=np.int64)
    g.add_arc(0, 1, 4)

    assert g.zero == 0
    assert g.cost(0, 1) == 4
    assert isinstance(g.cost(0, 1), int)


def test_object_dtype_keeps_python_numbers():
    g = DenseGraph(2, GraphType.DIRECT, dtype=object)
    g.add_arc(0, 1, Fraction(1, 3))
    g.update_all_arcs_weight(lambda i, j, w: w + Fraction(1, 3))

    assert g.cost(0, 1) == Fraction(2, 3)


def test_rejected_weight_leaves_no_arc_behind():
    g = DenseGraph.new_direct(2)

    with pytest.raises(ValueError):
        g.add_arc(0, 1, "heavy")

    assert g.arc_count() == 0
    assert not g.has_arc(0, 1)
    assert list(g.iter_arcs()) == []


def test_integer_dtype_refuses_fractional_weights():
    g = DenseGraph(2, GraphType.UNDIRECT, dtype=np.int64)

    with pytest.raises(ValueError):
        g.add_arc(0, 1, 2.5)
    with pytest.raises(ValueError):
        g.update_indexed_nodes_weight([(0, 0.5)])

    assert g.arc_count() == 0
    assert not g.has_arc(0, 1)
    assert not g.has_arc(1, 0)

    # Integral floats are still accepted
    g.add_arc(0, 1, 3.0)
    assert g.cost(1, 0) == 3
