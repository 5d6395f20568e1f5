"""
Matrix backend for weighted_graph.

Implements the WeightedGraph interface with an N x N boolean presence matrix
and a parallel N x N weight matrix, both numpy arrays.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Tuple
import numbers

import numpy as np

from .errors import MissingArcError
from .graph import GraphType, WeightedGraph, check_index, check_node_count


def _to_python(value: Any) -> Any:
    # numpy scalars -> builtin numbers so callers compare and serialise plain values
    return value.item() if isinstance(value, np.generic) else value


class DenseGraph(WeightedGraph):
    """
    Weighted graph backed by presence and weight matrices.

    Unlike SparseGraph, inserting an arc whose cell is already present is a
    no-op: the stored weight is kept and arc_count() does not change.

    dtype selects the numpy type of node and arc weights; its zero is the
    additive identity. dtype=object keeps arbitrary Python numbers. Integer
    dtypes refuse non-integral weights with ValueError instead of truncating.
    """

    def __init__(self, node_count: int, gtype: GraphType, dtype: Any = np.float64) -> None:
        check_node_count(node_count)
        self._gtype = gtype
        self._nodes = np.zeros(node_count, dtype=dtype)
        self._adj = np.zeros((node_count, node_count), dtype=bool)
        self._weights = np.zeros((node_count, node_count), dtype=dtype)
        self._arc_count = 0

    def __repr__(self) -> str:
        return (
            f"DenseGraph(node_count={self._nodes.shape[0]}, "
            f"gtype={self._gtype.value}, arcs={self._arc_count}, dtype={self._weights.dtype})"
        )

    @property
    def graph_type(self) -> GraphType:
        return self._gtype

    @property
    def zero(self) -> Any:
        return _to_python(np.zeros((), dtype=self._weights.dtype)[()])

    @property
    def dtype(self) -> np.dtype:
        return self._weights.dtype

    # --- Mutation API --------------------------------------------------------

    def add_arc(self, src: int, dst: int, weight: Any) -> None:
        n = self._nodes.shape[0]
        check_index(src, n)
        check_index(dst, n)
        self._make_arc(src, dst, weight)
        if self._gtype is GraphType.UNDIRECT:
            self._make_arc(dst, src, weight)

    def update_all_arcs_weight(self, f: Callable[[int, int, Any], Any]) -> None:
        # np.nonzero walks the matrix in row-major order
        rows, cols = np.nonzero(self._adj)
        for i, j in zip(rows.tolist(), cols.tolist()):
            self._weights[i, j] = self._checked(f(i, j, _to_python(self._weights[i, j])))

    def update_all_nodes_weight(self, f: Callable[[int, Any], Any]) -> None:
        for i in range(self._nodes.shape[0]):
            self._nodes[i] = self._checked(f(i, _to_python(self._nodes[i])))

    def update_indexed_nodes_weight(self, pairs: Iterable[Tuple[int, Any]]) -> None:
        n = self._nodes.shape[0]
        for i, w in pairs:
            self._nodes[check_index(i, n)] = self._checked(w)

    def _checked(self, value: Any) -> Any:
        if (
            self._weights.dtype.kind in "iu"
            and isinstance(value, numbers.Real)
            and not isinstance(value, numbers.Integral)
            and not float(value).is_integer()
        ):
            raise ValueError(f"Weight {value!r} is not integral for dtype {self._weights.dtype}.")
        return value

    def _make_arc(self, src: int, dst: int, weight: Any) -> None:
        if self._adj[src, dst]:
            return
        # Store the weight first so a rejected value leaves the cell absent
        self._weights[src, dst] = self._checked(weight)
        self._adj[src, dst] = True
        self._arc_count += 1

    # --- Visitor interface ---------------------------------------------------

    def node_count(self) -> int:
        return self._nodes.shape[0]

    def arc_count(self) -> int:
        return self._arc_count

    def iter_nodes(self) -> Iterator[Tuple[int, Any]]:
        for i in range(self._nodes.shape[0]):
            yield i, _to_python(self._nodes[i])

    def iter_arcs(self) -> Iterator[Tuple[int, int, Any]]:
        rows, cols = np.nonzero(self._adj)
        for i, j in zip(rows.tolist(), cols.tolist()):
            yield i, j, _to_python(self._weights[i, j])

    # --- Queries -------------------------------------------------------------

    def node_weight(self, index: int) -> Any:
        return _to_python(self._nodes[check_index(index, self._nodes.shape[0])])

    def has_arc(self, src: int, dst: int) -> bool:
        n = self._nodes.shape[0]
        return bool(self._adj[check_index(src, n), check_index(dst, n)])

    def successors(self, node: int) -> Iterator[Tuple[int, int, Any]]:
        row = check_index(node, self._nodes.shape[0])
        cols = np.flatnonzero(self._adj[row]).tolist()
        return ((row, j, _to_python(self._weights[row, j])) for j in cols)

    def cost(self, src: int, dst: int) -> Any:
        if not self.has_arc(src, dst):
            raise MissingArcError(src, dst)
        return _to_python(self._weights[src, dst])
