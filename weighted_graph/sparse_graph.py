"""
Adjacency-list backend for weighted_graph.

Implements the WeightedGraph interface with one insertion-ordered list of
outgoing arcs per source node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Tuple

from .errors import MissingArcError
from .graph import GraphType, WeightedGraph, check_index, check_node_count


@dataclass
class AdjArc:
    """Single outgoing entry in a source node's list."""

    weight: Any
    dst: int


class SparseGraph(WeightedGraph):
    """
    Weighted graph backed by per-node lists of (weight, dst) entries.

    add_arc appends without looking for an existing entry, so repeated
    insertions of the same pair create parallel arcs and each one counts
    toward arc_count(). cost() returns the first inserted match.
    """

    def __init__(self, node_count: int, gtype: GraphType, zero: Any = 0.0) -> None:
        check_node_count(node_count)
        self._gtype = gtype
        self._zero = zero
        self._nodes: List[Any] = [zero] * node_count
        self._lists: List[List[AdjArc]] = [[] for _ in range(node_count)]
        self._arc_count = 0

    def __repr__(self) -> str:
        return (
            f"SparseGraph(node_count={len(self._nodes)}, "
            f"gtype={self._gtype.value}, arcs={self._arc_count})"
        )

    @property
    def graph_type(self) -> GraphType:
        return self._gtype

    @property
    def zero(self) -> Any:
        return self._zero

    # --- Mutation API --------------------------------------------------------

    def add_arc(self, src: int, dst: int, weight: Any) -> None:
        n = len(self._nodes)
        check_index(src, n)
        check_index(dst, n)
        self._make_arc(src, dst, weight)
        if self._gtype is GraphType.UNDIRECT:
            self._make_arc(dst, src, weight)

    def update_all_arcs_weight(self, f: Callable[[int, int, Any], Any]) -> None:
        for i, arcs in enumerate(self._lists):
            for arc in arcs:
                arc.weight = f(i, arc.dst, arc.weight)

    def update_all_nodes_weight(self, f: Callable[[int, Any], Any]) -> None:
        for i, w in enumerate(self._nodes):
            self._nodes[i] = f(i, w)

    def update_indexed_nodes_weight(self, pairs: Iterable[Tuple[int, Any]]) -> None:
        n = len(self._nodes)
        for i, w in pairs:
            self._nodes[check_index(i, n)] = w

    def _make_arc(self, src: int, dst: int, weight: Any) -> None:
        self._lists[src].append(AdjArc(weight, dst))
        self._arc_count += 1

    # --- Visitor interface ---------------------------------------------------

    def node_count(self) -> int:
        return len(self._nodes)

    def arc_count(self) -> int:
        return self._arc_count

    def iter_nodes(self) -> Iterator[Tuple[int, Any]]:
        return enumerate(self._nodes)

    def iter_arcs(self) -> Iterator[Tuple[int, int, Any]]:
        for i, arcs in enumerate(self._lists):
            for arc in arcs:
                yield i, arc.dst, arc.weight

    # --- Queries -------------------------------------------------------------

    def node_weight(self, index: int) -> Any:
        return self._nodes[check_index(index, len(self._nodes))]

    def successors(self, node: int) -> Iterator[Tuple[int, int, Any]]:
        arcs = self._lists[check_index(node, len(self._nodes))]
        return ((node, arc.dst, arc.weight) for arc in arcs)

    def cost(self, src: int, dst: int) -> Any:
        n = len(self._nodes)
        check_index(dst, n)
        for arc in self._lists[check_index(src, n)]:
            if arc.dst == dst:
                return arc.weight
        raise MissingArcError(src, dst)
