"""
Weighted graph abstraction for weighted_graph.

Nodes are dense integer indices in [0, node_count), fixed at construction.
Arcs are directed: src -> dst with a numeric weight. Undirected graphs store
both directions explicitly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Tuple

from .errors import NodeIndexError


class GraphType(Enum):
    """
    Direction policy of a graph, fixed at construction.

    DIRECT: add_arc(u, v, w) stores u -> v only.
    UNDIRECT: add_arc(u, v, w) stores u -> v and v -> u.
    """

    DIRECT = "Direct"
    UNDIRECT = "Undirect"


def check_index(index: int, node_count: int) -> int:
    """Return index unchanged, or raise NodeIndexError when out of range."""
    if not 0 <= index < node_count:
        raise NodeIndexError(index, node_count)
    return index


def check_node_count(node_count: int) -> int:
    if node_count < 0:
        raise ValueError(f"node_count must be non-negative, got {node_count}.")
    return node_count


class GraphVisitor(ABC):
    """Read-only access to a graph's nodes and arcs."""

    @property
    @abstractmethod
    def graph_type(self) -> GraphType:
        raise NotImplementedError

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        raise NotImplementedError

    @abstractmethod
    def arc_count(self) -> int:
        """
        Return the number of stored arc entries.

        Mirrored arcs of undirected graphs count as separate entries.
        """
        raise NotImplementedError

    @abstractmethod
    def iter_nodes(self) -> Iterator[Tuple[int, Any]]:
        """Yield (index, weight) in ascending index order."""
        raise NotImplementedError

    @abstractmethod
    def iter_arcs(self) -> Iterator[Tuple[int, int, Any]]:
        """Yield (src, dst, weight) once per stored arc entry."""
        raise NotImplementedError

    def node_visitor(self, f: Callable[[int, Any], None]) -> None:
        """Call f(index, weight) for each node, ascending index."""
        for i, w in self.iter_nodes():
            f(i, w)

    def arc_visitor(self, f: Callable[[int, int, Any], None]) -> None:
        """Call f(src, dst, weight) for each stored arc entry."""
        for i, j, w in self.iter_arcs():
            f(i, j, w)

    def total_entries(self) -> int:
        """Return the number of nodes plus the number of arc entries."""
        return self.node_count() + self.arc_count()


class WeightedGraph(GraphVisitor):
    """
    Mutable graph with per-node and per-arc weights.

    Concrete backends are constructed as Backend(node_count, gtype) and keep
    their own storage; this class only fixes the shared contract.
    """

    @classmethod
    def new_direct(cls, node_count: int, **kwargs: Any) -> "WeightedGraph":
        return cls(node_count, GraphType.DIRECT, **kwargs)

    @classmethod
    def new_undirect(cls, node_count: int, **kwargs: Any) -> "WeightedGraph":
        return cls(node_count, GraphType.UNDIRECT, **kwargs)

    @property
    @abstractmethod
    def zero(self) -> Any:
        """Additive identity used for fresh node weights and default arcs."""
        raise NotImplementedError

    # --- Mutation API --------------------------------------------------------

    @abstractmethod
    def add_arc(self, src: int, dst: int, weight: Any) -> None:
        """
        Insert src -> dst with weight (and dst -> src for undirected graphs).
        """
        raise NotImplementedError

    def add_default_arc(self, src: int, dst: int) -> None:
        """Insert an arc whose weight is the additive identity."""
        self.add_arc(src, dst, self.zero)

    @abstractmethod
    def update_all_arcs_weight(self, f: Callable[[int, int, Any], Any]) -> None:
        """
        Replace every stored arc weight w of (i, j) with f(i, j, w).

        Undirected graphs call f once per stored direction, so an edge
        inserted once sees two calls: (u, v, w) and (v, u, w).
        """
        raise NotImplementedError

    @abstractmethod
    def update_all_nodes_weight(self, f: Callable[[int, Any], Any]) -> None:
        """Replace every node weight w of node i with f(i, w)."""
        raise NotImplementedError

    @abstractmethod
    def update_indexed_nodes_weight(self, pairs: Iterable[Tuple[int, Any]]) -> None:
        """Assign weight w to node i for each (i, w) in pairs."""
        raise NotImplementedError

    def update_all_nodes_weight_iter(self, weights: Iterable[Any]) -> None:
        """
        Assign weights to nodes 0, 1, 2, ... in order.

        Stops at whichever of weights or the node range runs out first.
        """
        self.update_indexed_nodes_weight(zip(range(self.node_count()), weights))

    # --- Queries -------------------------------------------------------------

    @abstractmethod
    def node_weight(self, index: int) -> Any:
        raise NotImplementedError

    @abstractmethod
    def successors(self, node: int) -> Iterator[Tuple[int, int, Any]]:
        """Yield (node, dst, weight) for each arc leaving node."""
        raise NotImplementedError

    @abstractmethod
    def cost(self, src: int, dst: int) -> Any:
        """
        Return the weight of src -> dst.

        Raises:
            MissingArcError: if the graph stores no such arc.
        """
        raise NotImplementedError


def same_topology(a: GraphVisitor, b: GraphVisitor) -> bool:
    """
    True when a and b agree on type, node weights and the set of directed arcs.

    Duplicate arc entries are ignored, so a SparseGraph holding parallel
    copies of an arc matches a DenseGraph holding it once.
    """
    if a.graph_type is not b.graph_type or a.node_count() != b.node_count():
        return False
    if list(a.iter_nodes()) != list(b.iter_nodes()):
        return False
    return set(a.iter_arcs()) == set(b.iter_arcs())
