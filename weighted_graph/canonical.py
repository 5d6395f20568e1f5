"""
Backend-neutral canonical form of a weighted graph.

A CanonicalForm is a short-lived, immutable value used to move a graph from
one backend to another or across a serialization boundary (see codec.py).
It records the graph type, the node weights and the arcs:

* Nodes are either ExtendedNodes (one weight per index) or CompactNodes
  (count plus the sorted non-zero (index, weight) pairs). Compact is chosen
  when 2 * zero_count > total + 1.
* Arcs are either WeightedArcs ((src, dst, weight) triples) or SimpleArcs
  ((src, dst) pairs replayed with the backend's zero weight).

Arcs are captured verbatim from the source graph, so an undirected source
contributes both directions of every edge. Replay into an undirected backend
only inserts entries with src <= dst and lets the backend mirror them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Type, TypeVar, Union
import logging
import numbers

from .config import ArcStyle, TranscodeConfig, get_default_config
from .errors import CanonicalFormError
from .graph import GraphType, WeightedGraph

logger = logging.getLogger(__name__)

G = TypeVar("G", bound=WeightedGraph)


@dataclass(frozen=True)
class ExtendedNodes:
    weights: Tuple[Any, ...]

    def node_count(self) -> int:
        return len(self.weights)


@dataclass(frozen=True)
class CompactNodes:
    """Node weights stored as (index, weight) for non-zero entries only."""

    count: int
    weights: Tuple[Tuple[int, Any], ...]

    def node_count(self) -> int:
        return self.count


Nodes = Union[ExtendedNodes, CompactNodes]


@dataclass(frozen=True)
class SimpleArcs:
    pairs: Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class WeightedArcs:
    triples: Tuple[Tuple[int, int, Any], ...]


Arcs = Union[SimpleArcs, WeightedArcs]


def count_zeros(weights: Iterable[Any], zero: Any = 0) -> int:
    return sum(1 for w in weights if w == zero)


def make_nodes(weights: Iterable[Any], zero: Any = 0, compact: bool = True) -> Nodes:
    """
    Build the node section, choosing the compact layout when most weights are zero.

    The decision depends only on the weight sequence: with L weights of which
    Z equal zero, CompactNodes is used iff 2 * Z > L + 1.
    """
    weights = tuple(weights)
    total = len(weights)
    zeros = count_zeros(weights, zero)
    if compact and 2 * zeros > total + 1:
        non_zero = tuple((i, w) for i, w in enumerate(weights) if w != zero)
        return CompactNodes(total, non_zero)
    return ExtendedNodes(weights)


def make_arcs(triples: Iterable[Tuple[int, int, Any]], style: ArcStyle = ArcStyle.WEIGHTED) -> Arcs:
    if style is ArcStyle.SIMPLE:
        return SimpleArcs(tuple((i, j) for i, j, _ in triples))
    return WeightedArcs(tuple(triples))


def should_insert(gtype: GraphType, src: int, dst: int) -> bool:
    """
    Whether a recorded arc is replayed into a graph of type gtype.

    Undirected backends mirror every insertion, so only the src <= dst half
    of each recorded edge is replayed.
    """
    return gtype is GraphType.DIRECT or src <= dst


def apply_nodes(g: WeightedGraph, nodes: Nodes) -> None:
    if isinstance(nodes, CompactNodes):
        g.update_indexed_nodes_weight(nodes.weights)
    else:
        g.update_all_nodes_weight_iter(nodes.weights)


def apply_arcs(g: WeightedGraph, arcs: Arcs) -> None:
    gtype = g.graph_type
    if isinstance(arcs, SimpleArcs):
        for i, j in arcs.pairs:
            if should_insert(gtype, i, j):
                g.add_default_arc(i, j)
    else:
        for i, j, w in arcs.triples:
            if should_insert(gtype, i, j):
                g.add_arc(i, j, w)


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_weight(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


@dataclass(frozen=True)
class CanonicalForm:
    gtype: GraphType
    nodes: Nodes
    arcs: Arcs

    def node_count(self) -> int:
        return self.nodes.node_count()

    @classmethod
    def from_graph(
        cls, g: WeightedGraph, config: Optional[TranscodeConfig] = None
    ) -> "CanonicalForm":
        """Capture g's type, node weights and stored arcs."""
        cfg = config or get_default_config()
        nodes = make_nodes((w for _, w in g.iter_nodes()), g.zero, cfg.compact_nodes)
        arcs = make_arcs(g.iter_arcs(), cfg.arc_style)
        logger.debug(
            "canonical form from %r: nodes=%s arcs=%s",
            g,
            type(nodes).__name__,
            type(arcs).__name__,
        )
        return cls(g.graph_type, nodes, arcs)

    def validate(self) -> None:
        """
        Check that the form describes a buildable graph.

        Raises:
            CanonicalFormError: on a bad compact count, unsorted, duplicate or
                out-of-range compact indices, arcs referencing missing nodes,
                or node and arc weights that are not numbers.
        """
        n = self.node_count()
        if isinstance(self.nodes, CompactNodes):
            if not _is_index(n) or n < 0:
                self._reject(f"compact node count must be a non-negative integer, got {n!r}")
            previous = -1
            for i, _ in self.nodes.weights:
                if not _is_index(i) or not 0 <= i < n:
                    self._reject(f"compact node index {i!r} outside [0, {n})")
                if i <= previous:
                    self._reject(f"compact node indices must be strictly increasing, got {i} after {previous}")
                previous = i

        if isinstance(self.nodes, CompactNodes):
            node_weights = tuple(w for _, w in self.nodes.weights)
        else:
            node_weights = self.nodes.weights
        for w in node_weights:
            if not _is_weight(w):
                self._reject(f"node weight {w!r} is not a number")

        if isinstance(self.arcs, SimpleArcs):
            endpoints = self.arcs.pairs
        else:
            endpoints = tuple((i, j) for i, j, _ in self.arcs.triples)
        for i, j in endpoints:
            if not (_is_index(i) and _is_index(j) and 0 <= i < n and 0 <= j < n):
                self._reject(f"arc ({i!r}, {j!r}) references a node outside [0, {n})")

        if isinstance(self.arcs, WeightedArcs):
            for i, j, w in self.arcs.triples:
                if not _is_weight(w):
                    self._reject(f"arc ({i}, {j}) weight {w!r} is not a number")

    @staticmethod
    def _reject(message: str) -> None:
        logger.warning("rejecting canonical form: %s", message)
        raise CanonicalFormError(message)

    def to_graph(self, backend: Type[G], **backend_kwargs: Any) -> G:
        """
        Build a fresh backend instance from this form.

        The form is validated before anything is allocated, so a malformed
        form never yields a partially built graph.
        """
        self.validate()
        g = backend(self.node_count(), self.gtype, **backend_kwargs)
        apply_nodes(g, self.nodes)
        apply_arcs(g, self.arcs)
        logger.debug("materialised canonical form into %r", g)
        return g


def transcode(
    g: WeightedGraph,
    backend: Type[G],
    config: Optional[TranscodeConfig] = None,
    **backend_kwargs: Any,
) -> G:
    """Copy g into a new instance of backend via its canonical form."""
    return CanonicalForm.from_graph(g, config).to_graph(backend, **backend_kwargs)
