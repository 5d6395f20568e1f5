"""
Exception types raised by weighted_graph.

Every failure in this package is a programming or data error; nothing is
retried. The subclasses also derive from the matching builtin so callers that
only care about IndexError / KeyError / ValueError keep working.
"""


class GraphError(Exception):
    """Base exception for weighted_graph."""


class NodeIndexError(GraphError, IndexError):
    """A node index fell outside [0, node_count)."""

    def __init__(self, index: int, node_count: int) -> None:
        self.index = index
        self.node_count = node_count
        super().__init__(f"Node index {index} out of range for graph with {node_count} nodes.")


class MissingArcError(GraphError, KeyError):
    """A cost lookup asked for an arc the graph does not store."""

    def __init__(self, src: int, dst: int) -> None:
        self.src = src
        self.dst = dst
        super().__init__(src, dst)

    def __str__(self) -> str:
        return f"No arc {self.src} -> {self.dst} in graph."


class CanonicalFormError(GraphError, ValueError):
    """A canonical form (or its serialized record) is malformed."""
