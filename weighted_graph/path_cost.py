"""
Cumulative costs of every sub-walk of a given walk.

Works over any graph that can answer single-arc cost queries; both backends
do. Only forward sub-walks are produced, which is what a directed graph
needs; for undirected graphs the reverse costs are the same values.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Sequence, Tuple


class ArcCost(Protocol):
    """Anything that can report the weight of a single arc."""

    def cost(self, src: int, dst: int) -> Any:
        """Return the weight of src -> dst, raising if the arc is absent."""

        ...


def successor_pairs(path: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Yield consecutive (path[k], path[k + 1]) pairs."""
    for k in range(len(path) - 1):
        yield path[k], path[k + 1]


def walk_cost(graph: ArcCost, path: Sequence[int], zero: Any = 0) -> Any:
    """Total cost of the whole walk; zero for walks shorter than two nodes."""
    total = zero
    for src, dst in successor_pairs(path):
        total = total + graph.cost(src, dst)
    return total


class SubPathCostIterator:
    """
    Lazily yield (path[s], path[e], cost) for every sub-walk path[s..=e].

    Order is s ascending, then e ascending. The running cost restarts from
    zero at each new s and adds cost(path[e - 1], path[e]) as e advances, so
    for path [0, 1, 2, 3] over arcs 0->1 (1.0), 1->2 (2.0), 2->3 (3.0):

        (0, 1, 1.0), (0, 2, 3.0), (0, 3, 6.0),
        (1, 2, 2.0), (1, 3, 5.0),
        (2, 3, 3.0)

    The path is borrowed, not copied, and the iterator is single-pass.
    A failed cost lookup (e.g. MissingArcError) propagates to the caller and
    leaves the iterator exhausted.
    """

    def __init__(self, graph: ArcCost, path: Sequence[int], zero: Any = 0) -> None:
        self._graph = graph
        self._path = path
        self._zero = zero
        self._start = 0
        self._end = 1
        self._weight = zero
        self._done = len(path) < 2

    def __iter__(self) -> "SubPathCostIterator":
        return self

    def __next__(self) -> Tuple[int, int, Any]:
        if self._done:
            raise StopIteration

        path = self._path
        if self._end >= len(path):
            # Move to the next start offset and reset the accumulated cost
            self._start += 1
            if self._start >= len(path) - 1:
                self._done = True
                raise StopIteration
            self._end = self._start + 1
            self._weight = self._zero

        src, dst = path[self._end - 1], path[self._end]
        try:
            w = self._graph.cost(src, dst)
        except Exception:
            self._done = True
            raise

        self._weight = self._weight + w
        self._end += 1
        return path[self._start], dst, self._weight
