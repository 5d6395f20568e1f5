"""
Graphviz DOT rendering over the GraphVisitor interface.

One statement per node and one per arc. Undirected graphs print each edge
once, from the entry whose src <= dst.
"""

from __future__ import annotations

from typing import List

from .graph import GraphType, GraphVisitor


def to_dot_source(g: GraphVisitor) -> str:
    directed = g.graph_type is GraphType.DIRECT
    keyword = "digraph" if directed else "graph"
    arrow = "->" if directed else "--"

    lines: List[str] = []
    g.node_visitor(lambda i, w: lines.append(f'\tn{i} [label="{w}"];'))

    def add_arc(i: int, j: int, w: object) -> None:
        if directed or i <= j:
            lines.append(f'\tn{i} {arrow} n{j} [label="{w}"];')

    g.arc_visitor(add_arc)
    body = "\n".join(lines)
    return f"{keyword} {{\n{body}\n}}"
