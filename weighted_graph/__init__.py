"""Weighted graphs with sparse and dense backends, canonical-form transcoding and walk costs."""

from .canonical import (
    CanonicalForm,
    CompactNodes,
    ExtendedNodes,
    SimpleArcs,
    WeightedArcs,
    make_nodes,
    transcode,
)
from .codec import decode_graph, encode_graph
from .config import ArcStyle, TranscodeConfig
from .dense_graph import DenseGraph
from .dot import to_dot_source
from .errors import CanonicalFormError, GraphError, MissingArcError, NodeIndexError
from .graph import GraphType, GraphVisitor, WeightedGraph, same_topology
from .path_cost import ArcCost, SubPathCostIterator, walk_cost
from .sparse_graph import SparseGraph

__all__ = [
    "GraphType",
    "GraphVisitor",
    "WeightedGraph",
    "SparseGraph",
    "DenseGraph",
    "same_topology",
    "CanonicalForm",
    "ExtendedNodes",
    "CompactNodes",
    "SimpleArcs",
    "WeightedArcs",
    "make_nodes",
    "transcode",
    "encode_graph",
    "decode_graph",
    "ArcStyle",
    "TranscodeConfig",
    "ArcCost",
    "SubPathCostIterator",
    "walk_cost",
    "to_dot_source",
    "GraphError",
    "NodeIndexError",
    "MissingArcError",
    "CanonicalFormError",
]
