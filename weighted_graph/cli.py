"""
weighted-graph command-line entry point.

Reads a graph record (JSON, or YAML for .yml/.yaml files) and either renders
it as DOT, re-encodes it after a trip through a backend, or prints the
sub-path costs of a walk.

Usage: weighted-graph [--config FILE] [--verbose] {dot,convert,costs} ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Type
import argparse
import logging
import sys

from . import codec
from .canonical import CanonicalForm
from .config import get_default_config, load_config, set_default_config
from .dense_graph import DenseGraph
from .dot import to_dot_source
from .errors import GraphError
from .graph import WeightedGraph
from .path_cost import SubPathCostIterator, walk_cost
from .sparse_graph import SparseGraph

BACKENDS: Dict[str, Type[WeightedGraph]] = {
    "sparse": SparseGraph,
    "dense": DenseGraph,
}


def read_form(path: Path) -> CanonicalForm:
    text = path.read_text()
    if path.suffix.lower() in (".yml", ".yaml"):
        return codec.load_yaml(text)
    return codec.loads(text)


def _add_common_backend(p: argparse.ArgumentParser, default: str) -> None:
    p.add_argument(
        "--backend", choices=sorted(BACKENDS), default=default,
        help=f"Backend used to materialise the graph (default: {default})",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weighted-graph",
        description="Inspect and convert weighted graph records.",
    )
    parser.add_argument("--config", type=Path, help="YAML transcoding config.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("dot", help="Render the graph as Graphviz DOT.")
    p.add_argument("file", type=Path)
    _add_common_backend(p, "sparse")

    p = subparsers.add_parser("convert", help="Round-trip through a backend and re-encode.")
    p.add_argument("file", type=Path)
    _add_common_backend(p, "dense")
    p.add_argument("--yaml", action="store_true", help="Write YAML instead of JSON.")

    p = subparsers.add_parser("costs", help="Print cumulative costs of every sub-walk.")
    p.add_argument("file", type=Path)
    p.add_argument("nodes", type=int, nargs="+", help="Walk as a list of node indices.")
    _add_common_backend(p, "dense")

    return parser


def _run(args: argparse.Namespace) -> None:
    graph = read_form(args.file).to_graph(BACKENDS[args.backend])

    if args.command == "dot":
        print(to_dot_source(graph))
    elif args.command == "convert":
        form = CanonicalForm.from_graph(graph)
        print(codec.dump_yaml(form) if args.yaml else codec.dumps(form))
    elif args.command == "costs":
        walk: List[int] = args.nodes
        for src, dst, cost in SubPathCostIterator(graph, walk, graph.zero):
            print(f"{src}\t{dst}\t{cost}")
        print(f"[costs] total={walk_cost(graph, walk, graph.zero)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    previous = get_default_config()
    try:
        if args.config is not None:
            set_default_config(load_config(args.config))
        _run(args)
    except (GraphError, OSError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    finally:
        set_default_config(previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())
