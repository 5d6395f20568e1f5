"""
Record encoding of canonical forms.

The record is a plain mapping with externally tagged unions, so any format
that can hold mappings, sequences and numbers can carry it:

    {"gtype": "Direct" | "Undirect",
     "nodes": {"Extended": [w, ...]}
            | {"Compact": {"count": n, "weights": [[i, w], ...]}},
     "arcs":  {"Simple": [[i, j], ...]}
            | {"Weighted": [[i, j, w], ...]}}

JSON (stdlib json) and YAML (PyYAML, safe loader) wrappers are provided.
Weights must be numbers the chosen format can represent.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar
import json
import logging

import yaml

from .canonical import (
    Arcs,
    CanonicalForm,
    CompactNodes,
    ExtendedNodes,
    Nodes,
    SimpleArcs,
    WeightedArcs,
)
from .config import TranscodeConfig, get_default_config
from .errors import CanonicalFormError
from .graph import GraphType, WeightedGraph

logger = logging.getLogger(__name__)

G = TypeVar("G", bound=WeightedGraph)


# --- Encoding ----------------------------------------------------------------

def nodes_to_record(nodes: Nodes) -> Dict[str, Any]:
    if isinstance(nodes, CompactNodes):
        return {
            "Compact": {
                "count": nodes.count,
                "weights": [[i, w] for i, w in nodes.weights],
            }
        }
    return {"Extended": list(nodes.weights)}


def arcs_to_record(arcs: Arcs) -> Dict[str, Any]:
    if isinstance(arcs, SimpleArcs):
        return {"Simple": [[i, j] for i, j in arcs.pairs]}
    return {"Weighted": [[i, j, w] for i, j, w in arcs.triples]}


def to_dict(form: CanonicalForm) -> Dict[str, Any]:
    return {
        "gtype": form.gtype.value,
        "nodes": nodes_to_record(form.nodes),
        "arcs": arcs_to_record(form.arcs),
    }


# --- Decoding ----------------------------------------------------------------

def _fail(message: str) -> None:
    logger.warning("rejecting graph record: %s", message)
    raise CanonicalFormError(message)


def _single_tag(record: Any, field: str, tags: Sequence[str]) -> tuple[str, Any]:
    """Unwrap {"Tag": payload} for one of the allowed tags."""
    if not isinstance(record, Mapping) or len(record) != 1:
        _fail(f"'{field}' must be a mapping with exactly one of {list(tags)}")
    (tag, payload), = record.items()
    if tag not in tags:
        _fail(f"unknown '{field}' variant {tag!r}; expected one of {list(tags)}")
    return tag, payload


def _rows(payload: Any, arity: int, what: str) -> List[tuple]:
    if not isinstance(payload, (list, tuple)):
        _fail(f"{what} must be a sequence")
    rows = []
    for row in payload:
        if not isinstance(row, (list, tuple)) or len(row) != arity:
            _fail(f"each entry of {what} must have {arity} items, got {row!r}")
        rows.append(tuple(row))
    return rows


def nodes_from_record(record: Any) -> Nodes:
    tag, payload = _single_tag(record, "nodes", ("Extended", "Compact"))
    if tag == "Extended":
        if not isinstance(payload, (list, tuple)):
            _fail("Extended nodes must be a sequence of weights")
        return ExtendedNodes(tuple(payload))
    if not isinstance(payload, Mapping) or set(payload) != {"count", "weights"}:
        _fail("Compact nodes must be a mapping with 'count' and 'weights'")
    return CompactNodes(payload["count"], tuple(_rows(payload["weights"], 2, "Compact weights")))


def arcs_from_record(record: Any) -> Arcs:
    tag, payload = _single_tag(record, "arcs", ("Simple", "Weighted"))
    if tag == "Simple":
        return SimpleArcs(tuple(_rows(payload, 2, "Simple arcs")))
    return WeightedArcs(tuple(_rows(payload, 3, "Weighted arcs")))


def from_dict(record: Any) -> CanonicalForm:
    """
    Rebuild and validate a CanonicalForm from its record.

    Raises:
        CanonicalFormError: if the record is malformed in shape or content.
    """
    if not isinstance(record, Mapping):
        _fail("graph record must be a mapping")
    missing = {"gtype", "nodes", "arcs"} - set(record)
    if missing:
        _fail(f"graph record is missing {sorted(missing)}")
    try:
        gtype = GraphType(record["gtype"])
    except ValueError:
        _fail(f"unknown gtype {record['gtype']!r}")

    form = CanonicalForm(gtype, nodes_from_record(record["nodes"]), arcs_from_record(record["arcs"]))
    form.validate()
    return form


# --- Text formats ------------------------------------------------------------

def dumps(form: CanonicalForm, config: Optional[TranscodeConfig] = None) -> str:
    cfg = config or get_default_config()
    return json.dumps(to_dict(form), indent=cfg.json_indent)


def loads(text: str) -> CanonicalForm:
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CanonicalFormError(f"invalid JSON graph record: {exc}") from exc
    return from_dict(record)


def dump_yaml(form: CanonicalForm) -> str:
    return yaml.safe_dump(to_dict(form), sort_keys=False)


def load_yaml(text: str) -> CanonicalForm:
    try:
        record = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CanonicalFormError(f"invalid YAML graph record: {exc}") from exc
    return from_dict(record)


def encode_graph(g: WeightedGraph, config: Optional[TranscodeConfig] = None) -> str:
    """Serialize g to a JSON record via its canonical form."""
    return dumps(CanonicalForm.from_graph(g, config), config)


def decode_graph(text: str, backend: Type[G], **backend_kwargs: Any) -> G:
    """Build a backend instance from a JSON record produced by encode_graph."""
    return loads(text).to_graph(backend, **backend_kwargs)
