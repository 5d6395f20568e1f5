"""
Transcoding configuration.

Controls how graphs are turned into canonical forms and serialized records.
A process-wide default is used whenever a call site does not pass its own
config; it can be replaced with set_default_config or loaded from YAML.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml


class ArcStyle(Enum):
    """
    How arcs are written into a canonical form.

    WEIGHTED: (src, dst, weight) triples.
    SIMPLE: (src, dst) pairs; weights come back as the backend's zero.
    """

    WEIGHTED = "weighted"
    SIMPLE = "simple"


@dataclass(frozen=True)
class TranscodeConfig:
    arc_style: ArcStyle = ArcStyle.WEIGHTED
    compact_nodes: bool = True  # False always writes ExtendedNodes
    json_indent: Optional[int] = None


# Default used when no explicit config is passed.
DEFAULT_CONFIG: TranscodeConfig = TranscodeConfig()


def get_default_config() -> TranscodeConfig:
    return DEFAULT_CONFIG


def set_default_config(config: TranscodeConfig) -> None:
    """Set the process-wide transcoding config."""
    global DEFAULT_CONFIG
    DEFAULT_CONFIG = config


def load_config(path: Path) -> TranscodeConfig:
    """
    Read a TranscodeConfig from a YAML file.

    Missing keys keep their defaults, e.g.:

        arc_style: simple
        compact_nodes: false
        json_indent: 2
    """
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")

    style_name = str(data.get("arc_style", ArcStyle.WEIGHTED.value)).lower()
    try:
        arc_style = ArcStyle(style_name)
    except ValueError:
        raise ValueError(f"Unknown arc_style '{style_name}' in {path}.") from None

    indent = data.get("json_indent")
    return TranscodeConfig(
        arc_style=arc_style,
        compact_nodes=bool(data.get("compact_nodes", True)),
        json_indent=int(indent) if indent is not None else None,
    )
