"""Load and save graph JSON in the renderer's ``{nodes, edges}`` shape."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .models import Graph


class GraphFormatError(ValueError):
    """The payload is not a usable graph; nothing should be loaded."""


def normalize_graph_payload(data: Any) -> Dict[str, Any]:
    """Validate *data* and return a payload that always carries ``edges``.

    The legacy ``links`` key is accepted in place of ``edges``.
    """
    if not isinstance(data, dict):
        raise GraphFormatError("Invalid JSON: expected an object with nodes and edges")
    if not isinstance(data.get("nodes"), list):
        raise GraphFormatError("Invalid JSON: missing nodes array")

    edges = data.get("edges")
    if edges is None:
        edges = data.get("links")
    if not isinstance(edges, list):
        raise GraphFormatError("Invalid JSON: missing edges/links array")

    for item in data["nodes"]:
        if not isinstance(item, dict):
            raise GraphFormatError("Invalid JSON: every node must be an object")
    for item in edges:
        if not isinstance(item, dict):
            raise GraphFormatError("Invalid JSON: every edge must be an object")

    payload = dict(data)
    payload["edges"] = edges
    payload.pop("links", None)
    return payload


def loads_graph(text: str) -> Graph:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"Failed to parse JSON: {exc}") from exc
    return Graph.from_dict(normalize_graph_payload(data))


def load_graph(path: Path) -> Graph:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphFormatError(f"Failed to read {path}: {exc}") from exc
    return loads_graph(text)


def dumps_graph(graph: Graph) -> str:
    return json.dumps(graph.to_dict(), indent=2)


def dump_graph(graph: Graph, path: Path) -> None:
    path.write_text(dumps_graph(graph), encoding="utf-8")
