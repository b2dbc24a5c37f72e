"""Graph export helpers for JSON and Graphviz DOT outputs."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, List

from .graph_io import dump_graph
from .models import Edge, Graph, Node

EXPORT_FORMATS = ("json", "dot")


def default_export_name(fmt: str) -> str:
    return f"code-graph-{int(time.time() * 1000)}.{fmt}"


def export_json(graph: Graph, output_file: Path) -> None:
    dump_graph(graph, output_file)


def export_dot(graph: Graph, output_file: Path, focus: str = "") -> None:
    output_file.write_text(to_dot(graph, focus=focus), encoding="utf-8")


def to_dot(graph: Graph, focus: str = "") -> str:
    # Edges pointing at unknown ids are never drawn.
    graph = graph.without_dangling_edges()
    nodes = {n.id: n for n in graph.nodes}
    selected = _focused_subgraph(nodes, graph.edges, focus)

    lines = ["digraph CodeGraph {"]
    lines.append("  rankdir=LR;")
    lines.append('  node [style=filled, fontcolor="#e6edf3", color="#30363d"];')

    for node_id in selected["nodes"]:
        node = nodes[node_id]
        label = f"{node.type.value}\\n{node.name}"
        lines.append(
            f'  "{_esc(node_id)}" [label="{_esc(label)}", fillcolor="{node.type.color}"];'
        )

    for edge in selected["edges"]:
        lines.append(
            f'  "{_esc(edge.source)}" -> "{_esc(edge.target)}" '
            f'[label="{edge.type.value}", color="{edge.type.color}"];'
        )

    lines.append("}")
    return "\n".join(lines) + "\n"


def _focused_subgraph(nodes: Dict[str, Node], edges: List[Edge], focus: str) -> Dict[str, List]:
    if not focus:
        return {"nodes": list(nodes.keys()), "edges": edges}

    focus_ids = {
        node_id
        for node_id, node in nodes.items()
        if focus in node.name or focus in node.path
    }

    if not focus_ids:
        return {"nodes": list(nodes.keys()), "edges": edges}

    edge_subset = [e for e in edges if e.source in focus_ids or e.target in focus_ids]
    node_subset = set(focus_ids)
    for e in edge_subset:
        node_subset.add(e.source)
        node_subset.add(e.target)
    return {"nodes": sorted(node_subset), "edges": edge_subset}


def _esc(text: str) -> str:
    return text.replace('"', '\\"')
