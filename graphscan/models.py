"""Core data models shared by the scanner, the JSON loader and the exporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set


class NodeType(str, Enum):
    FILE = "file"
    SCRIPT = "script"
    ROUTER = "router"
    ENDPOINT = "endpoint"
    SERVICE = "service"
    COLLECTION = "collection"
    UTILITY = "utility"
    TASK = "task"
    CACHE_KEY = "cache_key"
    WEBHOOK = "webhook"
    EVENT = "event"
    EXTERNAL_API = "external_api"

    @classmethod
    def coerce(cls, value: Any) -> "NodeType":
        """Return the member for *value*, falling back to ``file``."""
        try:
            return cls(value)
        except ValueError:
            return cls.FILE

    @property
    def color(self) -> str:
        return _NODE_LEGEND[self][0]

    @property
    def label(self) -> str:
        return _NODE_LEGEND[self][1]


class EdgeType(str, Enum):
    IMPORT = "import"
    ENDPOINT_HANDLER = "endpoint_handler"
    DB_READ = "db_read"
    DB_WRITE = "db_write"
    API_CALL = "api_call"
    CACHE_READ = "cache_read"
    CACHE_WRITE = "cache_write"
    WEBHOOK_RECEIVE = "webhook_receive"
    WEBHOOK_SEND = "webhook_send"
    EVENT_PUBLISH = "event_publish"
    EXPORT = "export"

    @classmethod
    def coerce(cls, value: Any) -> "EdgeType":
        """Return the member for *value*, falling back to ``import``."""
        try:
            return cls(value)
        except ValueError:
            return cls.IMPORT

    @property
    def color(self) -> str:
        return _EDGE_LEGEND[self][0]

    @property
    def label(self) -> str:
        return _EDGE_LEGEND[self][1]


# Legend consumed by the renderer: (color, label) per type.
_NODE_LEGEND: Dict[NodeType, tuple] = {
    NodeType.ENDPOINT: ("#ef4444", "Endpoint"),
    NodeType.COLLECTION: ("#f97316", "Collection"),
    NodeType.FILE: ("#3b82f6", "File"),
    NodeType.ROUTER: ("#22c55e", "Router"),
    NodeType.SCRIPT: ("#a855f7", "Script"),
    NodeType.TASK: ("#eab308", "Task"),
    NodeType.CACHE_KEY: ("#ec4899", "Cache Key"),
    NodeType.SERVICE: ("#14b8a6", "Service"),
    NodeType.UTILITY: ("#6366f1", "Utility"),
    NodeType.WEBHOOK: ("#f43f5e", "Webhook"),
    NodeType.EVENT: ("#84cc16", "Event"),
    NodeType.EXTERNAL_API: ("#06b6d4", "External API"),
}

_EDGE_LEGEND: Dict[EdgeType, tuple] = {
    EdgeType.DB_READ: ("#22c55e", "DB Read"),
    EdgeType.ENDPOINT_HANDLER: ("#3b82f6", "Endpoint Handler"),
    EdgeType.DB_WRITE: ("#f97316", "DB Write"),
    EdgeType.API_CALL: ("#a855f7", "API Call"),
    EdgeType.CACHE_READ: ("#14b8a6", "Cache Read"),
    EdgeType.CACHE_WRITE: ("#ec4899", "Cache Write"),
    EdgeType.WEBHOOK_RECEIVE: ("#eab308", "Webhook Receive"),
    EdgeType.EVENT_PUBLISH: ("#84cc16", "Event Publish"),
    EdgeType.WEBHOOK_SEND: ("#ef4444", "Webhook Send"),
    EdgeType.IMPORT: ("#58a6ff", "Import"),
    EdgeType.EXPORT: ("#a371f7", "Export"),
}

_NODE_KEYS = {"id", "name", "type", "path", "extension", "hasDb"}


@dataclass
class Node:
    id: str
    name: str
    type: NodeType
    path: str
    extension: Optional[str] = None
    has_db: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.metadata)
        data.update({
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "path": self.path,
        })
        if self.extension is not None:
            data["extension"] = self.extension
        if self.has_db:
            data["hasDb"] = True
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        """Build a node from renderer JSON; extra keys are kept in ``metadata``.

        An explicit ``"hasDb": false`` is kept in ``metadata`` as well so it
        survives a load and dump unchanged.
        """
        metadata = {k: v for k, v in data.items() if k not in _NODE_KEYS}
        if "hasDb" in data and not data["hasDb"]:
            metadata["hasDb"] = data["hasDb"]
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            type=NodeType.coerce(data.get("type")),
            path=str(data.get("path", "")),
            extension=data.get("extension"),
            has_db=bool(data.get("hasDb", False)),
            metadata=metadata,
        )


_EDGE_KEYS = {"source", "target", "type"}


@dataclass
class Edge:
    source: str
    target: str
    type: EdgeType
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.metadata)
        data.update({"source": self.source, "target": self.target, "type": self.type.value})
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        return cls(
            source=str(data.get("source", "")),
            target=str(data.get("target", "")),
            type=EdgeType.coerce(data.get("type")),
            metadata={k: v for k, v in data.items() if k not in _EDGE_KEYS},
        )


@dataclass
class Graph:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def node_ids(self) -> Set[str]:
        return {n.id for n in self.nodes}

    def get_node(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def count_by_type(self) -> Dict[str, Dict[str, int]]:
        """Count nodes and edges per type, as the legend displays them."""
        node_counts: Dict[str, int] = {}
        for node in self.nodes:
            node_counts[node.type.value] = node_counts.get(node.type.value, 0) + 1
        edge_counts: Dict[str, int] = {}
        for edge in self.edges:
            edge_counts[edge.type.value] = edge_counts.get(edge.type.value, 0) + 1
        return {"nodes": node_counts, "edges": edge_counts}

    def dangling_edges(self) -> List[Edge]:
        ids = self.node_ids()
        return [e for e in self.edges if e.source not in ids or e.target not in ids]

    def without_dangling_edges(self) -> "Graph":
        """Return a copy holding only edges whose endpoints are both present."""
        ids = self.node_ids()
        return Graph(
            nodes=list(self.nodes),
            edges=[e for e in self.edges if e.source in ids and e.target in ids],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Graph":
        return cls(
            nodes=[Node.from_dict(n) for n in data.get("nodes", [])],
            edges=[Edge.from_dict(e) for e in data.get("edges", [])],
        )
