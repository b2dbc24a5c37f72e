"""Framework route and database-call heuristics."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Set

from .config import DB_METHODS, HTTP_VERBS
from .models import Edge, EdgeType, Node, NodeType
from .registry import NodeRegistry

logger = logging.getLogger(__name__)

_VERBS = "|".join(HTTP_VERBS)

ROUTE_PATTERNS = (
    # Express-style app.get('/path', ...)
    re.compile(rf"""app\.({_VERBS})\s*\(\s*['"]([^'"]+)['"]""", re.IGNORECASE),
    # router.post('/path', ...)
    re.compile(rf"""router\.({_VERBS})\s*\(\s*['"]([^'"]+)['"]""", re.IGNORECASE),
    # Decorators / annotations: @Get('/path'), @app.get("/path") is covered above
    re.compile(rf"""@({_VERBS})\s*\(\s*['"]([^'"]+)['"]""", re.IGNORECASE),
)

_DB_CALL_RE = re.compile(r"\.(?:" + "|".join(DB_METHODS) + r")", re.IGNORECASE)


@dataclass(frozen=True)
class RouteMatch:
    method: str
    path: str


def find_routes(content: str) -> List[RouteMatch]:
    """Return every route registration, pattern by pattern, in match order."""
    routes: List[RouteMatch] = []
    for pattern in ROUTE_PATTERNS:
        for match in pattern.finditer(content):
            routes.append(RouteMatch(method=match.group(1).upper(), path=match.group(2)))
    return routes


def has_db_operations(content: str) -> bool:
    return _DB_CALL_RE.search(content) is not None


class PatternDetector:
    """Adds endpoint nodes, ``endpoint_handler`` edges and DB flags for one scan."""

    def __init__(self, registry: NodeRegistry, edges: List[Edge]) -> None:
        self.registry = registry
        self.edges = edges

    def detect(self, content: str, source: Node) -> None:
        linked: Set[str] = set()
        for route in find_routes(content):
            endpoint = self.registry.find_endpoint(route.path)
            if endpoint is None:
                endpoint = self.registry.add(Node(
                    id="",
                    name=route.path,
                    type=NodeType.ENDPOINT,
                    path=route.path,
                ))
                logger.debug("Endpoint %s %s found in %s", route.method, route.path, source.path)
            if endpoint.id in linked or endpoint.id == source.id:
                continue
            linked.add(endpoint.id)
            self.edges.append(Edge(
                source=source.id,
                target=endpoint.id,
                type=EdgeType.ENDPOINT_HANDLER,
            ))

        if not source.has_db and has_db_operations(content):
            source.has_db = True
