"""Per-scan node registry keyed by path."""

from __future__ import annotations

import logging
import random
import string
from typing import Dict, List, Optional, Set

from .models import Node, NodeType

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


class NodeRegistry:
    """Ordered path -> node index for one scan.

    ``register`` assigns ids; the first node registered for a path wins.
    Synthesized nodes (endpoints) are appended with ``add`` and only take
    the path key when it is still free.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._by_path: Dict[str, Node] = {}
        self._nodes: List[Node] = []
        self._ids: Set[str] = set()
        self._rng = rng or random.Random()

    def new_id(self) -> str:
        while True:
            node_id = "id_" + "".join(self._rng.choice(_ID_ALPHABET) for _ in range(9))
            if node_id not in self._ids:
                self._ids.add(node_id)
                return node_id

    def register(self, path: str, node: Node) -> bool:
        """Assign *node* a fresh id and index it under *path*.

        Returns False, leaving the earlier node untouched, when *path* is
        already registered.
        """
        if path in self._by_path:
            logger.debug("Duplicate path %s ignored", path)
            return False
        node.id = self.new_id()
        self._by_path[path] = node
        self._nodes.append(node)
        return True

    def add(self, node: Node) -> Node:
        """Append a synthesized node, indexing it under its path if free.

        Endpoint paths share the index with file paths, so a relative
        import such as ``./api/users`` from a root-level file can resolve
        to the ``/api/users`` endpoint when that route was seen first.
        """
        node.id = self.new_id()
        self._nodes.append(node)
        self._by_path.setdefault(node.path, node)
        return node

    def lookup(self, path: str) -> Optional[Node]:
        return self._by_path.get(path)

    def all(self) -> List[Node]:
        return list(self._nodes)

    def find_by_path(self, search_path: str) -> Optional[Node]:
        """Exact lookup, then the first registered path ending with *search_path*.

        Several paths can share the suffix; the earliest registered one is
        returned, which is a best-effort guess rather than a real resolution.
        """
        node = self._by_path.get(search_path)
        if node is not None:
            return node

        stripped = search_path[2:] if search_path.startswith("./") else search_path
        if not stripped:
            return None
        for path, candidate in self._by_path.items():
            if path.endswith(search_path) or path.endswith(stripped):
                return candidate
        return None

    def find_endpoint(self, name: str) -> Optional[Node]:
        for node in self._nodes:
            if node.type is NodeType.ENDPOINT and node.name == name:
                return node
        return None

    def __len__(self) -> int:
        return len(self._nodes)
