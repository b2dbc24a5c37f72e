"""Map file names to extensions, node types and language families."""

from __future__ import annotations

from typing import AbstractSet, Dict, Optional

from .config import ACCEPTED_EXTENSIONS
from .models import NodeType

EXTENSION_NODE_TYPES: Dict[str, NodeType] = {
    "js": NodeType.FILE,
    "ts": NodeType.FILE,
    "jsx": NodeType.FILE,
    "tsx": NodeType.FILE,
    "py": NodeType.SCRIPT,
    "rb": NodeType.SCRIPT,
    "go": NodeType.FILE,
    "rs": NodeType.FILE,
    "java": NodeType.FILE,
    "css": NodeType.UTILITY,
    "scss": NodeType.UTILITY,
    "less": NodeType.UTILITY,
    "html": NodeType.FILE,
    "vue": NodeType.FILE,
    "svelte": NodeType.FILE,
    "json": NodeType.COLLECTION,
    "yaml": NodeType.COLLECTION,
    "yml": NodeType.COLLECTION,
    "sql": NodeType.COLLECTION,
    "md": NodeType.UTILITY,
    "txt": NodeType.UTILITY,
}

JS_FAMILY = "js"
PYTHON_FAMILY = "python"

_FAMILIES: Dict[str, str] = {
    "js": JS_FAMILY,
    "ts": JS_FAMILY,
    "jsx": JS_FAMILY,
    "tsx": JS_FAMILY,
    "vue": JS_FAMILY,
    "svelte": JS_FAMILY,
    "py": PYTHON_FAMILY,
}


def get_file_extension(name: str) -> str:
    """Return the lower-cased extension of *name* without the dot.

    Names without a dot, or whose only dot is the leading one
    (``.gitignore``), have no extension.
    """
    base = name.rsplit("/", 1)[-1]
    idx = base.rfind(".")
    if idx <= 0:
        return ""
    return base[idx + 1:].lower()


def node_type_for_extension(ext: str) -> NodeType:
    return EXTENSION_NODE_TYPES.get(ext.lower(), NodeType.FILE)


def is_accepted(name: str, extensions: AbstractSet[str] = ACCEPTED_EXTENSIONS) -> bool:
    return get_file_extension(name) in extensions


def language_family(ext: str) -> Optional[str]:
    """Return the import-syntax family for *ext*, or None if imports are not extracted."""
    return _FAMILIES.get(ext.lower())
