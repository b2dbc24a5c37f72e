"""Resolve import specifiers to registered nodes."""

from __future__ import annotations

import logging
from typing import Optional

from .classifier import PYTHON_FAMILY
from .config import RESOLVE_SUFFIXES
from .extractor import ImportSpec
from .models import Node
from .registry import NodeRegistry

logger = logging.getLogger(__name__)


def split_dir(path: str) -> str:
    """Return the directory part of a slash-separated relative path."""
    return path.rsplit("/", 1)[0] if "/" in path else ""


def resolve_path(base_dir: str, relative_spec: str, registry: NodeRegistry) -> str:
    """Join *relative_spec* onto *base_dir* and probe extensions.

    ``..`` pops a segment (no-op at the top), ``.`` is skipped. When the
    result has no ``.`` the suffixes in ``RESOLVE_SUFFIXES`` are tried in
    order against the registry; otherwise, or if none exists, the bare
    candidate is returned.
    """
    parts = [p for p in base_dir.split("/") if p]
    for segment in relative_spec.split("/"):
        if segment == "..":
            if parts:
                parts.pop()
        elif segment != ".":
            parts.append(segment)

    resolved = "/".join(parts)
    if "." not in resolved:
        for suffix in RESOLVE_SUFFIXES:
            if registry.lookup(resolved + suffix) is not None:
                return resolved + suffix
    return resolved


def resolve_import(source_path: str, spec: ImportSpec, registry: NodeRegistry) -> Optional[Node]:
    """Return the node *spec* refers to, or None when it cannot be found."""
    if spec.family == PYTHON_FAMILY:
        target = registry.find_by_path(spec.raw)
    else:
        candidate = resolve_path(split_dir(source_path), spec.raw, registry)
        target = registry.find_by_path(candidate)

    if target is None:
        logger.debug("Unresolved import %r in %s", spec.raw, source_path)
    return target
