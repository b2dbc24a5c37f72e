"""Scan orchestration: turn (path, content) sources into a dependency graph.

A scan runs in two passes. Every accepted file is registered first, so
that import resolution in the second pass can see the whole file set.
File contents are read concurrently on a bounded thread pool; graph
construction itself is single-threaded and runs in input order.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import AbstractSet, Dict, Iterable, List, Optional, Protocol, Tuple

from .classifier import get_file_extension, language_family, node_type_for_extension
from .config import ACCEPTED_EXTENSIONS, DEFAULT_MAX_WORKERS, SKIP_DIRS
from .extractor import extract_imports
from .models import Edge, EdgeType, Graph, Node
from .patterns import PatternDetector
from .registry import NodeRegistry
from .resolver import resolve_import

logger = logging.getLogger(__name__)


class SourceFile(Protocol):
    """Anything with a relative ``path`` whose text can be fetched."""

    path: str

    def read_text(self) -> str:
        ...


@dataclass
class InMemoryFile:
    path: str
    content: str

    def read_text(self) -> str:
        return self.content


@dataclass
class DiskFile:
    root: Path
    path: str

    def read_text(self) -> str:
        # Stray non-UTF-8 bytes are replaced so the rest of the file is still analyzed.
        return (self.root / self.path).read_text(encoding="utf-8", errors="replace")


@dataclass
class ScanWarning:
    path: str
    reason: str


class ScanCancelled(RuntimeError):
    """Raised when the caller abandons a scan; partial results are discarded."""


@dataclass
class ScanResult:
    graph: Graph
    warnings: List[ScanWarning] = field(default_factory=list)
    files_seen: int = 0
    files_accepted: int = 0

    @property
    def is_empty(self) -> bool:
        return self.graph.is_empty


class ScanSession:
    """State for exactly one scan: a registry, an edge list and the settings."""

    def __init__(
        self,
        extensions: Optional[AbstractSet[str]] = None,
        max_workers: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.extensions = frozenset(extensions) if extensions is not None else ACCEPTED_EXTENSIONS
        self.max_workers = max(1, max_workers or DEFAULT_MAX_WORKERS)
        self.cancel_event = cancel_event
        self.registry = NodeRegistry()
        self.edges: List[Edge] = []
        self.warnings: List[ScanWarning] = []
        self._patterns = PatternDetector(self.registry, self.edges)

    def run(self, files: Iterable[SourceFile]) -> ScanResult:
        all_files = list(files)
        accepted = [f for f in all_files if get_file_extension(f.path) in self.extensions]

        # Pass 1: register every file before anything is resolved.
        owned: List[Tuple[SourceFile, Node]] = []
        for source in accepted:
            ext = get_file_extension(source.path)
            node = Node(
                id="",
                name=source.path.rsplit("/", 1)[-1],
                type=node_type_for_extension(ext),
                path=source.path,
                extension=ext,
            )
            if self.registry.register(source.path, node):
                owned.append((source, node))

        # Pass 2: imports and patterns.
        contents = self._read_all([source for source, _ in owned])
        for index, (source, node) in enumerate(owned):
            self._check_cancelled()
            content = contents.get(index)
            if content:
                self._analyze(source.path, content, node)

        graph = Graph(nodes=self.registry.all(), edges=list(self.edges))
        logger.info(
            "Scanned %d file(s): %d node(s), %d edge(s), %d warning(s)",
            len(accepted), len(self.registry), len(graph.edges), len(self.warnings),
        )
        return ScanResult(
            graph=graph,
            warnings=list(self.warnings),
            files_seen=len(all_files),
            files_accepted=len(accepted),
        )

    def _read_all(self, sources: List[SourceFile]) -> Dict[int, str]:
        contents: Dict[int, str] = {}
        if not sources:
            return contents

        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(sources)))
        try:
            future_to_index = {
                executor.submit(source.read_text): index
                for index, source in enumerate(sources)
            }
            for future in as_completed(future_to_index):
                self._check_cancelled()
                index = future_to_index[future]
                try:
                    contents[index] = future.result()
                except OSError as exc:
                    path = sources[index].path
                    logger.warning("Skipping unreadable file %s: %s", path, exc)
                    self.warnings.append(ScanWarning(path=path, reason=str(exc)))
        finally:
            executor.shutdown(wait=True, cancel_futures=True)
        return contents

    def _analyze(self, path: str, content: str, source: Node) -> None:
        family = language_family(source.extension or "")
        for spec in extract_imports(content, family):
            target = resolve_import(path, spec, self.registry)
            if target is not None and target.id != source.id:
                self.edges.append(Edge(source=source.id, target=target.id, type=EdgeType.IMPORT))
        self._patterns.detect(content, source)

    def _check_cancelled(self) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise ScanCancelled("Scan cancelled")


def scan_files(
    files: Iterable[SourceFile],
    *,
    extensions: Optional[AbstractSet[str]] = None,
    max_workers: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ScanResult:
    """Scan *files* in a fresh session and return the graph plus warnings."""
    session = ScanSession(extensions=extensions, max_workers=max_workers, cancel_event=cancel_event)
    return session.run(files)


def discover_files(root: Path, skip_dirs: AbstractSet[str] = SKIP_DIRS) -> List[DiskFile]:
    """List files under *root* as slash-separated relative paths, skipping *skip_dirs*."""
    root = root.resolve()
    found: List[DiskFile] = []
    for file_path in sorted(root.rglob("*")):
        rel = file_path.relative_to(root)
        if any(part in skip_dirs for part in rel.parts[:-1]):
            continue
        if not file_path.is_file():
            continue
        found.append(DiskFile(root=root, path=rel.as_posix()))
    return found


def scan_directory(
    root: Path,
    *,
    extensions: Optional[AbstractSet[str]] = None,
    skip_dirs: AbstractSet[str] = SKIP_DIRS,
    max_workers: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ScanResult:
    return scan_files(
        discover_files(root, skip_dirs),
        extensions=extensions,
        max_workers=max_workers,
        cancel_event=cancel_event,
    )
