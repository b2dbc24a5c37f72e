"""graphscan - heuristic dependency-graph scanner for source folders."""

__version__ = "1.0.0"

from graphscan.models import Edge, EdgeType, Graph, Node, NodeType
from graphscan.scanner import InMemoryFile, ScanResult, scan_directory, scan_files

__all__ = [
    "Edge",
    "EdgeType",
    "Graph",
    "InMemoryFile",
    "Node",
    "NodeType",
    "ScanResult",
    "scan_directory",
    "scan_files",
    "__version__",
]
