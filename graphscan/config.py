"""Configuration constants and paths for graphscan."""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(os.environ.get("GRAPHSCAN_HOME", str(Path.home() / ".graphscan"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"

# Only files with these extensions are scanned at all.
ACCEPTED_EXTENSIONS = frozenset({
    "js", "ts", "jsx", "tsx", "py", "go", "java", "vue", "svelte", "rb",
})

# Probed in order when an import specifier has no extension.
RESOLVE_SUFFIXES = (".js", ".ts", ".jsx", ".tsx", "/index.js", "/index.ts")

HTTP_VERBS = ("get", "post", "put", "delete", "patch")

DB_METHODS = ("find", "findOne", "findMany", "create", "update", "delete", "query", "execute")

SKIP_DIRS = frozenset({
    ".git", ".hg", ".svn", ".venv", "venv", "__pycache__", "node_modules",
    "site-packages", ".tox", ".pytest_cache", "build", "dist",
    ".mypy_cache", ".ruff_cache", "htmlcov", ".eggs", ".graphscan",
})

DEFAULT_MAX_WORKERS = 8


def ensure_base_dirs() -> None:
    """Create the config directory if needed."""
    BASE_DIR.mkdir(parents=True, exist_ok=True)
