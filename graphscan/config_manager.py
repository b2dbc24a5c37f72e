"""Configuration manager for graphscan using TOML files."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable

import toml

from . import config

logger = logging.getLogger(__name__)


def default_scan_config() -> Dict[str, Any]:
    return {
        "max_workers": config.DEFAULT_MAX_WORKERS,
        "extensions": sorted(config.ACCEPTED_EXTENSIONS),
        "skip_dirs": sorted(config.SKIP_DIRS),
    }


def load_full_config() -> Dict[str, Any]:
    """Load the entire TOML config (all sections)."""
    if not config.CONFIG_FILE.exists():
        return {}
    try:
        with open(config.CONFIG_FILE, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config.CONFIG_FILE, exc)
        return {}


def _save_full_config(data: Dict[str, Any]) -> bool:
    """Write the entire config dict to the TOML file, preserving all sections."""
    config.ensure_base_dirs()
    try:
        with open(config.CONFIG_FILE, "w", encoding="utf-8") as f:
            toml.dump(data, f)
        return True
    except OSError as exc:
        logger.error("Could not write config %s: %s", config.CONFIG_FILE, exc)
        return False


def load_scan_config() -> Dict[str, Any]:
    """Return the ``[scan]`` section merged over the defaults.

    Unknown extensions are lower-cased and stripped of a leading dot so
    ``.JS`` and ``js`` mean the same thing.
    """
    merged = default_scan_config()
    section = load_full_config().get("scan", {})
    if not isinstance(section, dict):
        return merged

    workers = section.get("max_workers")
    if isinstance(workers, int) and workers > 0:
        merged["max_workers"] = workers
    extensions = section.get("extensions")
    if isinstance(extensions, list) and extensions:
        merged["extensions"] = normalize_extensions(extensions)
    skip_dirs = section.get("skip_dirs")
    if isinstance(skip_dirs, list):
        merged["skip_dirs"] = sorted({str(d) for d in skip_dirs})
    return merged


def save_scan_config(**values: Any) -> bool:
    """Update keys of the ``[scan]`` section, keeping everything else."""
    data = load_full_config()
    section = data.get("scan", {})
    if not isinstance(section, dict):
        section = {}
    section.update(values)
    data["scan"] = section
    return _save_full_config(data)


def clear_scan_config() -> bool:
    data = load_full_config()
    data.pop("scan", None)
    return _save_full_config(data)


def normalize_extensions(extensions: Iterable[str]) -> list[str]:
    return sorted({str(e).strip().lstrip(".").lower() for e in extensions if str(e).strip()})
