"""Pytest configuration and fixtures for graphscan tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator, List

import pytest

from graphscan.scanner import InMemoryFile


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch):
    """Point the config home at a throwaway directory for every test."""
    home = tmp_path / "graphscan_home"
    monkeypatch.setattr("graphscan.config.BASE_DIR", home)
    monkeypatch.setattr("graphscan.config.CONFIG_FILE", home / "config.toml")
    return home


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_project_path() -> Path:
    """Get path to sample test project."""
    return Path(__file__).parent / "fixtures" / "sample_project"


@pytest.fixture
def make_files() -> Callable[[Dict[str, str]], List[InMemoryFile]]:
    """Turn a ``{path: content}`` mapping into in-memory sources, keeping order."""

    def _make(mapping: Dict[str, str]) -> List[InMemoryFile]:
        return [InMemoryFile(path=path, content=content) for path, content in mapping.items()]

    return _make


@pytest.fixture
def write_tree(temp_dir: Path) -> Callable[[Dict[str, str]], Path]:
    """Write a ``{relative path: content}`` mapping under ``temp_dir``."""

    def _write(mapping: Dict[str, str]) -> Path:
        for rel, content in mapping.items():
            target = temp_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return temp_dir

    return _write
