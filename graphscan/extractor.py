"""Regex-based import extraction for JS-like and Python sources.

This is token matching, not parsing: statements inside comments or strings
are picked up too, and Python imports nested in blocks are missed because
the plain ``import`` matcher is anchored at the start of a line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from .classifier import JS_FAMILY, PYTHON_FAMILY

# import X from './a', import {a, b} from './a', import * as X from './a', import './a'
_ES_IMPORT_RE = re.compile(r"""\bimport\s+(?:[\w*{}\s,$]+?\s+from\s+)?['"]([^'"]+)['"]""")
_REQUIRE_RE = re.compile(r"""\brequire\s*\(\s*['"]([^'"]+)['"]\s*\)""")

_PY_FROM_RE = re.compile(r"\bfrom\s+([\w.]+)\s+import\b")
_PY_IMPORT_RE = re.compile(r"^import\s+([\w.]+)", re.MULTILINE)


@dataclass(frozen=True)
class ImportSpec:
    raw: str
    family: str


def extract_js_imports(content: str) -> List[str]:
    """Return relative ES-module and CommonJS specifiers in match order."""
    specs = [m.group(1) for m in _ES_IMPORT_RE.finditer(content)]
    specs.extend(m.group(1) for m in _REQUIRE_RE.finditer(content))
    return [s for s in specs if s.startswith(".")]


def python_module_to_path(module: str) -> str:
    return module.replace(".", "/") + ".py"


def extract_python_imports(content: str) -> List[str]:
    """Return candidate file paths for ``from x import`` and ``import x`` statements."""
    modules = [m.group(1) for m in _PY_FROM_RE.finditer(content)]
    modules.extend(m.group(1) for m in _PY_IMPORT_RE.finditer(content))
    return [python_module_to_path(m) for m in modules]


def extract_imports(content: str, family: Optional[str]) -> List[ImportSpec]:
    if family == JS_FAMILY:
        return [ImportSpec(s, JS_FAMILY) for s in extract_js_imports(content)]
    if family == PYTHON_FAMILY:
        return [ImportSpec(s, PYTHON_FAMILY) for s in extract_python_imports(content)]
    return []
