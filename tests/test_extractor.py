"""Tests for regex import extraction."""

from graphscan.extractor import (
    ImportSpec,
    extract_imports,
    extract_js_imports,
    extract_python_imports,
    python_module_to_path,
)


def test_js_default_import():
    assert extract_js_imports("import UserRouter from './routes/userRouter.js'") == [
        "./routes/userRouter.js"
    ]


def test_js_import_forms():
    code = '''
import React from "react";
import { a, b } from './named';
import * as utils from "../utils";
import Default, { helper } from './mixed';
import './side-effect.css';
import type { Props } from './types';
import {
  one,
  two,
} from './multiline';
'''
    assert extract_js_imports(code) == [
        "./named",
        "../utils",
        "./mixed",
        "./side-effect.css",
        "./types",
        "./multiline",
    ]


def test_js_require_calls():
    code = "const a = require('./a'); const b = require( \"../b/c\" ); const fs = require('fs');"
    assert extract_js_imports(code) == ["./a", "../b/c"]


def test_js_finds_all_statements_on_one_line():
    code = "import a from './a'; import b from './b'; const c = require('./c');"
    assert extract_js_imports(code) == ["./a", "./b", "./c"]


def test_js_package_specifiers_are_discarded():
    code = "import express from 'express';\nimport x from '@scope/pkg';\nrequire('lodash');"
    assert extract_js_imports(code) == []


def test_python_from_import():
    assert extract_python_imports("from models.user import User") == ["models/user.py"]


def test_python_plain_import_and_multiple_statements():
    code = "import os\nimport app.services.users\nfrom a.b import c\nfrom d import e\n"
    assert extract_python_imports(code) == ["a/b.py", "d.py", "os.py", "app/services/users.py"]


def test_python_indented_import_is_not_seen():
    code = "def load():\n    import plugins.extra\n    return plugins\n"
    assert extract_python_imports(code) == []


def test_python_indented_from_import_is_seen():
    code = "if True:\n    from plugins.extra import hook\n"
    assert extract_python_imports(code) == ["plugins/extra.py"]


def test_python_module_to_path():
    assert python_module_to_path("a.b.c") == "a/b/c.py"
    assert python_module_to_path("single") == "single.py"


def test_extract_imports_dispatches_by_family():
    js = extract_imports("import a from './a'", "js")
    py = extract_imports("from pkg.mod import x", "python")

    assert js == [ImportSpec("./a", "js")]
    assert py == [ImportSpec("pkg/mod.py", "python")]
    assert extract_imports("import a from './a'", None) == []
