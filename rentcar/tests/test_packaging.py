from __future__ import annotations

import ast
import re
import sys
import tomllib
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
PYPROJECT = PACKAGE_ROOT.parent / "pyproject.toml"

# Import name -> distribution name, where they differ.
DISTRIBUTIONS = {
    "flask_cors": "flask-cors",
    "jwt": "pyjwt",
    "pydantic_settings": "pydantic-settings",
}


def _declared() -> set[str]:
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
    names = set()
    for requirement in project["dependencies"]:
        names.add(re.split(r"[<>=!~\[; ]", requirement, maxsplit=1)[0].lower())
    return names


def _runtime_imports() -> set[str]:
    found: set[str] = set()
    for source in PACKAGE_ROOT.rglob("*.py"):
        if "tests" in source.relative_to(PACKAGE_ROOT).parts:
            continue
        for node in ast.walk(ast.parse(source.read_text(encoding="utf-8"))):
            if isinstance(node, ast.Import):
                found.update(alias.name.split(".")[0] for alias in node.names)
            elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
                found.add(node.module.split(".")[0])
    return {
        name
        for name in found
        if name not in sys.stdlib_module_names and name not in ("rentcar", "__future__")
    }


def test_every_runtime_import_is_declared() -> None:
    declared = _declared()
    missing = {
        DISTRIBUTIONS.get(name, name).lower()
        for name in _runtime_imports()
        if DISTRIBUTIONS.get(name, name).lower() not in declared
    }

    assert missing == set()


def test_werkzeug_is_a_direct_dependency() -> None:
    assert "werkzeug" in _declared()
