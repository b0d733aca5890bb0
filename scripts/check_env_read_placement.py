#!/usr/bin/env python3
"""Restrict env reads to the debug configuration module."""

from __future__ import annotations

import argparse
import ast
from pathlib import Path


ALLOWED_FILES = {
    "listwindow/runtime/debug_config.py",
}


def _is_env_get_call(node: ast.Call) -> bool:
    fn = node.func
    # os.getenv(...)
    if isinstance(fn, ast.Attribute) and fn.attr == "getenv":
        if isinstance(fn.value, ast.Name) and fn.value.id == "os":
            return True
    # os.environ.get(...)
    if isinstance(fn, ast.Attribute) and fn.attr == "get":
        if isinstance(fn.value, ast.Attribute) and fn.value.attr == "environ":
            if isinstance(fn.value.value, ast.Name) and fn.value.value.id == "os":
                return True
    return False


def _is_environ_subscript(node: ast.Subscript) -> bool:
    value = node.value
    return (
        isinstance(value, ast.Attribute)
        and value.attr == "environ"
        and isinstance(value.value, ast.Name)
        and value.value.id == "os"
    )


def check_file(path: Path, rel: str) -> list[str]:
    if rel in ALLOWED_FILES:
        return []
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    violations: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Call) and _is_env_get_call(node):
            violations.append(f"{rel}:{node.lineno} env read outside debug_config")
        elif isinstance(node, ast.Subscript) and _is_environ_subscript(node):
            violations.append(f"{rel}:{node.lineno} env read outside debug_config")
    return violations


def collect_violations(root: Path) -> list[str]:
    violations: list[str] = []
    base = root.parent
    for path in sorted(root.rglob("*.py")):
        rel = path.relative_to(base).as_posix()
        violations.extend(check_file(path, rel))
    return violations


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check env read placement.")
    parser.add_argument("--root", default="listwindow")
    args = parser.parse_args(argv)

    violations = collect_violations(Path(args.root))
    if violations:
        print("Env read placement violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
