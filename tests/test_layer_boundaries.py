from __future__ import annotations

import ast
from pathlib import Path

_PACKAGE = Path(__file__).resolve().parents[1] / "src" / "catalogsync"


def _collect_python_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.rglob("*.py") if path.is_file())


def _find_forbidden_imports(files: list[Path], forbidden_prefixes: tuple[str, ...]) -> list[str]:
    violations: list[str] = []
    for path in files:
        module = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(module):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(forbidden_prefixes):
                        violations.append(f"{path}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module is None:
                    continue
                if node.module.startswith(forbidden_prefixes):
                    violations.append(f"{path}: from {node.module} import ...")
    return violations


def test_contracts_import_no_adapters_or_engine() -> None:
    files = _collect_python_files(_PACKAGE / "contracts")
    violations = _find_forbidden_imports(
        files,
        ("catalogsync.engine", "catalogsync.sources", "catalogsync.store", "catalogsync.cli", "catalogsync.sdk"),
    )
    assert not violations, f"contracts import higher layers: {violations}"


def test_engine_depends_only_on_contracts() -> None:
    files = _collect_python_files(_PACKAGE / "engine")
    violations = _find_forbidden_imports(
        files, ("catalogsync.sources", "catalogsync.store", "catalogsync.cli", "catalogsync.sdk", "sqlite3", "httpx")
    )
    assert not violations, f"engine imports concrete adapters: {violations}"


def test_adapters_do_not_import_each_other() -> None:
    source_files = _collect_python_files(_PACKAGE / "sources")
    store_files = _collect_python_files(_PACKAGE / "store")
    violations = _find_forbidden_imports(source_files, ("catalogsync.store", "catalogsync.engine"))
    violations += _find_forbidden_imports(store_files, ("catalogsync.sources", "catalogsync.engine"))
    assert not violations, f"adapters cross-import: {violations}"


def test_sdk_does_not_import_cli_layer() -> None:
    violations = _find_forbidden_imports([_PACKAGE / "sdk.py"], ("catalogsync.cli",))
    assert not violations, f"sdk imports forbidden cli layer modules: {violations}"
