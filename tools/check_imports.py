"""Validate Python layer import boundaries for turbosnap_helper."""

from __future__ import annotations

import ast
from pathlib import Path

PACKAGE = "turbosnap_helper"
PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SOURCE_ROOT = PROJECT_ROOT / "src" / PACKAGE
KNOWN_LAYERS = {
    "adapters",
    "application",
    "cli",
    "config",
    "core",
    "domain",
}
RULES: dict[str, set[str]] = {
    "domain": {"adapters", "application", "cli", "config", "core"},
    "core": {"adapters", "application", "cli", "config"},
}


def _layer_for_path(path: Path, source_root: Path) -> str | None:
    try:
        relative = path.relative_to(source_root)
    except ValueError:
        return None
    if len(relative.parts) < 2:
        return None
    return relative.parts[0]


def _layer_from_module(module_name: str) -> str | None:
    parts = module_name.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE:
        return None
    return parts[1] if parts[1] in KNOWN_LAYERS else None


def _absolute_module(node: ast.ImportFrom, path: Path, source_root: Path) -> str | None:
    if node.level == 0:
        return node.module
    relative = path.relative_to(source_root)
    package_parts = [PACKAGE, *relative.with_suffix("").parts[:-1]]
    if node.level - 1 >= len(package_parts):
        return None
    base = package_parts[: len(package_parts) - (node.level - 1)]
    return ".".join([*base, *(node.module.split(".") if node.module else [])])


def _imported_layers(node: ast.Import | ast.ImportFrom, path: Path, source_root: Path) -> set[str]:
    layers: set[str] = set()
    if isinstance(node, ast.Import):
        for alias in node.names:
            layer = _layer_from_module(alias.name)
            if layer is not None:
                layers.add(layer)
        return layers

    module = _absolute_module(node, path, source_root)
    if module is None:
        return layers
    direct = _layer_from_module(module)
    if direct is not None:
        layers.add(direct)
    elif module == PACKAGE:
        layers.update(alias.name for alias in node.names if alias.name in KNOWN_LAYERS)
    return layers


def check_file(path: Path, source_root: Path = DEFAULT_SOURCE_ROOT) -> list[str]:
    layer = _layer_for_path(path, source_root)
    if layer is None:
        return []
    banned_layers = RULES.get(layer, set())
    if not banned_layers:
        return []

    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    violations: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for imported_layer in sorted(_imported_layers(node, path, source_root)):
            if imported_layer in banned_layers:
                violations.append(f"{path}: {layer} must not import {PACKAGE}.{imported_layer}")
    return violations


def check_import_boundaries(source_root: Path = DEFAULT_SOURCE_ROOT) -> list[str]:
    violations: list[str] = []
    for path in sorted(source_root.rglob("*.py")):
        violations.extend(check_file(path, source_root))
    return violations


def main() -> None:
    violations = check_import_boundaries()
    if violations:
        raise SystemExit("\n".join(violations))
    print("import boundary checks passed")


if __name__ == "__main__":
    main()
