from __future__ import annotations

import json
from pathlib import Path

from turbosnap_helper.adapters.package_manager import (
    detect_package_manager,
    normalize_manager_name,
)


def test_normalize_manager_name() -> None:
    assert normalize_manager_name("yarn1") == "yarn"
    assert normalize_manager_name("yarn@4.1.0") == "yarn"
    assert normalize_manager_name("pnpm@9.0.0") == "pnpm"
    assert normalize_manager_name("npm") == "npm"


def test_detect_from_package_manager_field(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        json.dumps({"packageManager": "pnpm@9.1.0", "workspaces": ["apps/*"]}),
        encoding="utf-8",
    )
    info = detect_package_manager(tmp_path)
    assert info.name == "pnpm"
    assert info.is_monorepo
    assert info.root == tmp_path.resolve()


def test_detect_from_lockfile_in_parent_directory(tmp_path: Path) -> None:
    (tmp_path / "yarn.lock").write_text("", encoding="utf-8")
    (tmp_path / "package.json").write_text(json.dumps({"name": "root"}), encoding="utf-8")
    project = tmp_path / "packages" / "ui"
    project.mkdir(parents=True)

    info = detect_package_manager(project)

    assert info.name == "yarn"
    assert not info.is_monorepo
    assert info.root == tmp_path.resolve()
