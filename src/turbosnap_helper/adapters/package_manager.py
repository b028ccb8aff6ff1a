"""Identify the JavaScript package manager and workspace layout of a project."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from turbosnap_helper.core.preview_analysis import MANIFEST_FILENAME, is_monorepo

logger = logging.getLogger(__name__)

LOCKFILES: tuple[tuple[str, str], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("package-lock.json", "npm"),
)
DEFAULT_PACKAGE_MANAGER = "npm"


@dataclass(frozen=True)
class PackageManagerInfo:
    """Package manager facts resolved once per run and passed to each mode."""

    name: str
    is_monorepo: bool
    root: Path


def normalize_manager_name(name: str) -> str:
    """Collapse `yarn1`, `yarn2` and `yarn@4.1.0` style names to `yarn`."""
    base = name.split("@", 1)[0].strip().lower()
    return "yarn" if base.startswith("yarn") else base


def _declared_manager(directory: Path) -> str | None:
    manifest_path = directory / MANIFEST_FILENAME
    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    declared = manifest.get("packageManager") if isinstance(manifest, dict) else None
    return declared if isinstance(declared, str) and declared else None


def _ancestors(start: Path) -> list[Path]:
    resolved = start.resolve()
    return [resolved, *resolved.parents]


def detect_package_manager(project_root: str | Path) -> PackageManagerInfo:
    """Walk up from `project_root` looking for a `packageManager` field or a lockfile."""
    start = Path(project_root)
    for directory in _ancestors(start):
        declared = _declared_manager(directory)
        if declared:
            name = normalize_manager_name(declared)
            logger.debug("package_manager.declared name=%s root=%s", name, directory)
            return PackageManagerInfo(name=name, is_monorepo=is_monorepo(directory), root=directory)
        for lockfile, name in LOCKFILES:
            if (directory / lockfile).is_file():
                logger.debug("package_manager.lockfile name=%s root=%s", name, directory)
                return PackageManagerInfo(
                    name=name, is_monorepo=is_monorepo(directory), root=directory
                )
    resolved = start.resolve()
    return PackageManagerInfo(
        name=DEFAULT_PACKAGE_MANAGER, is_monorepo=is_monorepo(resolved), root=resolved
    )
