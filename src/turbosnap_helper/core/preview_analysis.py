"""Heuristic diagnostics for the project-wide Storybook preview file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from turbosnap_helper.core.import_classifier import classify
from turbosnap_helper.core.shared_wrappers import detect_shared_wrappers
from turbosnap_helper.domain.models import PreviewAnalysis

logger = logging.getLogger(__name__)

IMPORT_THRESHOLD = 10
MANIFEST_FILENAME = "package.json"


def exceeds_import_threshold(total_imports: int, threshold: int = IMPORT_THRESHOLD) -> bool:
    """Imports above the threshold can push the visual-testing run into full rebuilds."""
    return total_imports > threshold


def _workspace_patterns(manifest: object) -> list[str]:
    if not isinstance(manifest, dict):
        return []
    workspaces = manifest.get("workspaces")
    if isinstance(workspaces, dict):
        workspaces = workspaces.get("packages")
    if not isinstance(workspaces, list):
        return []
    return [pattern for pattern in workspaces if isinstance(pattern, str) and pattern]


def is_monorepo(repo_root: str | Path) -> bool:
    """Return True when the manifest at `repo_root` declares workspace members."""
    manifest_path = Path(repo_root) / MANIFEST_FILENAME
    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("monorepo.check_skipped path=%s reason=%s", manifest_path, exc)
        return False
    return bool(_workspace_patterns(manifest))


def analyze_preview(file: str, text: str, repo_root_hint: str | Path) -> PreviewAnalysis:
    imports = classify(text)
    shared = detect_shared_wrappers([*imports.static_imports, *imports.dynamic_imports])
    return PreviewAnalysis(
        file=file,
        total_imports=imports.total,
        shared_wrapper_imports=tuple(shared),
        static_imports=imports.static_imports,
        dynamic_imports=imports.dynamic_imports,
        is_monorepo=is_monorepo(repo_root_hint),
    )
