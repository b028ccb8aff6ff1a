"""`preview` mode: flag preview-file imports that widen change detection."""

from __future__ import annotations

import logging

from turbosnap_helper.adapters.filesystem import read_texts
from turbosnap_helper.application.context import (
    NODE_MODULES_IGNORE,
    HelperContext,
    fail_with_message,
)
from turbosnap_helper.application.project_detection import (
    require_storybook_dirs,
    select_storybook_project,
)
from turbosnap_helper.core.preview_analysis import analyze_preview
from turbosnap_helper.core.report import render_preview_results, summarize
from turbosnap_helper.domain.models import PreviewAnalysis

logger = logging.getLogger(__name__)

PREVIEW_GLOB = "preview.{js,jsx,ts,tsx}"


def analyze_preview_files(ctx: HelperContext, config_dir: str) -> list[PreviewAnalysis]:
    config_root = ctx.root / config_dir
    preview_files = ctx.finder.glob(PREVIEW_GLOB, cwd=str(config_root), ignore=NODE_MODULES_IGNORE)
    if not preview_files:
        return []
    texts = read_texts(
        ctx.finder,
        [str(config_root / name) for name in preview_files],
        max_workers=ctx.max_workers,
    )
    records = [
        analyze_preview(f"{config_dir}/{name}", text, ctx.package_manager.root)
        for name, text in zip(preview_files, texts)
    ]
    for record in records:
        logger.info(
            "preview.analyzed file=%s total_imports=%s shared_wrappers=%s monorepo=%s",
            record.file,
            record.total_imports,
            len(record.shared_wrapper_imports),
            record.is_monorepo,
        )
    return records


def run_preview(ctx: HelperContext) -> None:
    ctx.console.panel(
        "Analyzing preview files for potential issues",
        title="🔍 Preview Analysis Mode",
        tone="accent",
    )
    storybook_dirs = require_storybook_dirs(ctx)
    selected = select_storybook_project(ctx, storybook_dirs, verb="analyze")
    records = analyze_preview_files(ctx, selected)
    if not records:
        fail_with_message(
            ctx.console,
            "No preview files found in the selected project's .storybook directory.",
            title="⚠️ No Preview Found",
        )
    summary = summarize(records).previews
    ctx.console.panel(
        render_preview_results(summary),
        title="📊 Preview Analysis",
        tone="warning" if summary.has_issues else "success",
    )
