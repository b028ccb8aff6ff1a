"""`analyze` mode: classify imports in story files and their components."""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path

from turbosnap_helper.adapters.filesystem import read_texts
from turbosnap_helper.application.context import (
    NODE_MODULES_IGNORE,
    HelperContext,
    fail_with_message,
)
from turbosnap_helper.application.project_detection import (
    find_storybook_dirs,
    select_storybook_project,
)
from turbosnap_helper.core.component_associator import build_story_analysis
from turbosnap_helper.core.report import render_story_results, render_story_summary, summarize
from turbosnap_helper.domain.models import StoryAnalysis

logger = logging.getLogger(__name__)

STORY_GLOB = "**/*.stories.{js,jsx,ts,tsx}"


def find_story_files(ctx: HelperContext, project_root: Path) -> list[str]:
    return ctx.finder.glob(STORY_GLOB, cwd=str(project_root), ignore=NODE_MODULES_IGNORE)


def analyze_story_files(
    ctx: HelperContext, project_root: Path, story_files: list[str]
) -> list[StoryAnalysis]:
    texts = read_texts(
        ctx.finder,
        [str(project_root / story_file) for story_file in story_files],
        max_workers=ctx.max_workers,
    )

    def resolve(pattern: str) -> list[str]:
        return ctx.finder.glob(pattern, cwd=str(project_root), ignore=NODE_MODULES_IGNORE)

    def read_component(component_file: str) -> str:
        return ctx.finder.read_text(str(project_root / component_file))

    records: list[StoryAnalysis] = []
    for story_file, text in zip(story_files, texts):
        record = build_story_analysis(story_file, text, resolve, read_component)
        logger.info(
            "analyze.story file=%s static=%s dynamic=%s component=%s",
            story_file,
            len(record.static_imports),
            len(record.dynamic_imports),
            record.component_file,
        )
        records.append(record)
    return records


def display_story_report(ctx: HelperContext, records: list[StoryAnalysis]) -> None:
    summary = summarize(records).stories
    ctx.console.panel(render_story_results(summary), title="📊 Import Analysis", tone="success")
    ctx.console.panel(
        render_story_summary(summary),
        title="📊 Summary",
        tone="warning" if summary.has_issues else "success",
    )


def _announce(ctx: HelperContext, count: int, suffix: str = "to analyze") -> None:
    noun = "file" if count == 1 else "files"
    ctx.console.panel(f"Found {count} story {noun} {suffix}.", title="📚 Story Files", tone="accent")


def run_analyze(ctx: HelperContext) -> None:
    ctx.console.panel(
        "Analyzing story files for import types", title="🔍 Analysis Mode", tone="accent"
    )
    storybook_dirs = find_storybook_dirs(ctx)
    if not storybook_dirs:
        story_files = find_story_files(ctx, ctx.root)
        if not story_files:
            fail_with_message(
                ctx.console,
                "No Storybook configuration directories or story files found. "
                "Please ensure you are in a Storybook project directory.",
                title="⚠️ No Storybook Config Found",
            )
        _announce(ctx, len(story_files), suffix="directly")
        display_story_report(ctx, analyze_story_files(ctx, ctx.root, story_files))
        return

    selected = select_storybook_project(ctx, storybook_dirs, verb="analyze")
    project_root = ctx.root / posixpath.dirname(selected)
    story_files = find_story_files(ctx, project_root)
    if not story_files:
        fail_with_message(
            ctx.console,
            "No story files found in the selected project.",
            title="⚠️ No Stories Found",
        )
    _announce(ctx, len(story_files))
    display_story_report(ctx, analyze_story_files(ctx, project_root, story_files))
