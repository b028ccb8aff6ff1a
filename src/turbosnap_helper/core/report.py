"""Aggregate per-file import diagnostics into grouped summaries and panel text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from turbosnap_helper.core.preview_analysis import IMPORT_THRESHOLD, exceeds_import_threshold
from turbosnap_helper.domain.models import ImportSet, PreviewAnalysis, StoryAnalysis

PreviewWarning = Literal["monorepo", "import_count", "shared_wrappers", "dynamic_imports"]
PREVIEW_WARNINGS: tuple[PreviewWarning, ...] = (
    "monorepo",
    "import_count",
    "shared_wrappers",
    "dynamic_imports",
)

HIGH_IMPORT_COUNT_GUIDANCE = """\
📦 Why this matters:
TurboSnap treats .storybook/preview.js|ts as a global file that affects all stories.
Any change to a file imported here (or its transitive dependencies) will trigger a full \
rebuild of all stories, even those that are unrelated.

💡 Recommendations:
- Move frequently changing logic (ex. layout wrappers, dev-only toggles) into wrapper \
components and import them directly in specific stories that need them.
- Keep your preview file lean. Only include stable global config like:
  - ThemeProviders
  - Global styles
  - i18n providers
  - Storybook decorators

✅ Doing this ensures TurboSnap only retests affected stories, keeping your builds faster \
and more focused."""

MONOREPO_GUIDANCE = (
    "This repository declares workspaces. Changes to shared packages outside the Storybook "
    "project can still invalidate the preview file; consider listing them in externals."
)


@dataclass(frozen=True)
class ImportTotals:
    files: int = 0
    static_imports: int = 0
    dynamic_imports: int = 0
    files_with_dynamic_imports: int = 0


def import_totals(import_sets: Iterable[ImportSet]) -> ImportTotals:
    files = static_count = dynamic_count = with_dynamic = 0
    for imports in import_sets:
        files += 1
        static_count += len(imports.static_imports)
        dynamic_count += len(imports.dynamic_imports)
        if imports.has_dynamic_imports:
            with_dynamic += 1
    return ImportTotals(
        files=files,
        static_imports=static_count,
        dynamic_imports=dynamic_count,
        files_with_dynamic_imports=with_dynamic,
    )


@dataclass(frozen=True)
class StorySummary:
    """Story records grouped by where dynamic imports were found."""

    stories: tuple[StoryAnalysis, ...]
    story_totals: ImportTotals
    component_totals: ImportTotals
    stories_with_dynamic_imports: tuple[StoryAnalysis, ...]
    components_with_dynamic_imports: tuple[StoryAnalysis, ...]

    @property
    def has_issues(self) -> bool:
        return bool(self.stories_with_dynamic_imports or self.components_with_dynamic_imports)


def preview_warnings(record: PreviewAnalysis) -> tuple[PreviewWarning, ...]:
    """Return every warning category the record triggers, each evaluated independently."""
    triggered: list[PreviewWarning] = []
    if record.is_monorepo:
        triggered.append("monorepo")
    if exceeds_import_threshold(record.total_imports):
        triggered.append("import_count")
    if record.has_shared_wrappers:
        triggered.append("shared_wrappers")
    if record.dynamic_imports:
        triggered.append("dynamic_imports")
    return tuple(triggered)


@dataclass(frozen=True)
class PreviewSummary:
    """Preview records grouped by warning category."""

    previews: tuple[PreviewAnalysis, ...]
    warnings: dict[PreviewWarning, tuple[PreviewAnalysis, ...]] = field(default_factory=dict)

    @property
    def has_issues(self) -> bool:
        return any(self.warnings.get(category) for category in PREVIEW_WARNINGS)


@dataclass(frozen=True)
class AnalysisReport:
    stories: StorySummary
    previews: PreviewSummary

    @property
    def has_issues(self) -> bool:
        return self.stories.has_issues or self.previews.has_issues


def summarize_stories(records: Sequence[StoryAnalysis]) -> StorySummary:
    components = [record for record in records if record.component_analysis is not None]
    return StorySummary(
        stories=tuple(records),
        story_totals=import_totals(record.imports for record in records),
        component_totals=import_totals(
            record.component_analysis
            for record in components
            if record.component_analysis is not None
        ),
        stories_with_dynamic_imports=tuple(
            record for record in records if record.imports.has_dynamic_imports
        ),
        components_with_dynamic_imports=tuple(
            record
            for record in components
            if record.component_analysis is not None
            and record.component_analysis.has_dynamic_imports
        ),
    )


def summarize_previews(records: Sequence[PreviewAnalysis]) -> PreviewSummary:
    grouped: dict[PreviewWarning, list[PreviewAnalysis]] = {
        category: [] for category in PREVIEW_WARNINGS
    }
    for record in records:
        for category in preview_warnings(record):
            grouped[category].append(record)
    return PreviewSummary(
        previews=tuple(records),
        warnings={category: tuple(items) for category, items in grouped.items()},
    )


def summarize(records: Iterable[StoryAnalysis | PreviewAnalysis]) -> AnalysisReport:
    """Group story and preview records; empty input yields an issue-free report."""
    stories: list[StoryAnalysis] = []
    previews: list[PreviewAnalysis] = []
    for record in records:
        if isinstance(record, PreviewAnalysis):
            previews.append(record)
        else:
            stories.append(record)
    return AnalysisReport(
        stories=summarize_stories(stories),
        previews=summarize_previews(previews),
    )


def _bullets(values: Iterable[str], indent: str = "  ") -> str:
    return "\n".join(f"{indent}- {value}" for value in values)


def render_story_results(summary: StorySummary) -> str:
    blocks: list[str] = []
    for record in summary.stories:
        lines = [
            f"{record.file}:",
            f"  Static Imports: {len(record.static_imports)}",
            f"  Dynamic Imports: {len(record.dynamic_imports)}",
            "  ⚠️ Contains dynamic imports"
            if record.dynamic_imports
            else "  ✅ All imports are static",
        ]
        if record.component_file is not None and record.component_analysis is not None:
            component = record.component_analysis
            lines.append(f"  Component: {record.component_file}")
            lines.append(f"    Static Imports: {len(component.static_imports)}")
            lines.append(f"    Dynamic Imports: {len(component.dynamic_imports)}")
            if component.dynamic_imports:
                lines.append("    ⚠️ Component contains dynamic imports")
        blocks.append("\n".join(lines))
    if not blocks:
        return "No story files were analyzed."
    return "Analysis Results:\n\n" + "\n\n".join(blocks)


def render_story_summary(summary: StorySummary) -> str:
    totals = summary.story_totals
    lines = [
        "Summary:",
        f"Total Files Analyzed: {totals.files}",
        f"Total Static Imports: {totals.static_imports}",
        f"Total Dynamic Imports: {totals.dynamic_imports}",
        f"Files with Dynamic Imports: {totals.files_with_dynamic_imports}",
    ]
    components = summary.component_totals
    if components.files:
        lines.extend(
            [
                "",
                f"Component Files Analyzed: {components.files}",
                f"Component Static Imports: {components.static_imports}",
                f"Component Dynamic Imports: {components.dynamic_imports}",
                f"Components with Dynamic Imports: {components.files_with_dynamic_imports}",
            ]
        )
    lines.append("")
    if summary.has_issues:
        lines.append("⚠️ Some files use dynamic imports which may affect Turbosnap")
        flagged = [record.file for record in summary.stories_with_dynamic_imports]
        flagged.extend(
            f"{record.component_file} (component of {record.file})"
            for record in summary.components_with_dynamic_imports
        )
        lines.append(_bullets(flagged, indent=""))
    elif not summary.stories:
        lines.append("✅ No issues found")
    else:
        lines.append("✅ All files use static imports")
    return "\n".join(lines)


def render_preview_record(record: PreviewAnalysis) -> str:
    triggered = set(preview_warnings(record))
    lines = [f"{record.file}:", f"Total Imports: {record.total_imports}"]
    if "import_count" in triggered:
        lines.append(
            f"⚠️ High number of imports ({record.total_imports}) that could trigger fallback mode"
            f" (threshold {IMPORT_THRESHOLD})"
        )
        lines.append("")
        lines.append(HIGH_IMPORT_COUNT_GUIDANCE)
        lines.append("")
    else:
        lines.append("✅ Import count is within acceptable range")
    if "shared_wrappers" in triggered:
        lines.append("⚠️ Contains shared wrappers/themes:")
        lines.append(_bullets(record.shared_wrapper_imports))
    else:
        lines.append("✅ No shared wrappers/themes detected")
    if "dynamic_imports" in triggered:
        lines.append(f"⚠️ Contains dynamic imports ({len(record.dynamic_imports)}):")
        lines.append(_bullets(record.dynamic_imports))
    else:
        lines.append("✅ All imports are static")
    if "monorepo" in triggered:
        lines.append(f"⚠️ Monorepo detected. {MONOREPO_GUIDANCE}")
    return "\n".join(lines)


def render_preview_results(summary: PreviewSummary) -> str:
    if not summary.previews:
        return "No preview files were analyzed."
    body = "\n\n".join(render_preview_record(record) for record in summary.previews)
    if not summary.has_issues:
        body += "\n\n✅ No issues found"
    return "Preview Analysis Results:\n\n" + body
