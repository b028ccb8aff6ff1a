"""Find static assets and turn a user selection into `externals` entries."""

from __future__ import annotations

import posixpath
from collections import defaultdict
from pathlib import Path

from turbosnap_helper.application.context import HelperContext
from turbosnap_helper.domain.models import Choice, StaticAssets
from turbosnap_helper.domain.ports import FileFinder

STATIC_ASSET_PATTERNS: tuple[str, ...] = (
    "**/*.{png,jpg,jpeg,gif,svg,ico,webp}",
    "**/*.{woff,woff2,ttf,otf,eot}",
    "**/*.{css,scss,sass,less}",
)
STATIC_ASSET_IGNORE: tuple[str, ...] = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.storybook/**",
    "**/storybook-static/**",
)


def find_static_assets(finder: FileFinder, *, project_root: Path, repo_root: Path) -> StaticAssets:
    """Absolute asset paths; repository assets exclude anything already found in the project."""
    project = finder.glob(
        STATIC_ASSET_PATTERNS, cwd=str(project_root), ignore=STATIC_ASSET_IGNORE, absolute=True
    )
    repo = finder.glob(
        STATIC_ASSET_PATTERNS, cwd=str(repo_root), ignore=STATIC_ASSET_IGNORE, absolute=True
    )
    seen = set(project)
    return StaticAssets(
        project_assets=tuple(project),
        repo_assets=tuple(asset for asset in repo if asset not in seen),
    )


def group_by_directory(assets: list[str]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = defaultdict(list)
    for asset in assets:
        grouped[posixpath.dirname(asset) or "."].append(asset)
    return dict(grouped)


def glob_patterns(assets: list[str]) -> list[str]:
    """One `<dir>/**/*<ext>` pattern per directory and extension, in first-seen order."""
    patterns: dict[str, None] = {}
    for asset in assets:
        directory = posixpath.dirname(asset) or "."
        extension = posixpath.splitext(asset)[1]
        patterns[f"{directory}/**/*{extension}"] = None
    return list(patterns)


def _covered_by_pattern(entry: str, pattern: str) -> bool:
    if entry == pattern:
        return True
    directory, _, extension = pattern.partition("/**/*")
    in_directory = directory == "." or entry.startswith(f"{directory}/")
    return in_directory and entry.endswith(extension)


def merge_externals(existing: list[str], new: list[str], *, use_glob: bool) -> list[str]:
    """Keep existing entries that the new entries do not already cover, then append the new ones."""
    if use_glob:
        preserved = [
            entry
            for entry in existing
            if not any(_covered_by_pattern(entry, pattern) for pattern in new)
        ]
    else:
        preserved = [entry for entry in existing if entry not in new]
    return [*preserved, *new]


def _select_individual(ctx: HelperContext, assets: list[str]) -> list[str]:
    if ctx.prompter.confirm("Would you like to see files grouped by path?", default=True):
        grouped = group_by_directory(assets)
        picked_dirs = ctx.prompter.multiselect(
            "Select paths to add to externals:",
            [
                Choice(
                    label=f"{directory} ({len(files)} files)",
                    value=directory,
                    description=", ".join(posixpath.basename(f) for f in files),
                    selected=True,
                )
                for directory, files in grouped.items()
            ],
        )
        return [asset for directory in picked_dirs for asset in grouped.get(directory, [])]
    return ctx.prompter.multiselect(
        "Select individual files to add to externals:",
        [Choice(label=asset, value=asset, selected=True) for asset in assets],
    )


def prompt_for_externals(ctx: HelperContext, assets: list[str]) -> tuple[list[str], bool] | None:
    """Walk the user through choosing externals.

    Returns the new entries and whether they are glob patterns, or None when the
    user declines or selects nothing.
    """
    if not assets:
        return None
    ctx.console.panel(
        f"I found {len(assets)} static assets in your project.",
        title="📦 Static Assets",
        tone="accent",
    )
    if not ctx.prompter.confirm(
        "Would you like to update the externals configuration with these assets?", default=True
    ):
        return None
    mode = ctx.prompter.select(
        "How would you like to select assets to add?",
        [
            Choice(label="Add all assets", value="all"),
            Choice(label="Add none", value="none"),
            Choice(label="Select individual assets", value="individual"),
        ],
    )
    if mode == "all":
        selected = list(assets)
    elif mode == "individual":
        selected = _select_individual(ctx, assets)
    else:
        selected = []
    if not selected:
        return None
    use_glob = ctx.prompter.confirm(
        "Would you like to use glob patterns instead of individual file paths?", default=True
    )
    return (glob_patterns(selected) if use_glob else selected), use_glob
