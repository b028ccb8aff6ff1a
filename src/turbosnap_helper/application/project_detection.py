"""Discover Storybook projects and collect the metadata the config file needs."""

from __future__ import annotations

import logging
import posixpath

from turbosnap_helper.adapters.storybook_main import read_main_config
from turbosnap_helper.application.context import (
    EXIT_CHOICE,
    NODE_MODULES_IGNORE,
    HelperContext,
    exit_with_message,
    fail_with_message,
)
from turbosnap_helper.application.static_assets import find_static_assets
from turbosnap_helper.domain.models import Choice, ProjectMeta

logger = logging.getLogger(__name__)

NO_STORYBOOK_MESSAGE = (
    "No Storybook configuration directories found. "
    "Please ensure you are in a Storybook project directory."
)


def find_storybook_dirs(ctx: HelperContext) -> list[str]:
    dirs = ctx.finder.glob(
        "**/.storybook",
        cwd=str(ctx.root),
        ignore=NODE_MODULES_IGNORE,
        only_directories=True,
    )
    logger.info("storybook.discover count=%s", len(dirs))
    return dirs


def require_storybook_dirs(ctx: HelperContext) -> list[str]:
    dirs = find_storybook_dirs(ctx)
    if not dirs:
        fail_with_message(ctx.console, NO_STORYBOOK_MESSAGE, title="⚠️ No Storybook Config Found")
    return dirs


def select_storybook_project(ctx: HelperContext, dirs: list[str], *, verb: str) -> str:
    """Ask which `.storybook` directory to use; choosing Exit ends the run cleanly."""
    noun = "project" if len(dirs) == 1 else "projects"
    ctx.console.panel(
        f"I found {len(dirs)} Storybook {noun}.",
        title="📚 Storybook Projects",
        tone="accent",
    )
    choices = [Choice(label=d, value=d, description=f"{verb.capitalize()} {d}") for d in dirs]
    choices.append(Choice(label="Exit", value=EXIT_CHOICE, description="Exit the helper"))
    selected = ctx.prompter.select(
        f"Which Storybook project would you like to {verb}?",
        choices,
    )
    if selected == EXIT_CHOICE:
        exit_with_message(ctx.console)
    return selected


def storybook_base_dir(config_dir: str) -> str:
    """`packages/ui/.storybook` -> `./packages/ui`, `.storybook` -> `.`"""
    parent = posixpath.dirname(config_dir.rstrip("/"))
    return f"./{parent}" if parent else "."


def build_project_meta(ctx: HelperContext, config_dir: str) -> ProjectMeta:
    main = read_main_config(ctx.root / config_dir)
    base_dir = storybook_base_dir(config_dir)
    assets = find_static_assets(ctx.finder, project_root=ctx.root / base_dir, repo_root=ctx.root)
    return ProjectMeta(
        storybook_base_dir=base_dir,
        storybook_config_dir=f"./{config_dir}",
        storybook_build_dir=f"./{main.build_dir}",
        package_manager=ctx.package_manager.name,
        is_monorepo=ctx.package_manager.is_monorepo,
        framework=main.framework,
        static_assets=tuple(ctx.relative(asset) for asset in assets.combined()),
    )


def display_project_meta(ctx: HelperContext, meta: ProjectMeta) -> None:
    ctx.console.panel(
        "\n".join(
            [
                f"📙 Storybook Base Directory: {meta.storybook_base_dir}",
                f"📂 Storybook Config Directory: {meta.storybook_config_dir}",
                f"📦 Storybook Build Directory: {meta.storybook_build_dir}",
                f"🧰 Package Manager: {meta.package_manager}",
                f"📝 Framework: {meta.framework}",
                f"🗂️ Monorepo: {'yes' if meta.is_monorepo else 'no'}",
            ]
        ),
        title="📝 Here are your project details",
        tone="success",
    )
