"""Find, create, and update the Chromatic config file for a Storybook project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from turbosnap_helper.application.context import (
    EXIT_CHOICE,
    NODE_MODULES_IGNORE,
    HelperContext,
    exit_with_message,
)
from turbosnap_helper.application.package_json import (
    SCRIPT_NAME,
    config_file_flag,
    read_manifest,
)
from turbosnap_helper.application.project_detection import storybook_base_dir
from turbosnap_helper.application.static_assets import merge_externals, prompt_for_externals
from turbosnap_helper.config.contracts import (
    CONFIG_FILENAME,
    CONFIG_SCHEMA_URL,
    ChromaticConfig,
    format_project_id,
    load_chromatic_config,
    save_chromatic_config,
)
from turbosnap_helper.domain.models import Choice, ProjectMeta

logger = logging.getLogger(__name__)

PROJECT_ID_QUESTION = (
    "What is your Chromatic project ID? Hint: locate your project ID in the URL of your "
    "Chromatic project. (chromatic.com/builds?appId=...)"
)


@dataclass(frozen=True)
class ConfigResult:
    path: Path
    config: ChromaticConfig
    created: bool = False


def _bulleted(entries: list[str]) -> str:
    return "\n".join(f"- {entry}" for entry in entries) if entries else "None"


def _config_from_package_script(ctx: HelperContext, base_dir: Path) -> ConfigResult | None:
    manifest_path = base_dir / "package.json"
    try:
        if not manifest_path.is_file():
            return None
        scripts = read_manifest(manifest_path).get("scripts") or {}
        script = scripts.get(SCRIPT_NAME) if isinstance(scripts, dict) else None
        referenced = config_file_flag(script) if isinstance(script, str) else None
        if referenced is None:
            return None
        config_path = base_dir / referenced
        if not config_path.is_file():
            ctx.console.panel(
                f"Config file {referenced} referenced in package.json does not exist.",
                title="⚠️ Warning",
                tone="warning",
            )
            return None
        ctx.console.panel(
            f"Found config file referenced in package.json: {referenced}",
            title="📝 Config File Found",
            tone="success",
        )
        if not ctx.prompter.confirm(
            f"Would you like to use the config file referenced in package.json ({referenced})?",
            default=True,
        ):
            return None
        return ConfigResult(path=config_path, config=load_chromatic_config(config_path))
    except (OSError, ValueError) as exc:
        logger.warning("config.package_reference_failed path=%s error=%s", manifest_path, exc)
        ctx.console.panel(
            "Could not read package.json or the referenced config file.",
            title="⚠️ Warning",
            tone="warning",
        )
        return None


def find_chromatic_config(ctx: HelperContext, config_dir: str) -> ConfigResult | None:
    """Look for an existing config: default location, other `*.config.json`, then package.json."""
    base_dir = ctx.root / storybook_base_dir(config_dir)
    default_path = base_dir / CONFIG_FILENAME
    if default_path.is_file():
        ctx.console.panel(
            f"Found default config file: {ctx.relative(default_path)}",
            title="📝 Config File Found",
            tone="success",
        )
        return ConfigResult(path=default_path, config=load_chromatic_config(default_path))

    candidates: dict[str, None] = {}
    for search_dir in (ctx.root / config_dir, base_dir):
        for found in ctx.finder.glob(
            "**/*.config.json", cwd=str(search_dir), ignore=NODE_MODULES_IGNORE, absolute=True
        ):
            candidates[found] = None
    if not candidates:
        return _config_from_package_script(ctx, base_dir)

    count = len(candidates)
    ctx.console.panel(
        f"I found {count} config {'file' if count == 1 else 'files'} in your project.",
        title="📝 Config Files Found",
        tone="success",
    )
    if not ctx.prompter.confirm(
        "Would you like to use one of these existing config files?", default=True
    ):
        return None
    selected = ctx.prompter.select(
        "Which config file would you like to use?",
        [Choice(label=ctx.relative(path), value=path) for path in candidates],
    )
    selected_path = Path(selected)
    ctx.console.panel(
        f"Selected config file: {ctx.relative(selected_path)}",
        title="✅ Config Selected",
        tone="success",
    )
    return ConfigResult(path=selected_path, config=load_chromatic_config(selected_path))


def _choose_config_path(ctx: HelperContext, meta: ProjectMeta) -> Path:
    default_path = ctx.root / meta.storybook_base_dir / CONFIG_FILENAME
    relative_default = ctx.relative(default_path)
    location = ctx.prompter.select(
        "Where would you like to place the config file?",
        [
            Choice(label=f"Storybook base directory ({relative_default})", value="base"),
            Choice(label="Custom location", value="custom"),
            Choice(label="Exit", value=EXIT_CHOICE),
        ],
    )
    if location == EXIT_CHOICE:
        exit_with_message(ctx.console)
    if location != "custom":
        return default_path
    custom = ctx.prompter.text(
        "Enter the path for the config file (relative to project root):",
        default=relative_default,
    )
    if not custom:
        exit_with_message(ctx.console, "No path provided. Configuration helper exited.")
    return ctx.root / custom


def create_chromatic_config(ctx: HelperContext, meta: ProjectMeta) -> ConfigResult:
    ctx.console.panel(
        "I'll help you create a Chromatic config file with your Storybook settings.",
        title="📝 Creating Chromatic Config",
        tone="accent",
    )
    base_dir = ctx.root / meta.storybook_base_dir
    existing = ctx.finder.glob(
        f"**/{CONFIG_FILENAME}", cwd=str(base_dir), ignore=NODE_MODULES_IGNORE
    )
    if existing:
        count = len(existing)
        ctx.console.panel(
            f"I found {count} existing Chromatic config {'file' if count == 1 else 'files'} "
            "in your Storybook project.",
            title="📝 Existing Config Found",
            tone="warning",
        )
        if ctx.prompter.confirm(
            "Would you like to update one of these existing config files instead of creating a new one?",
            default=True,
        ):
            selected = ctx.prompter.select(
                "Which config file would you like to update?",
                [Choice(label=path, value=path) for path in existing],
            )
            config_path = base_dir / selected
            return update_chromatic_config(
                ctx, config_path, load_chromatic_config(config_path), meta
            )

    project_id = ctx.prompter.text(PROJECT_ID_QUESTION).strip()
    if not project_id:
        exit_with_message(ctx.console, "No project ID provided. Configuration helper exited.")
    config_path = _choose_config_path(ctx, meta)

    config = ChromaticConfig(
        schema_url=CONFIG_SCHEMA_URL,
        project_id=format_project_id(project_id),
        storybook_base_dir=meta.storybook_base_dir,
        storybook_config_dir=meta.storybook_config_dir,
        storybook_build_dir=meta.storybook_build_dir,
        only_changed=True,
    )
    selection = prompt_for_externals(ctx, list(meta.static_assets))
    if selection is not None:
        new_externals, _ = selection
        ctx.console.panel(
            f"The following will be added to externals:\n{_bulleted(new_externals)}",
            title="📦 Externals Update",
            tone="warning",
        )
        if ctx.prompter.confirm(
            "Do you want to proceed with these externals changes?", default=True
        ):
            config = config.model_copy(update={"externals": new_externals})

    save_chromatic_config(config_path, config)
    logger.info("config.created path=%s", config_path)
    return ConfigResult(path=config_path, config=config, created=True)


def update_chromatic_config(
    ctx: HelperContext,
    config_path: Path,
    existing: ChromaticConfig,
    meta: ProjectMeta,
) -> ConfigResult:
    """Rewrite the Storybook paths (and optionally externals), preserving every other key."""
    if not ctx.prompter.confirm(
        "Would you like to update the existing Chromatic config with the Storybook settings?",
        default=True,
    ):
        exit_with_message(ctx.console, "No changes were made to the configuration file.")

    ctx.console.panel(
        f"The following settings will be updated in {ctx.relative(config_path)}:\n"
        f"Base Directory: {meta.storybook_base_dir}\n"
        f"Config Directory: {meta.storybook_config_dir}\n"
        f"Build Directory: {meta.storybook_build_dir}",
        title="📝 Configuration Changes",
        tone="warning",
    )
    if not ctx.prompter.confirm("Do you want to proceed with these changes?", default=True):
        ctx.console.panel(
            "No changes were made to the configuration file.",
            title="⚠️ Update Cancelled",
            tone="warning",
        )
        return ConfigResult(path=config_path, config=existing)

    updated = existing.model_copy(
        update={
            "schema_url": existing.schema_url or CONFIG_SCHEMA_URL,
            "storybook_base_dir": meta.storybook_base_dir,
            "storybook_config_dir": meta.storybook_config_dir,
            "storybook_build_dir": meta.storybook_build_dir,
        }
    )
    selection = prompt_for_externals(ctx, list(meta.static_assets))
    if selection is not None:
        new_externals, use_glob = selection
        current = list(existing.externals or [])
        merged = merge_externals(current, new_externals, use_glob=use_glob)
        preserved = merged[: len(merged) - len(new_externals)]
        ctx.console.panel(
            f"The following will be added to externals:\n{_bulleted(new_externals)}\n\n"
            f"The following existing externals will be preserved:\n{_bulleted(preserved)}",
            title="📦 Externals Update",
            tone="warning",
        )
        if ctx.prompter.confirm(
            "Do you want to proceed with these externals changes?", default=True
        ):
            updated = updated.model_copy(update={"externals": merged})

    save_chromatic_config(config_path, updated)
    logger.info("config.updated path=%s", config_path)
    return ConfigResult(path=config_path, config=updated)


def display_config_result(ctx: HelperContext, result: ConfigResult) -> None:
    config = result.config
    ctx.console.panel(
        f"✅ Chromatic config {ctx.relative(result.path)} has been "
        f"{'created' if result.created else 'updated'} with:\n"
        f"Project ID: {config.project_id}\n"
        f"Base Directory: {config.storybook_base_dir}\n"
        f"Config Directory: {config.storybook_config_dir}\n"
        f"Build Directory: {config.storybook_build_dir}",
        title="🎉 Success!",
        tone="success",
    )
