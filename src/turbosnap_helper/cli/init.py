"""`init` mode: write or update the Chromatic config for Storybook projects."""

from __future__ import annotations

from turbosnap_helper.application.config_management import (
    ConfigResult,
    create_chromatic_config,
    display_config_result,
    find_chromatic_config,
    update_chromatic_config,
)
from turbosnap_helper.application.context import HelperContext
from turbosnap_helper.application.package_json import update_package_json_script
from turbosnap_helper.application.project_detection import (
    build_project_meta,
    display_project_meta,
    require_storybook_dirs,
    select_storybook_project,
)


def configure_project(ctx: HelperContext, config_dir: str) -> ConfigResult:
    ctx.console.panel(
        f"Processing Storybook configuration in {config_dir}",
        title="📝 Storybook Project",
        tone="accent",
    )
    meta = build_project_meta(ctx, config_dir)
    display_project_meta(ctx, meta)

    found = find_chromatic_config(ctx, config_dir)
    if found is not None:
        result = update_chromatic_config(ctx, found.path, found.config, meta)
    else:
        result = create_chromatic_config(ctx, meta)
    display_config_result(ctx, result)
    update_package_json_script(ctx, result.path, meta)
    return result


def run_init(ctx: HelperContext) -> None:
    ctx.console.panel(
        "CLI tool for helping you configure Chromatic Turbosnap for your project",
        title="turbosnap-helper",
        tone="accent",
    )
    remaining = require_storybook_dirs(ctx)
    while remaining:
        selected = select_storybook_project(ctx, remaining, verb="configure")
        configure_project(ctx, selected)
        remaining = [config_dir for config_dir in remaining if config_dir != selected]
        if not remaining or not ctx.prompter.confirm(
            "Would you like to configure another Storybook project?", default=True
        ):
            break
