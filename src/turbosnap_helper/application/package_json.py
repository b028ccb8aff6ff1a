"""Keep the `chromatic` script in package.json pointed at the config file."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

from turbosnap_helper.application.context import HelperContext
from turbosnap_helper.config.contracts import CONFIG_FILENAME
from turbosnap_helper.domain.models import ProjectMeta

logger = logging.getLogger(__name__)

SCRIPT_NAME = "chromatic"
_CONFIG_FILE_FLAG = re.compile(r"""--config-file(?:\s+|=)['"]?([^\s'"]+)['"]?""")


def config_file_flag(script: str) -> str | None:
    """Return the path passed to `--config-file` in a script command, if any."""
    match = _CONFIG_FILE_FLAG.search(script)
    return match.group(1) if match else None


def read_manifest(path: Path) -> dict[str, Any]:
    manifest = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(manifest, dict):
        raise ValueError(f"{path} does not contain a JSON object.")
    return manifest


def write_manifest(path: Path, manifest: dict[str, Any]) -> None:
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def manifest_path_for(ctx: HelperContext, meta: ProjectMeta) -> Path:
    """Prefer the Storybook project's package.json, falling back to the root one."""
    candidate = ctx.root / meta.storybook_base_dir / "package.json"
    return candidate if candidate.is_file() else ctx.root / "package.json"


def expected_script(config_path: Path, manifest_path: Path) -> str:
    relative = Path(os.path.relpath(config_path.resolve(), manifest_path.parent.resolve()))
    return f"{SCRIPT_NAME} --config-file {relative.as_posix()}"


def _cancelled(ctx: HelperContext) -> bool:
    ctx.console.panel("No changes were made to package.json.", title="⚠️ Update Cancelled", tone="warning")
    return False


def update_package_json_script(ctx: HelperContext, config_path: Path, meta: ProjectMeta) -> bool:
    """Add or update the `chromatic` script; returns True when package.json was written.

    A config file at the default base-directory location is found without a flag,
    so no script change is made for it. Read and parse failures are reported as a
    warning and never abort the run.
    """
    default_location = (ctx.root / meta.storybook_base_dir / CONFIG_FILENAME).resolve()
    if config_path.resolve() == default_location:
        return False
    manifest_path = manifest_path_for(ctx, meta)
    try:
        manifest = read_manifest(manifest_path)
        scripts = manifest.get("scripts")
        scripts = dict(scripts) if isinstance(scripts, dict) else {}
        current = scripts.get(SCRIPT_NAME)
        wanted = expected_script(config_path, manifest_path)

        if current is None:
            ctx.console.panel(
                f'No "{SCRIPT_NAME}" script found in package.json.',
                title="⚠️ No Script Found",
                tone="warning",
            )
            if not ctx.prompter.confirm(
                f'Would you like to add a "{SCRIPT_NAME}" script to package.json?', default=True
            ):
                return _cancelled(ctx)
            verb = "Added"
        elif current == wanted:
            ctx.console.panel(
                f'The "{SCRIPT_NAME}" script in package.json already matches the expected configuration.',
                title="ℹ️ Script Up to Date",
                tone="info",
            )
            return False
        else:
            ctx.console.panel(
                "The following change will be made to package.json:\n"
                f"Current script: {current}\n"
                f"Updated script: {wanted}",
                title="📝 Package.json Update",
                tone="warning",
            )
            if not ctx.prompter.confirm(
                f"Do you want to proceed with updating the {SCRIPT_NAME} script?", default=True
            ):
                return _cancelled(ctx)
            verb = "Updated"

        scripts[SCRIPT_NAME] = wanted
        manifest["scripts"] = scripts
        write_manifest(manifest_path, manifest)
    except (OSError, ValueError) as exc:
        logger.warning("package_json.update_failed path=%s error=%s", manifest_path, exc)
        ctx.console.panel(
            "⚠️ Could not update package.json. Please manually add "
            f"--config-file {ctx.relative(config_path)} to your {SCRIPT_NAME} script.",
            title="Warning",
            tone="warning",
        )
        return False

    logger.info("package_json.script_written path=%s script=%s", manifest_path, wanted)
    ctx.console.panel(
        f'📦 {verb} the "{SCRIPT_NAME}" script in package.json with --config-file flag',
        title="✅ Success!",
        tone="success",
    )
    return True
