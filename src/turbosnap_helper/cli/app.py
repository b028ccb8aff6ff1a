"""CLI entry point for turbosnap-helper."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from turbosnap_helper.adapters.filesystem import LocalFileFinder
from turbosnap_helper.adapters.observability import configure_runtime_logging
from turbosnap_helper.adapters.package_manager import detect_package_manager
from turbosnap_helper.adapters.terminal import TerminalConsole, TerminalPrompter
from turbosnap_helper.application.context import HelperContext
from turbosnap_helper.cli.analyze import run_analyze
from turbosnap_helper.cli.init import run_init
from turbosnap_helper.cli.preview import run_preview
from turbosnap_helper.domain.ports import Console, Prompter

logger = logging.getLogger(__name__)

MODES: dict[str, Callable[[HelperContext], None]] = {
    "init": run_init,
    "analyze": run_analyze,
    "preview": run_preview,
}


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turbosnap-helper",
        description="Configure Chromatic TurboSnap for Storybook projects and audit their imports.",
    )
    parser.add_argument("mode", nargs="?", default="init", choices=tuple(MODES))
    parser.add_argument("--project-root", default=".")
    parser.add_argument("--max-workers", type=int, default=4)
    return parser


def build_context(
    namespace: argparse.Namespace,
    *,
    prompter: Prompter | None = None,
    console: Console | None = None,
) -> HelperContext:
    root = Path(str(namespace.project_root))
    return HelperContext(
        root=root,
        finder=LocalFileFinder(root),
        prompter=prompter if prompter is not None else TerminalPrompter(),
        console=console if console is not None else TerminalConsole(),
        package_manager=detect_package_manager(root),
        max_workers=max(1, int(namespace.max_workers)),
    )


def main(argv: list[str] | None = None) -> None:
    configure_runtime_logging()
    parsed = build_arg_parser().parse_args(argv)
    ctx = build_context(parsed)
    logger.info(
        "cli.start mode=%s root=%s package_manager=%s",
        parsed.mode,
        ctx.root,
        ctx.package_manager.name,
    )
    try:
        MODES[parsed.mode](ctx)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        raise SystemExit(130) from None
    except Exception as exc:  # noqa: BLE001
        logger.error("cli.failed mode=%s error=%s", parsed.mode, exc)
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
