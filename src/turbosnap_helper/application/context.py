"""Collaborators shared by the interactive workflows of one run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from turbosnap_helper.adapters.package_manager import PackageManagerInfo
from turbosnap_helper.domain.ports import Console, FileFinder, Prompter

NODE_MODULES_IGNORE: tuple[str, ...] = ("**/node_modules/**",)
EXIT_CHOICE = "__exit__"
GOODBYE_MESSAGE = "Configuration helper exited. No changes were made."


@dataclass(frozen=True)
class HelperContext:
    """Project root plus the injected finder, prompter, console, and package manager facts."""

    root: Path
    finder: FileFinder
    prompter: Prompter
    console: Console
    package_manager: PackageManagerInfo
    max_workers: int = 4

    def relative(self, path: str | Path) -> str:
        candidate = Path(path)
        if not candidate.is_absolute():
            return candidate.as_posix()
        try:
            return candidate.relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return candidate.as_posix()


def exit_with_message(console: Console, message: str = GOODBYE_MESSAGE) -> NoReturn:
    console.panel(message, title="👋 Goodbye!", tone="info")
    raise SystemExit(0)


def fail_with_message(console: Console, message: str, *, title: str) -> NoReturn:
    console.panel(message, title=title, tone="warning")
    raise SystemExit(1)
