"""Ports for filesystem lookup, prompting, and terminal output."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, Protocol

from turbosnap_helper.domain.models import Choice

PanelTone = Literal["info", "success", "warning", "error", "accent"]


class FileFinder(Protocol):
    """Finds and reads project files."""

    def glob(
        self,
        patterns: str | Sequence[str],
        *,
        cwd: str | None = None,
        ignore: Sequence[str] = (),
        only_directories: bool = False,
        absolute: bool = False,
    ) -> list[str]:
        ...

    def read_text(self, path: str) -> str:
        ...

    def exists(self, path: str) -> bool:
        ...


class Prompter(Protocol):
    """Asks the user questions and returns their answers."""

    def select(self, message: str, choices: Sequence[Choice]) -> str:
        ...

    def multiselect(self, message: str, choices: Sequence[Choice]) -> list[str]:
        ...

    def confirm(self, message: str, default: bool = True) -> bool:
        ...

    def text(self, message: str, default: str | None = None) -> str:
        ...


class Console(Protocol):
    """Prints styled message panels."""

    def panel(self, message: str, *, title: str = "", tone: PanelTone = "info") -> None:
        ...
