from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from turbosnap_helper.adapters.filesystem import LocalFileFinder
from turbosnap_helper.adapters.package_manager import PackageManagerInfo
from turbosnap_helper.application.context import HelperContext
from turbosnap_helper.domain.models import Choice
from turbosnap_helper.domain.ports import PanelTone


class ScriptedPrompter:
    """Answers prompts from a queue and records every question asked."""

    def __init__(self, answers: Sequence[object] = ()) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []
        self.offered: list[list[Choice]] = []

    def _next(self, message: str) -> object:
        self.questions.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.answers.pop(0)

    def select(self, message: str, choices: Sequence[Choice]) -> str:
        self.offered.append(list(choices))
        answer = self._next(message)
        assert isinstance(answer, str)
        return answer

    def multiselect(self, message: str, choices: Sequence[Choice]) -> list[str]:
        self.offered.append(list(choices))
        answer = self._next(message)
        assert isinstance(answer, list)
        return answer

    def confirm(self, message: str, default: bool = True) -> bool:
        answer = self._next(message)
        assert isinstance(answer, bool)
        return answer

    def text(self, message: str, default: str | None = None) -> str:
        answer = self._next(message)
        assert isinstance(answer, str)
        return answer


class RecordingConsole:
    def __init__(self) -> None:
        self.panels: list[tuple[str, str, PanelTone]] = []

    def panel(self, message: str, *, title: str = "", tone: PanelTone = "info") -> None:
        self.panels.append((title, message, tone))

    @property
    def titles(self) -> list[str]:
        return [title for title, _, _ in self.panels]

    def text(self) -> str:
        return "\n".join(message for _, message, _ in self.panels)


ContextFactory = Callable[..., HelperContext]


@pytest.fixture
def make_context(tmp_path: Path) -> ContextFactory:
    def factory(answers: Sequence[object] = (), *, is_monorepo: bool = False) -> HelperContext:
        return HelperContext(
            root=tmp_path,
            finder=LocalFileFinder(tmp_path),
            prompter=ScriptedPrompter(answers),
            console=RecordingConsole(),
            package_manager=PackageManagerInfo(name="npm", is_monorepo=is_monorepo, root=tmp_path),
            max_workers=2,
        )

    return factory


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    return write
