"""Terminal prompts and boxed message panels rendered with rich."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.text import Text

from turbosnap_helper.domain.models import Choice
from turbosnap_helper.domain.ports import PanelTone

TONE_STYLES: dict[PanelTone, str] = {
    "info": "blue",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "accent": "magenta",
}


class TerminalConsole:
    """Print messages inside a double-line panel whose border color follows the tone."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    def panel(self, message: str, *, title: str = "", tone: PanelTone = "info") -> None:
        self._console.print(
            Panel(
                Text(message),
                box=box.DOUBLE,
                title=Text(title) if title else None,
                title_align="left",
                border_style=TONE_STYLES[tone],
                padding=(1, 2),
                expand=False,
            )
        )
        self._console.print()


class TerminalPrompter:
    """Interactive prompts; `stream` replaces stdin when given."""

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self._console = console if console is not None else Console()
        self._stream = stream

    def _list_choices(self, message: str, choices: Sequence[Choice]) -> None:
        self._console.print(Text(f"? {message}", style="bold"))
        for number, choice in enumerate(choices, start=1):
            line = Text(f"  {number}. {choice.label}")
            if choice.description:
                line.append(f" ({choice.description})", style="dim")
            self._console.print(line)

    def select(self, message: str, choices: Sequence[Choice]) -> str:
        if not choices:
            raise ValueError("select() requires at least one choice.")
        self._list_choices(message, choices)
        picked = Prompt.ask(
            Text("Select"),
            console=self._console,
            choices=[str(number) for number in range(1, len(choices) + 1)],
            stream=self._stream,
        )
        return choices[int(picked) - 1].value

    def multiselect(self, message: str, choices: Sequence[Choice]) -> list[str]:
        self._list_choices(message, choices)
        preselected = [choice.value for choice in choices if choice.selected]
        hint = ",".join(str(n) for n, choice in enumerate(choices, start=1) if choice.selected)
        while True:
            raw = Prompt.ask(
                Text("Numbers separated by commas"),
                console=self._console,
                default=hint,
                show_default=bool(hint),
                stream=self._stream,
            ).strip()
            if not raw:
                return preselected
            picks = [part.strip() for part in raw.split(",") if part.strip()]
            if all(pick.isdigit() and 1 <= int(pick) <= len(choices) for pick in picks):
                return [choices[int(pick) - 1].value for pick in picks]
            self._console.print("[prompt.invalid]Please enter listed numbers separated by commas")

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(
            Text(message), console=self._console, default=default, stream=self._stream
        )

    def text(self, message: str, default: str | None = None) -> str:
        if default is None:
            return Prompt.ask(Text(message), console=self._console, stream=self._stream).strip()
        answer = Prompt.ask(
            Text(message), console=self._console, default=default, stream=self._stream
        )
        return answer.strip() or default
