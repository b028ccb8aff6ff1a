from __future__ import annotations

import io

from rich.cells import cell_len
from rich.console import Console

from turbosnap_helper.adapters.terminal import TerminalConsole, TerminalPrompter
from turbosnap_helper.domain.models import Choice

CHOICES = [
    Choice(label="packages/ui/.storybook", value="packages/ui/.storybook", selected=True),
    Choice(label="apps/web/.storybook", value="apps/web/.storybook", description="web app"),
]


def _prompter(answers: str) -> tuple[TerminalPrompter, io.StringIO]:
    output = io.StringIO()
    console = Console(file=output, width=80)
    return TerminalPrompter(console, stream=io.StringIO(answers)), output


def test_panel_rows_share_one_display_width_with_emoji() -> None:
    output = io.StringIO()
    TerminalConsole(Console(file=output, width=80)).panel(
        "Total Imports: 3\n✅ All imports are static\n⚠️ Contains dynamic imports (1):",
        title="📊 Preview Analysis",
        tone="warning",
    )
    rows = [row for row in output.getvalue().splitlines() if row]
    assert rows[0].startswith("╔")
    assert rows[-1].startswith("╚")
    assert "📊 Preview Analysis" in rows[0]
    assert len({cell_len(row) for row in rows}) == 1


def test_panel_keeps_square_brackets_literal() -> None:
    output = io.StringIO()
    TerminalConsole(Console(file=output, width=80)).panel("externals: [bold]", title="[x]")
    text = output.getvalue()
    assert "externals: [bold]" in text
    assert "[x]" in text


def test_panel_border_color_follows_tone() -> None:
    output = io.StringIO()
    console = Console(file=output, width=40, force_terminal=True, color_system="standard")
    TerminalConsole(console).panel("careful", tone="warning")
    assert "\x1b[33m" in output.getvalue()


def test_select_reasks_until_listed_number() -> None:
    prompter, output = _prompter("7\n2\n")
    assert prompter.select("Which project?", CHOICES) == "apps/web/.storybook"
    text = output.getvalue()
    assert "2. apps/web/.storybook (web app)" in text
    assert "Please select one of the available options" in text


def test_multiselect_uses_preselected_on_blank_answer() -> None:
    prompter, _ = _prompter("\n2, 1\n")
    assert prompter.multiselect("Pick", CHOICES) == ["packages/ui/.storybook"]
    assert prompter.multiselect("Pick", CHOICES) == [
        "apps/web/.storybook",
        "packages/ui/.storybook",
    ]


def test_multiselect_rejects_unlisted_numbers() -> None:
    prompter, output = _prompter("3\n2\n")
    assert prompter.multiselect("Pick", CHOICES) == ["apps/web/.storybook"]
    assert "Please enter listed numbers separated by commas" in output.getvalue()


def test_confirm_and_text_answers() -> None:
    prompter, _ = _prompter("maybe\nn\ny\n\ncustom.json\n")
    assert prompter.confirm("Continue?") is False
    assert prompter.confirm("Continue?", default=False) is True
    assert prompter.text("Path?", default="chromatic.config.json") == "chromatic.config.json"
    assert prompter.text("Path?") == "custom.json"
