from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from turbosnap_helper.application.context import HelperContext
from turbosnap_helper.cli import app
from turbosnap_helper.cli.analyze import run_analyze
from turbosnap_helper.cli.init import run_init
from turbosnap_helper.cli.preview import run_preview

ContextFactory = Callable[..., HelperContext]

STORY = """\
import { Button } from './Button';

export default { title: 'Button', component: Button };
"""

COMPONENT = """\
import React from 'react';
const Icon = React.lazy(() => import('./Icon'));
export const Button = () => null;
"""


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app, "configure_runtime_logging", lambda: None)


def test_main_dispatches_mode_with_context(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: list[HelperContext] = []
    monkeypatch.setitem(app.MODES, "analyze", seen.append)

    app.main(["analyze", "--project-root", str(tmp_path), "--max-workers", "0"])

    assert len(seen) == 1
    assert seen[0].root == tmp_path
    assert seen[0].max_workers == 1


def test_main_defaults_to_init(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: list[HelperContext] = []
    monkeypatch.setitem(app.MODES, "init", seen.append)

    app.main(["--project-root", str(tmp_path)])

    assert len(seen) == 1


def test_main_rejects_unknown_mode() -> None:
    with pytest.raises(SystemExit) as exc_info:
        app.main(["publish"])
    assert exc_info.value.code == 2


def test_main_reports_unexpected_errors(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    def explode(ctx: HelperContext) -> None:
        raise RuntimeError("boom")

    monkeypatch.setitem(app.MODES, "preview", explode)

    with pytest.raises(SystemExit) as exc_info:
        app.main(["preview", "--project-root", str(tmp_path)])

    assert exc_info.value.code == 1
    assert "error: boom" in capsys.readouterr().err


def test_main_exits_when_no_storybook_found(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        app.main(["preview", "--project-root", str(tmp_path)])
    assert exc_info.value.code == 1


def test_analyze_reports_component_dynamic_imports(
    make_context: ContextFactory, tmp_path: Path
) -> None:
    _write(tmp_path / ".storybook" / "main.ts", "export default {};\n")
    _write(tmp_path / "src" / "Button.stories.tsx", STORY)
    _write(tmp_path / "src" / "Button.tsx", COMPONENT)
    ctx = make_context([".storybook"])

    run_analyze(ctx)

    text = ctx.console.text()  # type: ignore[attr-defined]
    assert "Component: src/Button.tsx" in text
    assert "Component Files Analyzed: 1" in text
    assert "src/Button.tsx (component of src/Button.stories.tsx)" in text


def test_analyze_without_storybook_scans_root(make_context: ContextFactory, tmp_path: Path) -> None:
    _write(tmp_path / "Card.stories.ts", "import { Card } from './Card';\n")
    ctx = make_context()

    run_analyze(ctx)

    text = ctx.console.text()  # type: ignore[attr-defined]
    assert "Found 1 story file directly." in text
    assert "✅ All files use static imports" in text


def test_preview_flags_imports_and_wrappers(make_context: ContextFactory, tmp_path: Path) -> None:
    imports = "".join(f"import m{index} from './module-{index}';\n" for index in range(10))
    imports += "import { ThemeProvider } from './theme-provider';\n"
    _write(tmp_path / ".storybook" / "preview.tsx", imports)
    ctx = make_context([".storybook"])

    run_preview(ctx)

    text = ctx.console.text()  # type: ignore[attr-defined]
    assert ".storybook/preview.tsx:" in text
    assert "High number of imports (11)" in text
    assert "- ./theme-provider" in text
    assert ctx.console.panels[-1][2] == "warning"  # type: ignore[attr-defined]


def test_init_creates_config_for_selected_project(
    make_context: ContextFactory, tmp_path: Path
) -> None:
    _write(
        tmp_path / ".storybook" / "main.ts",
        "export default { framework: '@storybook/react-vite' };\n",
    )
    _write(tmp_path / "package.json", json.dumps({"name": "app"}))
    ctx = make_context([".storybook", "abc123", "base"])

    run_init(ctx)

    written = json.loads((tmp_path / "chromatic.config.json").read_text(encoding="utf-8"))
    assert written["projectId"] == "Project:abc123"
    assert written["storybookConfigDir"] == "./.storybook"
    assert written["storybookBuildDir"] == "./storybook-static"
    assert "🎉 Success!" in ctx.console.titles  # type: ignore[attr-defined]


def test_init_exit_choice_ends_cleanly(make_context: ContextFactory, tmp_path: Path) -> None:
    (tmp_path / ".storybook").mkdir()
    ctx = make_context(["__exit__"])

    with pytest.raises(SystemExit) as exc_info:
        run_init(ctx)

    assert exc_info.value.code == 0
