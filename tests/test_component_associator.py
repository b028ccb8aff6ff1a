from __future__ import annotations

from collections.abc import Sequence

from turbosnap_helper.core.component_associator import (
    associate,
    build_story_analysis,
    candidate_patterns,
    component_identifier,
)

BUTTON_STORY = """\
import type { Meta } from '@storybook/react';
import { Button } from './Button';

const meta: Meta<typeof Button> = {
  title: 'Example/Button',
  component: Button,
};
export default meta;
"""

BUTTON_COMPONENT = """\
import React from 'react';
const Icon = React.lazy(() => import('./Icon'));
export const Button = () => null;
"""


class FakeResolver:
    def __init__(self, matches: dict[str, list[str]]) -> None:
        self.matches = matches
        self.queries: list[str] = []

    def __call__(self, pattern: str) -> Sequence[str]:
        self.queries.append(pattern)
        return self.matches.get(pattern, [])


def _reader(files: dict[str, str]):
    def read(path: str) -> str:
        return files[path]

    return read


def test_associate_resolves_component_next_to_story() -> None:
    resolver = FakeResolver({"./Button.{js,jsx,ts,tsx}": ["./Button.tsx"]})
    result = associate(
        "Button.stories.tsx",
        BUTTON_STORY,
        resolver,
        _reader({"./Button.tsx": BUTTON_COMPONENT}),
    )
    assert result.component_file == "./Button.tsx"
    assert result.component_analysis is not None
    assert result.component_analysis.static_imports == ("react",)
    assert result.component_analysis.dynamic_imports == ("./Icon",)


def test_associate_falls_back_to_index_file_in_directory() -> None:
    story = "import { Card } from '../Card';\nexport default { component: Card };\n"
    resolver = FakeResolver({"src/Card/index.{js,jsx,ts,tsx}": ["src/Card/index.ts"]})
    result = associate(
        "src/stories/Card.stories.tsx",
        story,
        resolver,
        _reader({"src/Card/index.ts": "export * from './Card';"}),
    )
    assert resolver.queries == [
        "src/Card.{js,jsx,ts,tsx}",
        "src/Card/index.{js,jsx,ts,tsx}",
    ]
    assert result.component_file == "src/Card/index.ts"
    assert result.component_analysis is not None
    assert result.component_analysis.total == 0


def test_associate_without_component_field_returns_nothing() -> None:
    resolver = FakeResolver({})
    result = associate(
        "Button.stories.tsx",
        "import { Button } from './Button';\nexport default { title: 'Button' };",
        resolver,
        _reader({}),
    )
    assert result.component_file is None
    assert result.component_analysis is None
    assert resolver.queries == []


def test_associate_honors_only_first_component_field() -> None:
    story = "\n".join(
        [
            "import { Alpha } from './Alpha';",
            "import { Beta } from './Beta';",
            "export default { component: Alpha };",
            "export const Other = { component: Beta };",
        ]
    )
    resolver = FakeResolver({"./Beta.{js,jsx,ts,tsx}": ["./Beta.tsx"]})
    result = associate("x.stories.tsx", story, resolver, _reader({}))
    assert result.component_file is None
    assert resolver.queries == ["./Alpha.{js,jsx,ts,tsx}", "./Alpha/index.{js,jsx,ts,tsx}"]


def test_associate_silently_fails_for_non_identifier_expression() -> None:
    story = "import { Button } from './Button';\nexport default { component: () => Button };"
    assert component_identifier(story) is None
    result = associate("b.stories.tsx", story, FakeResolver({}), _reader({}))
    assert result.component_file is None


def test_associate_requires_exact_binding_in_named_import() -> None:
    story = (
        "import { ButtonGroup } from './ButtonGroup';\n"
        "export default { component: Button };\n"
    )
    resolver = FakeResolver({})
    result = associate("b.stories.tsx", story, resolver, _reader({}))
    assert result.component_file is None
    assert resolver.queries == []


def test_associate_returns_nothing_when_no_candidate_exists() -> None:
    resolver = FakeResolver({})
    result = associate("Button.stories.tsx", BUTTON_STORY, resolver, _reader({}))
    assert result.component_file is None
    assert len(resolver.queries) == 2


def test_candidate_patterns_keep_relative_prefix_for_root_stories() -> None:
    assert candidate_patterns("Button.stories.tsx", "./Button") == [
        "./Button.{js,jsx,ts,tsx}",
        "./Button/index.{js,jsx,ts,tsx}",
    ]


def test_build_story_analysis_combines_story_and_component_imports() -> None:
    resolver = FakeResolver({"./Button.{js,jsx,ts,tsx}": ["./Button.tsx"]})
    record = build_story_analysis(
        "Button.stories.tsx",
        BUTTON_STORY,
        resolver,
        _reader({"./Button.tsx": BUTTON_COMPONENT}),
    )
    assert record.file == "Button.stories.tsx"
    assert record.static_imports == ("@storybook/react", "./Button")
    assert record.dynamic_imports == ()
    assert record.component_file == "./Button.tsx"
    assert record.component_analysis is not None
    assert record.component_analysis.has_dynamic_imports


def test_associate_accepts_default_binding_before_named_imports() -> None:
    story = (
        "import React, { Button } from './Button';\n"
        "export default { component: Button };\n"
    )
    resolver = FakeResolver({"./Button.{js,jsx,ts,tsx}": ["./Button.tsx"]})
    result = associate(
        "Button.stories.tsx", story, resolver, _reader({"./Button.tsx": BUTTON_COMPONENT})
    )
    assert result.component_file == "./Button.tsx"


def test_component_field_must_be_a_whole_key() -> None:
    assert component_identifier("export default { mycomponent: Foo };") is None
    assert component_identifier("export default { $component: Foo };") is None
    assert component_identifier("export default {component: Foo};") == "Foo"
