"""Immutable records produced by the import analysis engine and project detection."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ImportSet:
    """Module specifiers declared in one file, in order of appearance."""

    static_imports: tuple[str, ...] = ()
    dynamic_imports: tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return len(self.static_imports) + len(self.dynamic_imports)

    @property
    def has_dynamic_imports(self) -> bool:
        return bool(self.dynamic_imports)


@dataclass(frozen=True)
class ComponentAssociation:
    """Implementation file resolved for a story, if any."""

    component_file: str | None = None
    component_analysis: ImportSet | None = None


@dataclass(frozen=True)
class StoryAnalysis:
    """Import facts for one story file and its associated component."""

    file: str
    imports: ImportSet
    component_file: str | None = None
    component_analysis: ImportSet | None = None

    @property
    def static_imports(self) -> tuple[str, ...]:
        return self.imports.static_imports

    @property
    def dynamic_imports(self) -> tuple[str, ...]:
        return self.imports.dynamic_imports


@dataclass(frozen=True)
class PreviewAnalysis:
    """Heuristic diagnostics for one Storybook preview entry file."""

    file: str
    total_imports: int
    shared_wrapper_imports: tuple[str, ...]
    static_imports: tuple[str, ...]
    dynamic_imports: tuple[str, ...]
    is_monorepo: bool

    @property
    def has_shared_wrappers(self) -> bool:
        return bool(self.shared_wrapper_imports)


@dataclass(frozen=True)
class Choice:
    """One selectable answer for an interactive prompt."""

    label: str
    value: str
    description: str = ""
    selected: bool = False


@dataclass(frozen=True)
class StaticAssets:
    """Absolute asset paths found under the project root and repository root."""

    project_assets: tuple[str, ...] = ()
    repo_assets: tuple[str, ...] = ()

    def combined(self) -> list[str]:
        return [*self.project_assets, *self.repo_assets]


@dataclass(frozen=True)
class ProjectMeta:
    """Storybook project facts collected before writing the visual-testing config."""

    storybook_base_dir: str
    storybook_config_dir: str
    storybook_build_dir: str
    package_manager: str
    is_monorepo: bool
    framework: str
    static_assets: tuple[str, ...] = field(default_factory=tuple)
