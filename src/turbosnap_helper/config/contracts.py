"""Typed contract for the Chromatic visual-testing config file."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = "chromatic.config.json"
CONFIG_SCHEMA_URL = "https://www.chromatic.com/config-file.schema.json"
PROJECT_ID_PREFIX = "Project:"


class ChromaticConfig(BaseModel):
    """Known Chromatic settings; any other keys in the file are carried through untouched."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    schema_url: str | None = Field(default=None, alias="$schema")
    project_id: str | None = Field(default=None, alias="projectId")
    storybook_base_dir: str | None = Field(default=None, alias="storybookBaseDir")
    storybook_config_dir: str | None = Field(default=None, alias="storybookConfigDir")
    storybook_build_dir: str | None = Field(default=None, alias="storybookBuildDir")
    externals: list[str] | None = None
    only_changed: bool | None = Field(default=None, alias="onlyChanged")

    @field_validator("externals")
    @classmethod
    def _drop_blank_externals(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [entry for entry in value if entry.strip()]

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


def format_project_id(raw: str) -> str:
    return f"{PROJECT_ID_PREFIX}{raw.strip().removeprefix(PROJECT_ID_PREFIX)}"


def load_chromatic_config(path: Path) -> ChromaticConfig:
    """Load and validate a Chromatic config JSON file from disk."""
    return ChromaticConfig.model_validate_json(path.read_text(encoding="utf-8"))


def save_chromatic_config(path: Path, config: ChromaticConfig) -> None:
    """Persist the config as two-space indented JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_json() + "\n", encoding="utf-8")
