"""Read framework and build settings from a Storybook `main` config file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

MAIN_CONFIG_NAMES: tuple[str, ...] = (
    "main.js",
    "main.cjs",
    "main.mjs",
    "main.ts",
    "main.cts",
    "main.mts",
)
DEFAULT_BUILD_DIR = "storybook-static"
UNKNOWN_FRAMEWORK = "unknown"

_FRAMEWORK_STRING = re.compile(r"""framework\s*:\s*['"]([^'"]+)['"]""")
_FRAMEWORK_OBJECT = re.compile(r"""framework\s*:\s*{[^}]*?name\s*:\s*['"]([^'"]+)['"]""", re.S)
_FRAMEWORK_FIELD = re.compile(r"framework\s*:(.*?)(?:\n\s*[A-Za-z_$][\w$]*\s*:|\Z)", re.S)
_STORYBOOK_PACKAGE = re.compile(r"""(@storybook/[^'"\s,}]+)""")
_BUILD_DIR = re.compile(r"""buildDir\s*:\s*['"]([^'"]+)['"]""")


@dataclass(frozen=True)
class MainConfig:
    path: Path | None
    framework: str
    build_dir: str


def find_main_config(config_dir: str | Path) -> Path | None:
    directory = Path(config_dir)
    for name in MAIN_CONFIG_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def framework_from_source(source: str) -> str:
    """Detect the framework with three fallbacks: string value, `name` field, package token."""
    for pattern in (_FRAMEWORK_STRING, _FRAMEWORK_OBJECT):
        match = pattern.search(source)
        if match:
            return match.group(1)
    field = _FRAMEWORK_FIELD.search(source)
    if field:
        package = _STORYBOOK_PACKAGE.search(field.group(1))
        if package:
            return package.group(1)
    return UNKNOWN_FRAMEWORK


def build_dir_from_source(source: str) -> str:
    match = _BUILD_DIR.search(source)
    return match.group(1) if match else DEFAULT_BUILD_DIR


def read_main_config(config_dir: str | Path) -> MainConfig:
    path = find_main_config(config_dir)
    if path is None:
        return MainConfig(path=None, framework=UNKNOWN_FRAMEWORK, build_dir=DEFAULT_BUILD_DIR)
    source = path.read_text(encoding="utf-8")
    return MainConfig(
        path=path,
        framework=framework_from_source(source),
        build_dir=build_dir_from_source(source),
    )
