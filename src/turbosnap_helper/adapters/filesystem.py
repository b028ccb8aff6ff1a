"""Local filesystem globbing and reads for project discovery."""

from __future__ import annotations

import os
import re
from collections import defaultdict
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from fnmatch import fnmatchcase
from pathlib import Path

from turbosnap_helper.domain.ports import FileFinder

_GLOB_CHARS = set("*?[")
_BRACE_GROUP = re.compile(r"{([^{}]*)}")


def expand_braces(pattern: str) -> list[str]:
    """`*.{js,ts}` -> [`*.js`, `*.ts`]; nested groups expand innermost first."""
    match = _BRACE_GROUP.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: dict[str, None] = {}
    for option in match.group(1).split(","):
        for result in expand_braces(f"{head}{option}{tail}"):
            expanded[result] = None
    return list(expanded)


def _segments(pattern: str) -> list[str]:
    while pattern.startswith("./"):
        pattern = pattern[2:]
    return pattern.split("/")


def _match_segments(parts: Sequence[str], pattern: Sequence[str]) -> bool:
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_segments(parts[index:], rest) for index in range(len(parts) + 1))
    return bool(parts) and fnmatchcase(parts[0], head) and _match_segments(parts[1:], rest)


def glob_match(path: str, pattern: str) -> bool:
    """Match a posix path against a glob; `**` spans whole segments, `*` stays inside one."""
    parts = path.split("/")
    return any(_match_segments(parts, _segments(option)) for option in expand_braces(pattern))


def _literal_prefix(pattern: str) -> tuple[str, list[str]]:
    segments = _segments(pattern)
    literal: list[str] = []
    for segment in segments[:-1]:
        if _GLOB_CHARS.intersection(segment):
            break
        literal.append(segment)
    return "/".join(literal), segments[len(literal) :]


class LocalFileFinder:
    """Glob and read files relative to a working directory."""

    def __init__(self, root: str | Path = ".") -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _base(self, cwd: str | None) -> Path:
        if cwd is None:
            return self._root
        candidate = Path(cwd)
        return candidate if candidate.is_absolute() else self._root / candidate

    def glob(
        self,
        patterns: str | Sequence[str],
        *,
        cwd: str | None = None,
        ignore: Sequence[str] = (),
        only_directories: bool = False,
        absolute: bool = False,
    ) -> list[str]:
        base = self._base(cwd)
        ignore_rules = [_segments(option) for rule in ignore for option in expand_braces(rule)]
        by_prefix: dict[str, list[list[str]]] = defaultdict(list)
        for pattern in [patterns] if isinstance(patterns, str) else patterns:
            for option in expand_braces(pattern):
                prefix, rest = _literal_prefix(option)
                by_prefix[prefix].append(rest)

        found: set[str] = set()
        for prefix, rests in by_prefix.items():
            start = base / prefix if prefix else base
            if not start.is_dir():
                continue
            recursive = any(len(rest) > 1 or "**" in rest for rest in rests)
            for candidate, is_dir in self._walk(start, ignore_rules, recursive=recursive):
                if is_dir != only_directories:
                    continue
                parts = candidate.split("/")
                if not any(_match_segments(parts, rest) for rest in rests):
                    continue
                joined = f"{prefix}/{candidate}" if prefix else candidate
                found.add(str((base / joined).resolve()) if absolute else joined)
        return sorted(found)

    def _walk(
        self,
        start: Path,
        ignore_rules: list[list[str]],
        *,
        recursive: bool,
    ) -> list[tuple[str, bool]]:
        entries: list[tuple[str, bool]] = []
        for current, dirnames, filenames in os.walk(start):
            rel_dir = Path(current).relative_to(start).as_posix()
            rel_dir = "" if rel_dir == "." else rel_dir
            kept: list[str] = []
            for name in sorted(dirnames):
                rel = f"{rel_dir}/{name}" if rel_dir else name
                if self._ignored(rel, ignore_rules):
                    continue
                kept.append(name)
                entries.append((rel, True))
            dirnames[:] = kept if recursive else []
            for name in sorted(filenames):
                rel = f"{rel_dir}/{name}" if rel_dir else name
                if not self._ignored(rel, ignore_rules):
                    entries.append((rel, False))
        return entries

    @staticmethod
    def _ignored(rel: str, ignore_rules: list[list[str]]) -> bool:
        parts = rel.split("/")
        return any(_match_segments(parts, rule) for rule in ignore_rules)

    def read_text(self, path: str) -> str:
        return self._base(path).read_text(encoding="utf-8")

    def exists(self, path: str) -> bool:
        return self._base(path).exists()


def read_texts(finder: FileFinder, paths: Sequence[str], *, max_workers: int = 4) -> list[str]:
    """Read files concurrently, returning texts in input order.

    The first failed read is re-raised and aborts the whole batch.
    """
    if max_workers <= 1 or len(paths) <= 1:
        return [finder.read_text(path) for path in paths]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(finder.read_text, paths))
