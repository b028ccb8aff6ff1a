"""Keyword heuristic for imports that supply cross-cutting UI context."""

from __future__ import annotations

from collections.abc import Iterable

SHARED_WRAPPER_KEYWORDS: tuple[str, ...] = ("wrapper", "decorator", "theme", "provider")


def is_shared_wrapper(specifier: str) -> bool:
    lowered = specifier.lower()
    return any(keyword in lowered for keyword in SHARED_WRAPPER_KEYWORDS)


def detect_shared_wrappers(specifiers: Iterable[str]) -> list[str]:
    """Return the specifiers that look like theme/provider/decorator/wrapper modules."""
    return [specifier for specifier in specifiers if is_shared_wrapper(specifier)]
