"""Regex-based classification of static and dynamic module imports.

This is lexical scanning, not parsing. Known blind spots: re-exports
(`export ... from`), specifiers built from concatenation or template literals,
and conditional `require` calls whose argument is not a quoted literal.
"""

from __future__ import annotations

import re

from turbosnap_helper.domain.models import ImportSet

_STATIC_IMPORT = re.compile(r"""import\s+(?:{[^}]*}|[^;]+)\s+from\s+['"]([^'"]+)['"]""")
_DYNAMIC_IMPORT = re.compile(r"""(?:import\(|require\(|await\s+import\()\s*['"]([^'"]+)['"]""")


def static_imports(text: str) -> list[str]:
    """Return specifiers of `import ... from '...'` statements in order."""
    return [match.group(1) for match in _STATIC_IMPORT.finditer(text)]


def dynamic_imports(text: str) -> list[str]:
    """Return specifiers of `import('...')` and `require('...')` calls in order."""
    return [match.group(1) for match in _DYNAMIC_IMPORT.finditer(text)]


def classify(text: str) -> ImportSet:
    """Split the module specifiers in `text` into static and dynamic imports."""
    return ImportSet(
        static_imports=tuple(static_imports(text)),
        dynamic_imports=tuple(dynamic_imports(text)),
    )
