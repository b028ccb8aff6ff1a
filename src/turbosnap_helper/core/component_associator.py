"""Associate a story file with the component implementation it documents."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Callable, Sequence

from turbosnap_helper.core.import_classifier import classify
from turbosnap_helper.domain.models import ComponentAssociation, ImportSet, StoryAnalysis

SOURCE_EXTENSIONS: tuple[str, ...] = ("js", "jsx", "ts", "tsx")

_COMPONENT_FIELD = re.compile(r"(?<![\w$])component:\s*([^,}\n]+)")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")
_NAMED_IMPORT = re.compile(r"""import\s*(?:[\w$]+\s*,\s*)?{([^}]*)}\s*from\s*['"]([^'"]+)['"]""")

Resolver = Callable[[str], Sequence[str]]
TextReader = Callable[[str], str]


def component_identifier(story_text: str) -> str | None:
    """Return the identifier assigned to the first `component:` field."""
    match = _COMPONENT_FIELD.search(story_text)
    if match is None:
        return None
    identifier = match.group(1).strip()
    if not _IDENTIFIER.match(identifier):
        return None
    return identifier


def named_import_path(story_text: str, identifier: str) -> str | None:
    """Return the specifier of the first named import that binds `identifier`."""
    binding = re.compile(rf"(?<![\w$]){re.escape(identifier)}(?![\w$])")
    for match in _NAMED_IMPORT.finditer(story_text):
        if binding.search(match.group(1)):
            return match.group(2)
    return None


def candidate_patterns(story_file: str, import_path: str) -> list[str]:
    """Glob patterns for `<path>.<ext>` then `<path>/index.<ext>`, relative to the story."""
    story_dir = posixpath.dirname(story_file.replace("\\", "/"))
    base = posixpath.normpath(posixpath.join(story_dir, import_path)) if story_dir else import_path
    extensions = ",".join(SOURCE_EXTENSIONS)
    return [f"{base}.{{{extensions}}}", f"{base}/index.{{{extensions}}}"]


def associate(
    story_file: str,
    story_text: str,
    resolve: Resolver,
    read_text: TextReader,
) -> ComponentAssociation:
    """Locate and classify the component file a story documents.

    Only the first `component:` field is honored. Anything that cannot be
    matched yields an empty association instead of an error.
    """
    identifier = component_identifier(story_text)
    if identifier is None:
        return ComponentAssociation()
    import_path = named_import_path(story_text, identifier)
    if import_path is None:
        return ComponentAssociation()

    for pattern in candidate_patterns(story_file, import_path):
        matches = resolve(pattern)
        if matches:
            component_file = matches[0]
            return ComponentAssociation(
                component_file=component_file,
                component_analysis=classify(read_text(component_file)),
            )
    return ComponentAssociation()


def build_story_analysis(
    story_file: str,
    story_text: str,
    resolve: Resolver,
    read_text: TextReader,
) -> StoryAnalysis:
    imports: ImportSet = classify(story_text)
    association = associate(story_file, story_text, resolve, read_text)
    return StoryAnalysis(
        file=story_file,
        imports=imports,
        component_file=association.component_file,
        component_analysis=association.component_analysis,
    )
