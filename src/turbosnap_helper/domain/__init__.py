"""Domain records and ports for Storybook import analysis."""

from turbosnap_helper.domain.models import (
    Choice,
    ComponentAssociation,
    ImportSet,
    PreviewAnalysis,
    ProjectMeta,
    StaticAssets,
    StoryAnalysis,
)
from turbosnap_helper.domain.ports import Console, FileFinder, PanelTone, Prompter

__all__ = [
    "Choice",
    "ComponentAssociation",
    "Console",
    "FileFinder",
    "ImportSet",
    "PanelTone",
    "PreviewAnalysis",
    "ProjectMeta",
    "Prompter",
    "StaticAssets",
    "StoryAnalysis",
]
