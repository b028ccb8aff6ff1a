"""Storybook import analysis and Chromatic TurboSnap configuration helper."""

from turbosnap_helper.core import (
    IMPORT_THRESHOLD,
    SHARED_WRAPPER_KEYWORDS,
    analyze_preview,
    associate,
    classify,
    detect_shared_wrappers,
    summarize,
)
from turbosnap_helper.domain import ImportSet, PreviewAnalysis, StoryAnalysis

__all__ = [
    "IMPORT_THRESHOLD",
    "SHARED_WRAPPER_KEYWORDS",
    "ImportSet",
    "PreviewAnalysis",
    "StoryAnalysis",
    "analyze_preview",
    "associate",
    "classify",
    "detect_shared_wrappers",
    "summarize",
]

__version__ = "0.1.0"
