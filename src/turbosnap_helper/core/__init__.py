"""Import classification and heuristic analysis engine."""

from turbosnap_helper.core.component_associator import associate, build_story_analysis
from turbosnap_helper.core.import_classifier import classify
from turbosnap_helper.core.preview_analysis import (
    IMPORT_THRESHOLD,
    analyze_preview,
    exceeds_import_threshold,
    is_monorepo,
)
from turbosnap_helper.core.report import AnalysisReport, summarize
from turbosnap_helper.core.shared_wrappers import SHARED_WRAPPER_KEYWORDS, detect_shared_wrappers

__all__ = [
    "IMPORT_THRESHOLD",
    "SHARED_WRAPPER_KEYWORDS",
    "AnalysisReport",
    "analyze_preview",
    "associate",
    "build_story_analysis",
    "classify",
    "detect_shared_wrappers",
    "exceeds_import_threshold",
    "is_monorepo",
    "summarize",
]
