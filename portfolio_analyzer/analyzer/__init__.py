"""
Analyzer module for auditing a rendered portfolio page.

Contains the color math, the contrast, touch-target, responsive, animation,
structure and load-time audits, suggestion aggregation and report assembly.
"""

from .models import (
    AnalysisReport,
    BackgroundLayer,
    ElementProbe,
    Geometry,
    Issue,
    IssueCategory,
    IssueLevel,
    PageMetrics,
    Priority,
    SkippedCheck,
    Suggestion,
    Viewport,
)
from .colors import ColorSample, to_rgb, parse_color, luminance, contrast_ratio, effective_background
from .contrast import audit_contrast
from .touch import audit_touch_targets
from .responsive import audit_responsive, ViewportOverride
from .animations import audit_animations
from .structure import StructureChecker, audit_structure, audit_hero_height
from .performance import audit_load_time
from .suggestions import generate_suggestions
from .capture import ScreenshotCapture
from .source import ProbeSource
from .report import run_analysis, write_report

__all__ = [
    # Orchestration
    "run_analysis",
    "write_report",
    "ProbeSource",
    # Models
    "AnalysisReport",
    "BackgroundLayer",
    "ElementProbe",
    "Geometry",
    "Issue",
    "IssueCategory",
    "IssueLevel",
    "PageMetrics",
    "Priority",
    "SkippedCheck",
    "Suggestion",
    "Viewport",
    # Colors
    "ColorSample",
    "to_rgb",
    "parse_color",
    "luminance",
    "contrast_ratio",
    "effective_background",
    # Audits
    "audit_contrast",
    "audit_touch_targets",
    "audit_responsive",
    "ViewportOverride",
    "audit_animations",
    "StructureChecker",
    "audit_structure",
    "audit_hero_height",
    "audit_load_time",
    "generate_suggestions",
    "ScreenshotCapture",
]
