"""
Data models shared by the audits.

Element probes are read-only snapshots of the inspected page; issues,
suggestions and the final report are produced fresh for every run.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class IssueCategory(Enum):
    """Area an issue belongs to."""
    ACCESSIBILITY = "accessibility"
    PERFORMANCE = "performance"
    RESPONSIVE = "responsive"
    UI = "ui"


class IssueLevel(Enum):
    """Severity level of an issue."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Priority(Enum):
    """Priority of an aggregated suggestion."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Geometry:
    """Bounding box of an element in CSS pixels."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class BackgroundLayer:
    """Background of the element or one of its ancestors."""
    color: str
    has_image: bool = False


@dataclass(frozen=True)
class ElementProbe:
    """Snapshot of one inspected element."""
    label: str
    geometry: Geometry
    styles: Dict[str, str] = field(default_factory=dict)
    tag: str = "div"
    role: Optional[str] = None
    interactive: bool = False
    # Element first, then each ancestor up to the root element
    backgrounds: Tuple[BackgroundLayer, ...] = ()

    def style(self, name: str, default: str = "") -> str:
        """Resolved value of a style property, or ``default`` when absent."""
        value = self.styles.get(name)
        return default if value is None else value.strip()


@dataclass(frozen=True)
class Viewport:
    """Viewport dimensions in CSS pixels."""
    width: int
    height: int

    def to_dict(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Issue:
    """A single finding of one analysis run."""
    category: IssueCategory
    level: IssueLevel
    element: str
    description: str
    suggestion: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.category.value,
            "category": self.category.value,
            "severity": self.level.value,
            "element": self.element,
            "issue": self.description,
            "suggestion": self.suggestion,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class Suggestion:
    """Recommendation aggregated from the issues of one category."""
    priority: Priority
    category: IssueCategory
    title: str
    description: str
    actions: Tuple[str, ...] = ()
    # Example CSS applying the actions
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "priority": self.priority.value,
            "category": self.category.value,
            "title": self.title,
            "description": self.description,
            "actions": list(self.actions),
        }
        if self.code is not None:
            data["code"] = self.code
        return data


@dataclass(frozen=True)
class SkippedCheck:
    """A check that could not run for lack of information."""
    category: IssueCategory
    element: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "category": self.category.value,
            "element": self.element,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class DegradedAudit:
    """An audit that raised instead of completing."""
    audit: str
    error: str

    def to_dict(self) -> Dict[str, str]:
        return {"audit": self.audit, "error": self.error}


@dataclass(frozen=True)
class PageMetrics:
    """Navigation and paint timings in milliseconds."""
    load_time: float = 0.0
    dom_content_loaded: float = 0.0
    first_paint: float = 0.0
    first_contentful_paint: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "loadTime": self.load_time,
            "domContentLoaded": self.dom_content_loaded,
            "firstPaint": self.first_paint,
            "firstContentfulPaint": self.first_contentful_paint,
        }


@dataclass(frozen=True)
class ScreenshotRecord:
    """A screenshot taken during the run."""
    name: str
    path: str
    timestamp: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "path": self.path, "timestamp": self.timestamp}


@dataclass(frozen=True)
class AnalysisReport:
    """
    Result of one analysis run.

    Sequences are tuples so the report cannot change after it is returned.
    """
    timestamp: str
    viewport: Viewport
    issues: Tuple[Issue, ...] = ()
    suggestions: Tuple[Suggestion, ...] = ()
    url: Optional[str] = None
    metrics: Optional[PageMetrics] = None
    skipped: Tuple[SkippedCheck, ...] = ()
    degraded: Tuple[DegradedAudit, ...] = ()
    screenshots: Tuple[ScreenshotRecord, ...] = ()

    def issues_by_category(self) -> Dict[str, int]:
        """Count issues per category, in order of first appearance."""
        counts: Dict[str, int] = {}
        for issue in self.issues:
            key = issue.category.value
            counts[key] = counts.get(key, 0) + 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "timestamp": self.timestamp,
            "url": self.url,
            "viewport": self.viewport.to_dict(),
            "issues": [issue.to_dict() for issue in self.issues],
            "suggestions": [s.to_dict() for s in self.suggestions],
            "skipped": [s.to_dict() for s in self.skipped],
            "degraded": [d.to_dict() for d in self.degraded],
        }
        if self.metrics is not None:
            data["metrics"] = self.metrics.to_dict()
        if self.screenshots:
            data["screenshots"] = [s.to_dict() for s in self.screenshots]
        return data

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def probes_from_dicts(raw: List[Dict[str, Any]]) -> List[ElementProbe]:
    """
    Build probes from the plain dictionaries returned by the page script.

    Args:
        raw: List of probe dictionaries

    Returns:
        List of ElementProbe in the same order
    """
    probes = []
    for item in raw:
        rect = item.get("rect") or {}
        probes.append(ElementProbe(
            label=item["label"],
            geometry=Geometry(
                x=float(rect.get("x", 0)),
                y=float(rect.get("y", 0)),
                width=float(rect.get("width", 0)),
                height=float(rect.get("height", 0)),
            ),
            styles=dict(item.get("styles") or {}),
            tag=(item.get("tag") or "div").lower(),
            role=item.get("role"),
            interactive=bool(item.get("interactive", False)),
            backgrounds=tuple(
                BackgroundLayer(color=layer.get("color", ""), has_image=bool(layer.get("image")))
                for layer in item.get("backgrounds") or []
            ),
        ))
    return probes
