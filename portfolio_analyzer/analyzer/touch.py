"""
Touch target size audit.
"""

from typing import List, Sequence

from .models import ElementProbe, Issue, IssueCategory, IssueLevel
from ..utils.constants import MIN_TOUCH_TARGET


def audit_touch_targets(
    probes: Sequence[ElementProbe],
    min_size: float = MIN_TOUCH_TARGET
) -> List[Issue]:
    """
    Flag interactive elements smaller than the WCAG minimum target size.

    Args:
        probes: Elements to check; non-interactive probes are ignored
        min_size: Minimum width and height in CSS pixels

    Returns:
        One accessibility Issue per undersized target, in probe order
    """
    issues = []
    for probe in probes:
        if not probe.interactive:
            continue
        width = probe.geometry.width
        height = probe.geometry.height
        if width < min_size or height < min_size:
            issues.append(Issue(
                category=IssueCategory.ACCESSIBILITY,
                level=IssueLevel.WARNING,
                element=probe.label,
                description="Touch target too small",
                suggestion=(
                    f"Increase size to at least {min_size:g}x{min_size:g}px "
                    "for better mobile usability"
                ),
                details={"width": round(width, 2), "height": round(height, 2)},
            ))
    return issues
