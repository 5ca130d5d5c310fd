"""
Load-time audit over navigation and paint timings.
"""

from typing import List, Optional

from .models import Issue, IssueCategory, IssueLevel, PageMetrics
from ..utils.constants import LOAD_TIME_BUDGET


def audit_load_time(
    metrics: Optional[PageMetrics],
    budget_ms: float = LOAD_TIME_BUDGET
) -> List[Issue]:
    """
    Flag a load event slower than the budget.

    Args:
        metrics: Timings read from the page, or None if unavailable
        budget_ms: Maximum acceptable load time in milliseconds

    Returns:
        A single performance Issue, or an empty list
    """
    if metrics is None or metrics.load_time <= budget_ms:
        return []
    return [Issue(
        category=IssueCategory.PERFORMANCE,
        level=IssueLevel.WARNING,
        element="loadTime",
        description="Page load time is slower than optimal",
        suggestion=(
            "Consider optimizing images, reducing bundle size, "
            "or implementing lazy loading"
        ),
        details={"value": metrics.load_time, "budget": budget_ms},
    )]
