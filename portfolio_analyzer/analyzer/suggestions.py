"""
Suggestion aggregation.

Groups issues by category and turns each non-empty group into one
prioritized recommendation. Priorities come from a static table.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from .models import Issue, IssueCategory, Priority, Suggestion


ACCESSIBILITY_CSS = """\
.social-link {
  min-width: 44px;
  min-height: 44px;
  border: 2px solid var(--primary-color);
}

.action-item {
  min-height: 44px;
  padding: 12px 0;
}"""

PERFORMANCE_CSS = """\
.ripple, .cursor-glow, .particle {
  will-change: transform, opacity;
  transform: translateZ(0);
}

.shape-circle, .shape-line {
  will-change: transform;
}"""

RESPONSIVE_CSS = """\
@media (max-width: 768px) {
  .minimal-content {
    padding: 0 1rem;
    max-width: 100%;
  }

  .social-link {
    width: 45px;
    height: 45px;
  }
}"""

UI_CSS = """\
.hero-minimal {
  min-height: 100vh;
}"""

# Category -> (priority, title, actions, code), in output order
SUGGESTION_TABLE: Dict[IssueCategory, Tuple[Priority, str, Tuple[str, ...], Optional[str]]] = {
    IssueCategory.ACCESSIBILITY: (
        Priority.HIGH,
        "Improve Accessibility",
        (
            "Increase touch target sizes to 44x44px minimum",
            "Improve color contrast ratios to 4.5:1 minimum",
            "Add proper ARIA labels to interactive elements",
        ),
        ACCESSIBILITY_CSS,
    ),
    IssueCategory.PERFORMANCE: (
        Priority.MEDIUM,
        "Optimize Animations",
        (
            "Enable hardware acceleration for animations",
            "Use will-change property for animated elements",
            "Consider reducing animation complexity",
        ),
        PERFORMANCE_CSS,
    ),
    IssueCategory.RESPONSIVE: (
        Priority.MEDIUM,
        "Fix Responsive Issues",
        (
            "Adjust content padding for mobile devices",
            "Test all breakpoints thoroughly",
            "Consider mobile-first approach",
        ),
        RESPONSIVE_CSS,
    ),
    IssueCategory.UI: (
        Priority.LOW,
        "Polish UI Details",
        (
            "Restore missing decorative elements used by hover effects",
            "Check section sizing against the viewport",
        ),
        UI_CSS,
    ),
}


def generate_suggestions(issues: Sequence[Issue]) -> List[Suggestion]:
    """
    Aggregate issues into one suggestion per category.

    Args:
        issues: Issues of one analysis run

    Returns:
        Suggestions in table order, one for each category with issues
    """
    counts = Counter(issue.category for issue in issues)
    suggestions = []

    for category, (priority, title, actions, code) in SUGGESTION_TABLE.items():
        count = counts.get(category, 0)
        if not count:
            continue
        noun = "issue" if count == 1 else "issues"
        suggestions.append(Suggestion(
            priority=priority,
            category=category,
            title=title,
            description=f"{count} {category.value} {noun} found",
            actions=actions,
            code=code,
        ))

    return suggestions
