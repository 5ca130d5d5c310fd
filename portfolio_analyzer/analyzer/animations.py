"""
Animation performance audit.

An element counts as animated when its resolved transform, transition or
animation differs from the inert default, and as hardware accelerated when it
carries a will-change hint or a 3-D transform term.
"""

import re
from typing import List, Sequence

from .models import ElementProbe, Issue, IssueCategory, IssueLevel
from ..utils.log import get_logger


logger = get_logger("animations")

TIME_PATTERN = re.compile(r'(-?\d*\.?\d+)(ms|s)\b')
ACCELERATED_TRANSFORMS = ('translate3d', 'translatez', 'matrix3d')


def has_transform(probe: ElementProbe) -> bool:
    return probe.style("transform", "none").lower() not in ("none", "")


def has_transition(probe: ElementProbe) -> bool:
    """True if any transition has a non-zero duration or delay."""
    value = probe.style("transition").lower()
    if value in ("", "none"):
        return False
    times = TIME_PATTERN.findall(value)
    return any(float(number) != 0 for number, _unit in times)


def has_animation(probe: ElementProbe) -> bool:
    name = probe.style("animation-name")
    if not name:
        # Fall back to the shorthand, whose first token is the name when set
        shorthand = probe.style("animation")
        name = shorthand.split()[0] if shorthand else "none"
    return name.lower() != "none"


def is_animated(probe: ElementProbe) -> bool:
    return has_transform(probe) or has_transition(probe) or has_animation(probe)


def is_accelerated(probe: ElementProbe) -> bool:
    """
    True if the element carries a compositing hint.

    The resolved transform is always a matrix, and a z translation of zero
    resolves to a 2-D ``matrix(...)``. The inline transform is therefore read
    as well. A ``translateZ(0)`` written only in a stylesheet cannot be told
    apart from a plain 2-D transform and counts as not accelerated.
    """
    will_change = probe.style("will-change", "auto").lower()
    if will_change not in ("auto", ""):
        return True
    for name in ("transform", "inline-transform"):
        transform = probe.style(name).lower().replace(" ", "")
        if any(term in transform for term in ACCELERATED_TRANSFORMS):
            return True
    return False


def audit_animations(probes: Sequence[ElementProbe]) -> List[Issue]:
    """
    Flag animated elements that are not hardware accelerated.

    Args:
        probes: Elements to check

    Returns:
        One performance Issue per un-accelerated animated probe
    """
    issues = []
    for probe in probes:
        if not is_animated(probe) or is_accelerated(probe):
            continue
        issues.append(Issue(
            category=IssueCategory.PERFORMANCE,
            level=IssueLevel.WARNING,
            element=probe.label,
            description="Animation may not be hardware accelerated",
            suggestion=(
                "Add transform: translateZ(0) or will-change: transform "
                "for better performance"
            ),
            details={
                "transform": probe.style("transform"),
                "transition": probe.style("transition"),
                "animation": probe.style("animation-name") or probe.style("animation"),
                "willChange": probe.style("will-change"),
            },
        ))
    logger.debug(f"Animation audit: {len(issues)} issue(s)")
    return issues
