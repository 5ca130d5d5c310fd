"""
Text contrast audit.

Checks that text color and the background it is drawn on meet the WCAG AA
ratio for normal text.
"""

from typing import List, Optional, Sequence

from .colors import composite, contrast_ratio, effective_background
from .models import BackgroundLayer, ElementProbe, Issue, IssueCategory, IssueLevel, SkippedCheck
from ..utils.constants import CONTRAST_THRESHOLD
from ..utils.log import get_logger


logger = get_logger("contrast")


def audit_contrast(
    probes: Sequence[ElementProbe],
    skipped: Optional[List[SkippedCheck]] = None,
    threshold: float = CONTRAST_THRESHOLD
) -> List[Issue]:
    """
    Flag probes whose text contrast is below the threshold.

    A probe whose text color or background cannot be resolved is not judged
    either way; it is recorded in ``skipped`` instead.

    Args:
        probes: Elements to check
        skipped: Optional list receiving insufficient-information notes
        threshold: Minimum acceptable ratio (strict lower bound)

    Returns:
        One accessibility Issue per failing probe, in probe order
    """
    issues = []

    for probe in probes:
        text_color = probe.style("color")
        bg_color = probe.style("background-color")
        layers = probe.backgrounds or (BackgroundLayer(color=bg_color),)
        background = effective_background(layers)

        if background is None:
            _skip(skipped, probe, f"background of {probe.label} could not be resolved")
            continue

        foreground = composite(text_color, background)
        if foreground is None:
            _skip(skipped, probe, f"text color '{text_color}' could not be resolved")
            continue

        ratio = contrast_ratio(foreground, background)
        if ratio < threshold:
            rounded = round(ratio, 2)
            issues.append(Issue(
                category=IssueCategory.ACCESSIBILITY,
                level=IssueLevel.ERROR,
                element=probe.label,
                description="Low contrast ratio",
                suggestion=(
                    f"Current ratio: {rounded:.2f}:1. "
                    f"Need {threshold}:1 for WCAG AA"
                ),
                details={
                    "textColor": text_color,
                    "backgroundColor": bg_color,
                    "effectiveBackground": background.css(),
                    "ratio": rounded,
                },
            ))

    logger.debug(f"Contrast audit: {len(issues)} issue(s) in {len(probes)} probe(s)")
    return issues


def _skip(
    skipped: Optional[List[SkippedCheck]],
    probe: ElementProbe,
    reason: str
) -> None:
    logger.debug(f"Skipping contrast check: {reason}")
    if skipped is not None:
        skipped.append(SkippedCheck(
            category=IssueCategory.ACCESSIBILITY,
            element=probe.label,
            reason=f"Insufficient information: {reason}",
        ))
