"""
Responsive overflow audit.

Resizes the viewport to each breakpoint, waits for layout to settle, and
checks the content container and its interactive children stay inside the
viewport. The original viewport is restored on every exit path.
"""

import asyncio
from typing import List, Optional, Sequence

from .models import ElementProbe, Issue, IssueCategory, IssueLevel, Viewport
from .source import ProbeSource
from ..utils.constants import DEFAULT_BREAKPOINTS, DEFAULT_SETTLE_TIMEOUT
from ..utils.log import get_logger


logger = get_logger("responsive")


class ViewportOverride:
    """
    Temporarily override the viewport of a probe source.

    Records the viewport on entry and restores it on exit, whether the
    body finished, raised or was cancelled.
    """

    def __init__(self, source: ProbeSource):
        self.source = source
        self.original: Optional[Viewport] = None

    async def resize(self, width: int) -> Viewport:
        """Set the viewport width, keeping the original height."""
        viewport = Viewport(width=width, height=self.original.height)
        await self.source.set_viewport(viewport)
        return viewport

    async def __aenter__(self):
        self.original = await self.source.get_viewport()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.source.set_viewport(self.original)
        logger.debug(f"Viewport restored to {self.original.width}x{self.original.height}")


def _check_breakpoints(breakpoints: Sequence[int]) -> List[int]:
    widths = list(breakpoints)
    for smaller, larger in zip(widths, widths[1:]):
        if larger <= smaller:
            raise ValueError(f"Breakpoints must be strictly ascending: {widths}")
    return widths


def _container_overflows(probe: ElementProbe, viewport: Viewport) -> bool:
    return probe.geometry.right > viewport.width or probe.geometry.left < 0


def _child_overflows(probe: ElementProbe, viewport: Viewport) -> bool:
    return probe.geometry.right > viewport.width or probe.geometry.bottom > viewport.height


async def audit_responsive(
    source: ProbeSource,
    container_selector: str,
    breakpoints: Sequence[int] = DEFAULT_BREAKPOINTS,
    child_selector: Optional[str] = None,
    settle_timeout: float = DEFAULT_SETTLE_TIMEOUT,
    cancel_event: Optional[asyncio.Event] = None
) -> List[Issue]:
    """
    Detect viewport overflow at each breakpoint.

    Args:
        source: Page to probe
        container_selector: Content container that must fit the viewport width
        breakpoints: Viewport widths, strictly ascending
        child_selector: Optional selector of children that must also stay
            within the viewport height
        settle_timeout: Upper bound in seconds for each layout-settle wait
        cancel_event: Stops iterating breakpoints once set

    Returns:
        Responsive issues ordered by breakpoint

    Raises:
        ValueError: If breakpoints are not strictly ascending
    """
    widths = _check_breakpoints(breakpoints)
    issues: List[Issue] = []

    async with ViewportOverride(source) as override:
        for width in widths:
            if cancel_event is not None and cancel_event.is_set():
                logger.info(f"Responsive audit cancelled before {width}px")
                break

            viewport = await override.resize(width)
            try:
                await asyncio.wait_for(source.wait_for_layout(), timeout=settle_timeout)
            except asyncio.TimeoutError:
                logger.warning(f"Layout did not settle at {width}px within {settle_timeout}s")
                issues.append(Issue(
                    category=IssueCategory.RESPONSIVE,
                    level=IssueLevel.INFO,
                    element=container_selector.lstrip('.'),
                    description=f"Measurement uncertain at {width}px",
                    suggestion="Layout did not settle in time; re-run the audit for this breakpoint",
                    details={"breakpoint": width, "timeout": settle_timeout},
                ))
                continue

            issues.extend(await _measure_breakpoint(
                source, viewport, container_selector, child_selector
            ))

    return issues


async def _measure_breakpoint(
    source: ProbeSource,
    viewport: Viewport,
    container_selector: str,
    child_selector: Optional[str]
) -> List[Issue]:
    """Measure the container and children at the current viewport."""
    issues = []
    width = viewport.width

    for probe in await source.collect_probes(container_selector):
        if _container_overflows(probe, viewport):
            issues.append(Issue(
                category=IssueCategory.RESPONSIVE,
                level=IssueLevel.WARNING,
                element=probe.label,
                description=f"Content overflowing at {width}px",
                suggestion="Adjust padding or max-width for this breakpoint",
                details={
                    "breakpoint": width,
                    "left": round(probe.geometry.left, 2),
                    "right": round(probe.geometry.right, 2),
                },
            ))

    if child_selector:
        for probe in await source.collect_probes(child_selector):
            if _child_overflows(probe, viewport):
                issues.append(Issue(
                    category=IssueCategory.RESPONSIVE,
                    level=IssueLevel.WARNING,
                    element=probe.label,
                    description=f"Element overflowing viewport at {width}px",
                    suggestion="Adjust sizing or positioning for this breakpoint",
                    details={
                        "breakpoint": width,
                        "right": round(probe.geometry.right, 2),
                        "bottom": round(probe.geometry.bottom, 2),
                        "viewportHeight": viewport.height,
                    },
                ))

    return issues
