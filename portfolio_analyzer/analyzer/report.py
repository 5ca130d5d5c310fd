"""
Analysis orchestration and report output.

Runs every audit against a probe source in a fixed order, isolates audit
failures, aggregates suggestions and assembles an immutable report.
"""

import asyncio
import os
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional

from .animations import audit_animations
from .capture import ScreenshotCapture
from .contrast import audit_contrast
from .models import (
    AnalysisReport,
    DegradedAudit,
    Issue,
    PageMetrics,
    ScreenshotRecord,
    SkippedCheck,
)
from .performance import audit_load_time
from .responsive import audit_responsive
from .source import ProbeSource
from .structure import StructureChecker, audit_hero_height
from .suggestions import generate_suggestions
from .touch import audit_touch_targets
from ..config import AnalyzerConfig
from ..utils.log import get_logger
from ..utils.paths import ensure_parent_dir


logger = get_logger("report")


async def _isolated(
    name: str,
    step: Callable[[], Awaitable[List[Issue]]],
    degraded: List[DegradedAudit]
) -> List[Issue]:
    """Run one audit; a failure is recorded instead of aborting the run."""
    try:
        return await step()
    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.error(f"{name} audit failed: {e}")
        degraded.append(DegradedAudit(audit=name, error=f"{type(e).__name__}: {e}"))
        return []


async def run_analysis(
    source: ProbeSource,
    config: Optional[AnalyzerConfig] = None,
    cancel_event: Optional[asyncio.Event] = None
) -> AnalysisReport:
    """
    Run the full audit sequence against a page.

    Issues are concatenated in the order contrast, touch target, responsive,
    animation, page structure, load time.

    Args:
        source: Page to analyze
        config: Selectors and thresholds (defaults to AnalyzerConfig())
        cancel_event: Stops the responsive audit between breakpoints

    Returns:
        AnalysisReport for this run
    """
    config = config or AnalyzerConfig()
    timestamp = datetime.now(timezone.utc).isoformat()
    viewport = await source.get_viewport()

    issues: List[Issue] = []
    skipped: List[SkippedCheck] = []
    degraded: List[DegradedAudit] = []

    async def contrast() -> List[Issue]:
        probes = await source.collect_probes(config.contrast_selectors)
        notes: List[SkippedCheck] = []
        found = audit_contrast(probes, notes, threshold=config.contrast_threshold)
        skipped.extend(notes)
        return found

    async def touch_targets() -> List[Issue]:
        probes = await source.collect_probes(config.touch_target_selectors)
        return audit_touch_targets(probes, min_size=config.min_touch_target)

    async def responsive() -> List[Issue]:
        return await audit_responsive(
            source,
            config.container_selector,
            breakpoints=config.breakpoints,
            child_selector=config.responsive_child_selectors,
            settle_timeout=config.settle_timeout,
            cancel_event=cancel_event,
        )

    async def animations() -> List[Issue]:
        return audit_animations(await source.collect_probes(config.animation_selectors))

    async def structure() -> List[Issue]:
        html = await source.get_html()
        notes: List[SkippedCheck] = []
        found = StructureChecker(hero_selector=config.hero_selector).check(html, notes)
        skipped.extend(notes)
        heroes = await source.collect_probes(config.hero_selector)
        found.extend(audit_hero_height(heroes[0] if heroes else None, viewport))
        return found

    metrics: Optional[PageMetrics] = None

    async def load_time() -> List[Issue]:
        nonlocal metrics
        metrics = await source.get_metrics()
        return audit_load_time(metrics, budget_ms=config.load_time_budget)

    steps = (
        ("contrast", contrast),
        ("touch-target", touch_targets),
        ("responsive", responsive),
        ("animation", animations),
        ("structure", structure),
        ("load-time", load_time),
    )
    for name, step in steps:
        logger.info(f"Running {name} audit...")
        issues.extend(await _isolated(name, step, degraded))

    screenshots: List[ScreenshotRecord] = []
    if config.screenshots_dir:
        try:
            screenshots = await ScreenshotCapture(
                config.screenshots_dir, settle_timeout=config.settle_timeout
            ).capture(source)
        except Exception as e:
            logger.error(f"Screenshot capture failed: {e}")
            degraded.append(DegradedAudit(audit="screenshots", error=f"{type(e).__name__}: {e}"))

    return AnalysisReport(
        timestamp=timestamp,
        url=source.url,
        viewport=viewport,
        issues=tuple(issues),
        suggestions=tuple(generate_suggestions(issues)),
        metrics=metrics,
        skipped=tuple(skipped),
        degraded=tuple(degraded),
        screenshots=tuple(screenshots),
    )


def write_report(report: AnalysisReport, path: str) -> str:
    """
    Write the report as a JSON document.

    Args:
        report: Report to serialize
        path: Output file path

    Returns:
        Absolute path of the written file
    """
    ensure_parent_dir(path)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(report.to_json())
        f.write('\n')
    logger.info(f"Report saved to {path}")
    return os.path.abspath(path)
