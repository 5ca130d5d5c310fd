"""
Portfolio UI Analyzer - headless audit of the local portfolio build.

Launches a headless Chromium browser, opens the portfolio served by the local
development server, runs the contrast, touch-target, responsive, animation,
structure and load-time audits, captures theme and device screenshots, and
writes the findings to ui-analysis-report.json.

Usage:
    portfolio-analyzer
    python -m portfolio_analyzer
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .analyzer import AnalysisReport, run_analysis, write_report
from .browser import PageProbeSource, PageRenderer
from .config import AnalyzerConfig
from .exceptions import NavigationError
from .utils.constants import DEFAULT_SCREENSHOTS_DIR
from .utils.log import (
    setup_logger,
    print_status,
    print_success,
    print_error,
    print_info,
    print_warning
)
from .utils.reachability import check_reachable


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    The analyzer takes no options; the parser only provides --help.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='portfolio-analyzer',
        description='Audit the locally served portfolio for accessibility, '
                    'responsive and animation issues',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The target URL and output paths are fixed:
    target:      http://localhost:5174/portfolio/
    report:      ./ui-analysis-report.json
    screenshots: ./screenshots/

Start the development server before running the analyzer.
        """
    )
    return parser.parse_args(argv)


def print_banner() -> None:
    """Print the application banner."""
    banner = """
╔═══════════════════════════════════════════════════════════════╗
║                  PORTFOLIO UI ANALYZER v1.0                   ║
║        Accessibility, Responsive & Animation Audit Tool       ║
╚═══════════════════════════════════════════════════════════════╝
    """
    print_status(banner, "bold cyan")


def print_summary(report: AnalysisReport) -> None:
    """
    Print the analysis summary.

    Args:
        report: Finished analysis report
    """
    print("\n" + "=" * 60)
    print_success("ANALYSIS SUMMARY")
    print("=" * 60)
    print(f"  Issues found:      {len(report.issues)}")
    print(f"  Suggestions:       {len(report.suggestions)}")
    print(f"  Skipped checks:    {len(report.skipped)}")
    print(f"  Viewport:          {report.viewport.width}x{report.viewport.height}")

    if report.screenshots:
        print(f"  Screenshots:       {len(report.screenshots)}")

    if report.metrics:
        print("")
        print("  Timings:")
        print(f"    Load event:        {report.metrics.load_time:.0f} ms")
        print(f"    First paint:       {report.metrics.first_paint:.0f} ms")
        print(f"    First contentful:  {report.metrics.first_contentful_paint:.0f} ms")

    counts = report.issues_by_category()
    if counts:
        print("")
        print("  Issues by type:")
        for category, count in counts.items():
            print(f"    {category:<18} {count}")

    for index, suggestion in enumerate(report.suggestions, 1):
        print("")
        print(f"  {index}. {suggestion.title} ({suggestion.priority.value} priority)")
        print(f"     {suggestion.description}")
        print(f"     Actions: {', '.join(suggestion.actions)}")

    print("=" * 60 + "\n")

    for marker in report.degraded:
        print_warning(f"{marker.audit} audit did not complete: {marker.error}")


async def analyze(config: AnalyzerConfig) -> AnalysisReport:
    """
    Render the target page and run every audit against it.

    Args:
        config: Run configuration

    Returns:
        The analysis report

    Raises:
        NavigationError: If the target page cannot be reached or loaded
    """
    await check_reachable(config.url)

    async with PageRenderer(
        timeout=config.page_timeout,
        headless=config.headless,
        viewport=config.viewport
    ) as renderer:
        page = await renderer.open_page(config.url, settle_ms=config.animation_wait)
        return await run_analysis(PageProbeSource(page), config)


async def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the analyzer.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parse_arguments(argv)
    setup_logger(level=logging.INFO)
    print_banner()

    config = AnalyzerConfig(screenshots_dir=DEFAULT_SCREENSHOTS_DIR)
    print_info(f"Target URL: {config.url}")

    try:
        report = await analyze(config)
        report_path = write_report(report, config.report_path)

        print_summary(report)
        print_success(f"Report saved to: {report_path}")
        return 0

    except KeyboardInterrupt:
        print_error("\nAnalysis interrupted by user")
        return 1
    except NavigationError as e:
        print_error(f"Target page unreachable: {e}")
        print_info("Is the development server running?")
        return 1
    except Exception as e:
        print_error(f"Error: {e}")
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    sys.exit(asyncio.run(main()))
