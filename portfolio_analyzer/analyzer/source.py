"""
Probe source interface.

A probe source is the analyzer's only view of the inspected page: it yields
element probes, controls the viewport and reports timings. The browser
adapter implements it over a Playwright page; tests implement it in memory.
"""

from typing import List, Optional

from .models import ElementProbe, PageMetrics, Viewport


class ProbeSource:
    """Read access to a rendered page, plus the viewport control the responsive audit needs."""

    url: Optional[str] = None

    async def collect_probes(self, selector: str) -> List[ElementProbe]:
        """Probe every element matching a CSS selector, in document order."""
        raise NotImplementedError

    async def get_viewport(self) -> Viewport:
        raise NotImplementedError

    async def set_viewport(self, viewport: Viewport) -> None:
        raise NotImplementedError

    async def wait_for_layout(self) -> None:
        """Return once layout has settled. Callers bound this wait."""
        raise NotImplementedError

    async def get_metrics(self) -> Optional[PageMetrics]:
        raise NotImplementedError

    async def get_html(self) -> str:
        raise NotImplementedError

    async def get_theme(self) -> Optional[str]:
        """Current ``data-theme`` attribute of the root element."""
        raise NotImplementedError

    async def set_theme(self, theme: Optional[str]) -> None:
        """Set or, with None, remove the root ``data-theme`` attribute."""
        raise NotImplementedError

    async def screenshot(self, path: str, full_page: bool = True) -> None:
        raise NotImplementedError
