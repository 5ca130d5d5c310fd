from __future__ import annotations

import asyncio
from typing import Callable, Dict, List, Optional

import pytest

from portfolio_analyzer.analyzer.models import (
    BackgroundLayer,
    ElementProbe,
    Geometry,
    PageMetrics,
    Viewport,
)
from portfolio_analyzer.analyzer.source import ProbeSource


HERO_HTML = """
<html><body>
  <section class="hero-minimal">
    <div class="minimal-content">
      <h1 class="minimal-name">Jane Doe</h1>
      <div class="action-item" role="button" aria-label="View my projects">
        <span class="action-text">View Work</span>
        <div class="action-line"></div>
      </div>
      <a class="social-link" href="https://github.com/jane" aria-label="GitHub Profile"><svg></svg></a>
    </div>
  </section>
</body></html>
"""


def make_probe(
    label: str = "element-0",
    x: float = 0,
    y: float = 0,
    width: float = 100,
    height: float = 50,
    color: str = "rgb(0, 0, 0)",
    background: str = "rgb(255, 255, 255)",
    interactive: bool = False,
    backgrounds=None,
    **styles: str,
) -> ElementProbe:
    resolved = {"color": color, "background-color": background}
    for key, value in styles.items():
        resolved[key.replace("_", "-")] = value
    return ElementProbe(
        label=label,
        geometry=Geometry(x=x, y=y, width=width, height=height),
        styles=resolved,
        tag="a" if interactive else "div",
        interactive=interactive,
        backgrounds=tuple(backgrounds) if backgrounds is not None else (BackgroundLayer(color=background),),
    )


class FakeProbeSource(ProbeSource):
    """In-memory page: static probes per selector, optional width-dependent layout."""

    def __init__(
        self,
        probes: Optional[Dict[str, List[ElementProbe]]] = None,
        layout: Optional[Callable[[Viewport], Dict[str, List[ElementProbe]]]] = None,
        viewport: Viewport = Viewport(width=1920, height=1080),
        html: str = HERO_HTML,
        metrics: Optional[PageMetrics] = None,
        settle_delay: float = 0.0,
        fail_at_width: Optional[int] = None,
    ):
        self.url = "http://localhost:5174/portfolio/"
        self.probes = probes or {}
        self.layout = layout
        self.viewport = viewport
        self.html = html
        self.metrics = metrics
        self.settle_delay = settle_delay
        self.fail_at_width = fail_at_width
        self.theme: Optional[str] = None
        self.viewport_history: List[Viewport] = []
        self.theme_history: List[Optional[str]] = []
        self.screenshots: List[str] = []

    async def collect_probes(self, selector: str) -> List[ElementProbe]:
        if self.fail_at_width is not None and self.viewport.width == self.fail_at_width:
            raise RuntimeError(f"probe failed at {self.viewport.width}px")
        if self.layout is not None:
            laid_out = self.layout(self.viewport)
            if selector in laid_out:
                return list(laid_out[selector])
        return list(self.probes.get(selector, []))

    async def get_viewport(self) -> Viewport:
        return self.viewport

    async def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport
        self.viewport_history.append(viewport)

    async def wait_for_layout(self) -> None:
        if self.settle_delay:
            await asyncio.sleep(self.settle_delay)

    async def get_metrics(self) -> Optional[PageMetrics]:
        return self.metrics

    async def get_html(self) -> str:
        return self.html

    async def get_theme(self) -> Optional[str]:
        return self.theme

    async def set_theme(self, theme: Optional[str]) -> None:
        self.theme = theme
        self.theme_history.append(theme)

    async def screenshot(self, path: str, full_page: bool = True) -> None:
        self.screenshots.append(path)


@pytest.fixture
def fake_source() -> FakeProbeSource:
    return FakeProbeSource()
