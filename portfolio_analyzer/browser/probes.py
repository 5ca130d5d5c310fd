"""
Probe source backed by a live Playwright page.

Element probes are gathered in a single page script per selector so every
probe in a group is measured against the same layout.
"""

from typing import List, Optional

from playwright.async_api import Page

from ..analyzer.models import ElementProbe, PageMetrics, Viewport, probes_from_dicts
from ..analyzer.source import ProbeSource
from ..utils.log import get_logger


# Returns one plain object per element matching the selector
COLLECT_SCRIPT = """
(selector) => {
  const STYLE_KEYS = ['color', 'background-color', 'transform', 'transition',
                      'animation', 'animation-name', 'will-change'];
  const elements = Array.from(document.querySelectorAll(selector));
  const seen = {};

  const labelOf = (element) => {
    const classes = (typeof element.className === 'string' ? element.className : '')
      .trim().split(/\\s+/).filter(Boolean);
    const base = classes.length ? classes[0] : element.tagName.toLowerCase();
    const index = seen[base] || 0;
    seen[base] = index + 1;
    return `${base}-${index}`;
  };

  return elements.map((element) => {
    const rect = element.getBoundingClientRect();
    const style = window.getComputedStyle(element);
    const styles = {};
    for (const key of STYLE_KEYS) {
      styles[key] = style.getPropertyValue(key);
    }
    // Computed transforms collapse translateZ(0) to a 2-D matrix
    styles['inline-transform'] = element.style.transform;

    const backgrounds = [];
    for (let node = element; node && node.nodeType === 1; node = node.parentElement) {
      const nodeStyle = window.getComputedStyle(node);
      backgrounds.push({
        color: nodeStyle.backgroundColor,
        image: nodeStyle.backgroundImage !== 'none'
      });
    }

    const tag = element.tagName.toLowerCase();
    const role = element.getAttribute('role');
    return {
      label: labelOf(element),
      tag,
      role,
      interactive: tag === 'a' || tag === 'button' || role === 'button' || role === 'link',
      rect: { x: rect.x, y: rect.y, width: rect.width, height: rect.height },
      styles,
      backgrounds
    };
  });
}
"""

# Resolves after two animation frames, i.e. once style and layout have run
SETTLE_SCRIPT = """
() => new Promise((resolve) => {
  requestAnimationFrame(() => requestAnimationFrame(() => resolve(true)));
})
"""

METRICS_SCRIPT = """
() => {
  const navigation = performance.getEntriesByType('navigation')[0];
  const paint = performance.getEntriesByType('paint');
  const paintTime = (name) => {
    const entry = paint.find((e) => e.name === name);
    return entry ? entry.startTime : 0;
  };
  if (!navigation) {
    return null;
  }
  return {
    loadTime: navigation.loadEventEnd - navigation.loadEventStart,
    domContentLoaded: navigation.domContentLoadedEventEnd - navigation.domContentLoadedEventStart,
    firstPaint: paintTime('first-paint'),
    firstContentfulPaint: paintTime('first-contentful-paint')
  };
}
"""

VIEWPORT_SCRIPT = "() => ({ width: window.innerWidth, height: window.innerHeight })"

GET_THEME_SCRIPT = "() => document.documentElement.getAttribute('data-theme')"

SET_THEME_SCRIPT = """
(theme) => {
  if (theme === null) {
    document.documentElement.removeAttribute('data-theme');
  } else {
    document.documentElement.setAttribute('data-theme', theme);
  }
}
"""


class PageProbeSource(ProbeSource):
    """
    Probe source over a Playwright page.
    """

    def __init__(self, page: Page):
        """
        Args:
            page: Rendered page to inspect
        """
        self.page = page
        self.url = page.url
        self.logger = get_logger("probes")

    async def collect_probes(self, selector: str) -> List[ElementProbe]:
        raw = await self.page.evaluate(COLLECT_SCRIPT, selector)
        self.logger.debug(f"Probed {len(raw)} element(s) for '{selector}'")
        return probes_from_dicts(raw)

    async def get_viewport(self) -> Viewport:
        size = self.page.viewport_size
        if size is None:
            size = await self.page.evaluate(VIEWPORT_SCRIPT)
        return Viewport(width=int(size["width"]), height=int(size["height"]))

    async def set_viewport(self, viewport: Viewport) -> None:
        await self.page.set_viewport_size(viewport.to_dict())

    async def wait_for_layout(self) -> None:
        await self.page.evaluate(SETTLE_SCRIPT)

    async def get_metrics(self) -> Optional[PageMetrics]:
        raw = await self.page.evaluate(METRICS_SCRIPT)
        if raw is None:
            return None
        return PageMetrics(
            load_time=float(raw["loadTime"]),
            dom_content_loaded=float(raw["domContentLoaded"]),
            first_paint=float(raw["firstPaint"]),
            first_contentful_paint=float(raw["firstContentfulPaint"]),
        )

    async def get_html(self) -> str:
        return await self.page.content()

    async def get_theme(self) -> Optional[str]:
        return await self.page.evaluate(GET_THEME_SCRIPT)

    async def set_theme(self, theme: Optional[str]) -> None:
        await self.page.evaluate(SET_THEME_SCRIPT, theme)

    async def screenshot(self, path: str, full_page: bool = True) -> None:
        await self.page.screenshot(path=path, type="png", full_page=full_page)
