"""
Screenshot capture of theme and device states.

Captures full-page screenshots in light and dark theme and at mobile and
tablet viewports. The theme attribute and the viewport are restored once the
captures finish.
"""

import asyncio
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from .models import ScreenshotRecord, Viewport
from .responsive import ViewportOverride
from .source import ProbeSource
from ..utils.constants import DEFAULT_SCREENSHOTS_DIR, DEFAULT_SETTLE_TIMEOUT
from ..utils.log import get_logger
from ..utils.paths import ensure_dir, sanitize_filename


@dataclass(frozen=True)
class DeviceSize:
    """A named device viewport."""
    name: str
    width: int
    height: int


THEMES = ("light", "dark")

DEVICE_PRESETS = (
    DeviceSize("mobile-view", 375, 667),
    DeviceSize("tablet-view", 768, 1024),
)


class ScreenshotCapture:
    """
    Captures screenshots of the page in each theme and device state.
    """

    def __init__(
        self,
        output_dir: str = DEFAULT_SCREENSHOTS_DIR,
        themes=THEMES,
        devices=DEVICE_PRESETS,
        settle_timeout: float = DEFAULT_SETTLE_TIMEOUT
    ):
        """
        Initialize screenshot capture.

        Args:
            output_dir: Directory to save screenshots
            themes: Values of the root data-theme attribute to capture
            devices: Device viewports to capture
            settle_timeout: Upper bound in seconds for each layout-settle wait
        """
        self.output_dir = output_dir
        self.themes = tuple(themes)
        self.devices = tuple(devices)
        self.settle_timeout = settle_timeout
        self.logger = get_logger("capture")

    async def capture(self, source: ProbeSource) -> List[ScreenshotRecord]:
        """
        Capture every configured state.

        Args:
            source: Page to capture

        Returns:
            One record per screenshot taken
        """
        ensure_dir(self.output_dir)
        records: List[ScreenshotRecord] = []

        original_theme = await source.get_theme()
        try:
            for theme in self.themes:
                await source.set_theme(theme)
                await self._settle(source)
                records.append(await self._take(source, f"hero-{theme}-mode"))
        finally:
            await source.set_theme(original_theme)

        async with ViewportOverride(source):
            for device in self.devices:
                await source.set_viewport(Viewport(width=device.width, height=device.height))
                await self._settle(source)
                records.append(await self._take(source, device.name))

        return records

    async def _settle(self, source: ProbeSource) -> None:
        try:
            await asyncio.wait_for(source.wait_for_layout(), timeout=self.settle_timeout)
        except asyncio.TimeoutError:
            self.logger.warning("Layout did not settle before screenshot")

    async def _take(self, source: ProbeSource, name: str) -> ScreenshotRecord:
        filepath = os.path.join(self.output_dir, f"{sanitize_filename(name)}.png")
        await source.screenshot(filepath, full_page=True)
        self.logger.debug(f"Captured {name}: {filepath}")
        return ScreenshotRecord(
            name=name,
            path=filepath,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
