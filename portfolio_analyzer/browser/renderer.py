"""
Page renderer using Playwright.

Launches a headless browser and opens the target page for inspection.
"""

import asyncio
from typing import Dict, Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    TimeoutError as PlaywrightTimeout,
)

from ..exceptions import NavigationError
from ..utils.constants import DEFAULT_PAGE_TIMEOUT, DEFAULT_USER_AGENT, DEFAULT_VIEWPORT
from ..utils.log import get_logger


class PageRenderer:
    """
    Renders web pages using a Playwright Chromium browser.

    Keeps the page open so the analyzer can probe it after rendering.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_PAGE_TIMEOUT,
        wait_until: str = "networkidle",
        headless: bool = True,
        viewport: Optional[Dict[str, int]] = None
    ):
        """
        Initialize the page renderer.

        Args:
            timeout: Page load timeout in milliseconds
            wait_until: Event to wait for ('load', 'domcontentloaded', 'networkidle')
            headless: Run browser in headless mode
            viewport: Initial viewport, defaults to 1920x1080
        """
        self.timeout = timeout
        self.wait_until = wait_until
        self.headless = headless
        self.viewport = viewport or dict(DEFAULT_VIEWPORT)
        self.logger = get_logger("renderer")

        self._playwright = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None

    async def start(self) -> None:
        """
        Start the Playwright browser instance.
        """
        self.logger.info("Starting Playwright browser...")
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self.headless,
            args=[
                '--disable-blink-features=AutomationControlled',
                '--no-sandbox',
                '--disable-setuid-sandbox',
                '--disable-dev-shm-usage',
            ]
        )
        self.logger.info("Browser started successfully")

    async def stop(self) -> None:
        """
        Stop the Playwright browser instance.
        """
        if self._context:
            await self._context.close()
            self._context = None
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
        self.logger.info("Browser stopped")

    async def open_page(
        self,
        url: str,
        settle_ms: int = 0,
        user_agent: Optional[str] = None
    ) -> Page:
        """
        Navigate to a page and leave it open.

        Args:
            url: URL to render
            settle_ms: Extra wait after load for entrance animations
            user_agent: Optional custom user agent

        Returns:
            The rendered page, closed together with the renderer

        Raises:
            NavigationError: If the page cannot be loaded
        """
        if not self._browser:
            await self.start()

        self._context = await self._browser.new_context(
            user_agent=user_agent or DEFAULT_USER_AGENT,
            viewport=self.viewport,
            ignore_https_errors=True,
        )
        page = await self._context.new_page()

        try:
            self.logger.debug(f"Rendering: {url}")
            response = await page.goto(
                url,
                wait_until=self.wait_until,
                timeout=self.timeout
            )
        except PlaywrightTimeout as e:
            raise NavigationError(url, f"timed out after {self.timeout}ms") from e
        except PlaywrightError as e:
            raise NavigationError(url, e.message) from e

        if not response:
            raise NavigationError(url, "no response")
        if response.status >= 400:
            raise NavigationError(url, f"HTTP {response.status}")

        # Wait for entrance animations to finish
        if settle_ms:
            await asyncio.sleep(settle_ms / 1000)

        self.logger.debug(f"Successfully rendered: {page.url}")
        return page

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.stop()
