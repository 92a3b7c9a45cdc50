"""Dynamic tier renderer: headless Chromium via Playwright."""

from __future__ import annotations

import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from .document import RenderedDocument
from .errors import RenderFailure

logger = logging.getLogger(__name__)

DEFAULT_RENDER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/86.0.4240.183 Safari/537.36"
)


class PageRenderer:
    """Renders a page in a fresh headless browser and captures the settled DOM.

    Every call launches its own browser and closes it before returning,
    whether navigation succeeded or not. Nothing is pooled between calls.
    """

    def __init__(
        self,
        *,
        user_agent: str = DEFAULT_RENDER_USER_AGENT,
        timeout_ms: int = 60_000,
    ) -> None:
        self._user_agent = user_agent
        self._timeout_ms = timeout_ms

    async def render(self, url: str) -> RenderedDocument:
        """Navigate to *url*, wait for network idle and snapshot the DOM.

        Raises ``RenderFailure`` if the browser cannot launch or navigation
        fails or times out.
        """
        logger.debug("render started", extra={"url": url, "timeout_ms": self._timeout_ms})
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True)
                try:
                    context = await browser.new_context(user_agent=self._user_agent)
                    page = await context.new_page()
                    await page.goto(url, wait_until="networkidle", timeout=self._timeout_ms)
                    markup = await page.content()
                    final_url = page.url
                finally:
                    await browser.close()
        except PlaywrightError as exc:
            raise RenderFailure(url, exc.message or type(exc).__name__) from exc

        logger.debug(
            "render complete",
            extra={"url": url, "final_url": final_url, "length": len(markup)},
        )
        return RenderedDocument(markup, final_url)
