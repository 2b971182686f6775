"""
Browser context pool on top of a single shared Chromium instance.

Each call to create_context() carves a brand-new isolated BrowserContext
(own cookies, storage and viewport) out of the shared browser. The pool only
tracks open contexts to bound how many exist at once and to tear everything
down on shutdown; contexts are never handed out twice.
"""

import asyncio
from typing import List, Optional, Tuple

from playwright.async_api import async_playwright, Browser, BrowserContext, Page

from config import (
    HEADLESS,
    SLOW_MO,
    BROWSER_TIMEOUT,
    MAX_CONTEXTS,
    CONTEXT_ACQUIRE_TIMEOUT,
    VIEWPORT,
    USER_AGENT,
)
from scrapers.exceptions import PoolExhaustedError, ResourceError
from utils.logging_config import get_scraper_logger

logger = get_scraper_logger("browser_pool")


class ContextPool:
    """Owns the shared browser and the bounded set of open contexts"""

    def __init__(self,
                 max_contexts: int = MAX_CONTEXTS,
                 headless: bool = HEADLESS,
                 slow_mo: int = SLOW_MO,
                 default_timeout: int = BROWSER_TIMEOUT,
                 acquire_timeout: float = CONTEXT_ACQUIRE_TIMEOUT / 1000):
        """
        Args:
            max_contexts: Maximum number of contexts open at the same time
            headless: Launch the browser without a window
            slow_mo: Delay in ms applied by Playwright to every browser operation
            default_timeout: Default page timeout in ms
            acquire_timeout: Seconds to wait for a free context slot
        """
        if max_contexts < 1:
            raise ValueError("max_contexts must be at least 1")

        self.max_contexts = max_contexts
        self.headless = headless
        self.slow_mo = slow_mo
        self.default_timeout = default_timeout
        self.acquire_timeout = acquire_timeout

        self._playwright = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []
        self._launch_lock = asyncio.Lock()
        self._slots = asyncio.Semaphore(max_contexts)

    @property
    def active_contexts(self) -> int:
        """Number of contexts currently tracked by the pool"""
        return len(self._contexts)

    @property
    def is_engine_running(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    async def get_browser(self) -> Browser:
        """Return the shared browser, launching it on first use or after a crash"""
        if self.is_engine_running:
            return self._browser

        async with self._launch_lock:
            # Another coroutine may have launched it while we waited
            if self.is_engine_running:
                return self._browser

            logger.info(f"Launching browser (headless={self.headless}, slow_mo={self.slow_mo})")
            try:
                if self._playwright is None:
                    self._playwright = await async_playwright().start()
                self._browser = await self._playwright.chromium.launch(
                    headless=self.headless,
                    slow_mo=self.slow_mo,
                )
            except Exception as e:
                logger.error(f"Browser launch failed: {e}")
                raise ResourceError(f"Failed to launch browser: {e}") from e

        return self._browser

    async def create_context(self) -> Tuple[BrowserContext, Page]:
        """
        Create a fresh context with one page.

        Waits up to acquire_timeout for a free slot when max_contexts are
        already open. The caller must hand the context back via close_context().
        """
        try:
            await asyncio.wait_for(self._slots.acquire(), timeout=self.acquire_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"No free browser context after {self.acquire_timeout}s "
                           f"(active={self.active_contexts}, max={self.max_contexts})")
            raise PoolExhaustedError(
                f"All {self.max_contexts} browser contexts are busy"
            ) from None

        # released unless the context ends up tracked, cancellation included
        slot_owned = True
        context = None
        try:
            try:
                browser = await self.get_browser()
                context = await browser.new_context(viewport=VIEWPORT, user_agent=USER_AGENT)
            except ResourceError:
                raise
            except Exception as e:
                logger.error(f"Error creating browser context: {e}")
                raise ResourceError(f"Failed to create browser context: {e}") from e

            try:
                page = await context.new_page()
                page.set_default_timeout(self.default_timeout)
            except Exception as e:
                logger.error(f"Error creating page: {e}")
                raise ResourceError(f"Failed to create page: {e}") from e

            self._contexts.append(context)
            slot_owned = False
        finally:
            if slot_owned:
                self._slots.release()
                if context is not None:
                    await self._close_quietly(context)

        logger.debug(f"Created new browser context (active={self.active_contexts})")
        return context, page

    async def close_context(self, context: BrowserContext):
        """Close a context and stop tracking it, even if closing fails"""
        if context in self._contexts:
            self._contexts.remove(context)
            self._slots.release()
        await self._close_quietly(context)
        logger.debug(f"Closed browser context (remaining={self.active_contexts})")

    async def close_all(self):
        """Close every tracked context, the browser and the Playwright driver"""
        logger.info(f"Closing all browser contexts ({self.active_contexts}) and browser")

        contexts, self._contexts = self._contexts, []
        for context in contexts:
            self._slots.release()
            await self._close_quietly(context)

        browser, self._browser = self._browser, None
        if browser is not None:
            try:
                await browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")

        playwright, self._playwright = self._playwright, None
        if playwright is not None:
            try:
                await playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {e}")

    async def _close_quietly(self, context: BrowserContext):
        try:
            await context.close()
        except Exception as e:
            logger.warning(f"Error closing context: {e}")
