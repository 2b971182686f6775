"""
Base scraper strategy for property portal listings.

A strategy owns one browser context for exactly one scrape() call: it
acquires the context, checks the URL belongs to its portal, navigates,
runs extract_reference_code() and always hands the context back.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from urllib.parse import urlsplit

from config import BROWSER_TIMEOUT, PAGE_SETTLE_DELAY
from models.extraction import ErrorKind, ExtractionFailure, ExtractionResult, ExtractionSuccess
from scrapers.exceptions import DomainMismatchError, ExtractionError, NavigationError, ScraperError
from utils.browser_pool import ContextPool
from utils.logging_config import get_scraper_logger
from utils.parsing import find_attribute_value, find_code_in_marked_elements, find_numeric_id, match_labeled_code

logger = get_scraper_logger("strategy")


class BaseStrategy(ABC):
    """Base class for portal-specific reference code strategies"""

    def __init__(self, domain: str, pool: ContextPool,
                 navigation_timeout: int = BROWSER_TIMEOUT,
                 settle_delay: int = PAGE_SETTLE_DELAY):
        self._domain = domain
        self.pool = pool
        self.navigation_timeout = navigation_timeout
        self.settle_delay = settle_delay
        self.context = None
        self.page = None

    @property
    def domain(self) -> str:
        return self._domain

    async def initialize(self):
        """Acquire a browser context and page from the pool"""
        logger.info(f"Initializing browser context for {self.domain}")
        self.context, self.page = await self.pool.create_context()

    async def cleanup(self):
        """Return the browser context to the pool, if one was acquired"""
        if self.context is not None:
            await self.pool.close_context(self.context)
            self.context = None
            self.page = None

    def validate_url(self, url: str) -> bool:
        """Check the URL's host, minus a leading "www.", is exactly this portal's domain"""
        try:
            hostname = urlsplit(url).hostname or ""
        except ValueError:
            return False
        return re.sub(r'^www\.', '', hostname) == self.domain

    async def navigate_to_listing(self, url: str):
        """Open the listing and give client-side rendering time to fill the DOM"""
        logger.info(f"Navigating to {url}")
        try:
            await self.page.goto(url, wait_until="domcontentloaded", timeout=self.navigation_timeout)
            await self.page.wait_for_timeout(self.settle_delay)
        except Exception as e:
            logger.error(f"Navigation failed: url={url} error={e}")
            raise NavigationError(f"Failed to navigate to {url}: {e}") from e
        logger.debug("Page loaded successfully")

    @abstractmethod
    async def extract_reference_code(self) -> Optional[str]:
        """Extract the listing reference code from the loaded page"""
        pass

    async def scrape(self, url: str) -> ExtractionResult:
        """Run one navigate + extract cycle and report the outcome as a result value"""
        try:
            await self.initialize()

            if not self.validate_url(url):
                raise DomainMismatchError(f"URL does not match domain {self.domain}")

            await self.navigate_to_listing(url)

            reference_code = await self.extract_reference_code()
            if not reference_code:
                raise ExtractionError("Could not extract reference code")

            logger.info(f"Scraping completed successfully: domain={self.domain} "
                        f"reference_code={reference_code}")
            return ExtractionSuccess(reference_code=reference_code, source=self.domain, url=url)

        except Exception as e:
            kind = e.kind if isinstance(e, ScraperError) else ErrorKind.INTERNAL
            logger.error(f"Scraping failed: domain={self.domain} url={url} error={e}")
            return ExtractionFailure(error=str(e), url=url, source=self.domain, kind=kind)

        finally:
            await self.cleanup()


@dataclass(frozen=True)
class PortalProfile:
    """
    Everything that differs between portals in the reference code fallback chain.

    Attributes:
        domain: Portal domain without "www.", e.g. "argenprop.com"
        marker_class: Substring of the class attribute of the element holding the code
        label_patterns: Labeled regexes tried in order; group 1 is the code
        attribute_selectors: (CSS selector, attribute names) pairs holding a raw ID
    """
    domain: str
    marker_class: str
    label_patterns: Tuple[re.Pattern, ...]
    attribute_selectors: Sequence[Tuple[str, Sequence[str]]] = ()


class ListingCodeStrategy(BaseStrategy):
    """
    Reference code strategy driven by a PortalProfile.

    Tries, in order, and returns the first hit:
      1. labeled code inside elements carrying the portal's marker class
      2. labeled code anywhere in the page's visible text
      3. known data attributes / meta tags
      4. a 7+ digit ID in the final page URL
    A failing step counts as "no match" and the chain moves on.
    """

    def __init__(self, profile: PortalProfile, pool: ContextPool, **kwargs):
        super().__init__(profile.domain, pool, **kwargs)
        self.profile = profile

    async def _code_from_marked_elements(self) -> Optional[str]:
        html = await self.page.content()
        return find_code_in_marked_elements(html, self.profile.marker_class, self.profile.label_patterns)

    async def _code_from_page_text(self) -> Optional[str]:
        text = await self.page.inner_text("body")
        return match_labeled_code(text, self.profile.label_patterns)

    async def _code_from_attributes(self) -> Optional[str]:
        if not self.profile.attribute_selectors:
            return None
        html = await self.page.content()
        return find_attribute_value(html, self.profile.attribute_selectors)

    async def _code_from_url(self) -> Optional[str]:
        return find_numeric_id(self.page.url)

    async def extract_reference_code(self) -> Optional[str]:
        logger.debug(f"Extracting reference code from {self.domain}")

        steps = (
            ("marked elements", self._code_from_marked_elements),
            ("page text", self._code_from_page_text),
            ("attributes", self._code_from_attributes),
            ("URL", self._code_from_url),
        )
        for name, step in steps:
            try:
                code = await step()
            except Exception as e:
                logger.debug(f"Reference code step '{name}' failed on {self.domain}: {e}")
                continue
            if code:
                logger.debug(f"Found reference code in {name}: {code}")
                return code

        logger.warning(f"Could not find reference code in {self.domain} listing")
        return None
