"""
Registry mapping portal domains to the strategy that scrapes them.
"""

from functools import partial
from typing import Callable, Dict, List, Optional

from scrapers.argenprop import ARGENPROP
from scrapers.base import BaseStrategy, ListingCodeStrategy, PortalProfile
from scrapers.zonaprop import ZONAPROP
from utils import url_parser
from utils.browser_pool import ContextPool
from utils.logging_config import get_scraper_logger

logger = get_scraper_logger("factory")

# Builds a fresh strategy bound to the given pool
StrategyFactory = Callable[[ContextPool], BaseStrategy]

DEFAULT_PROFILES = (ZONAPROP, ARGENPROP)


class StrategyRegistry:
    """
    Resolves a listing URL to a new strategy instance for its portal.

    To add a portal, define a PortalProfile (or a BaseStrategy subclass for
    bespoke logic) and register it here or at runtime with register_strategy().
    """

    def __init__(self, pool: ContextPool, profiles=DEFAULT_PROFILES):
        self.pool = pool
        # Insertion order is registration order
        self._strategies: Dict[str, StrategyFactory] = {}
        for profile in profiles:
            self.register_profile(profile)

    def get_strategy(self, url: str) -> Optional[BaseStrategy]:
        """Return a fresh strategy for the URL's portal, or None if there is none"""
        normalized_url = url_parser.normalize(url)

        if not url_parser.is_valid(normalized_url):
            logger.error(f"Invalid URL provided: {url!r}")
            return None

        domain = url_parser.extract_domain(normalized_url)
        if not domain:
            logger.error(f"Could not extract domain from URL: {url!r}")
            return None

        factory = self._strategies.get(domain)
        if factory is None:
            logger.error(f"No strategy found for domain {domain} "
                         f"(supported: {', '.join(self.get_supported_domains())})")
            return None

        strategy = factory(self.pool)
        logger.info(f"Strategy selected: domain={domain} strategy={type(strategy).__name__}")
        return strategy

    def get_supported_domains(self) -> List[str]:
        return list(self._strategies)

    def is_supported(self, domain: str) -> bool:
        return domain in self._strategies

    def register_strategy(self, domain: str, factory: StrategyFactory):
        """Register (or replace) the strategy factory for a domain"""
        if domain in self._strategies:
            logger.info(f"Replacing strategy for {domain}")
        self._strategies[domain] = factory
        logger.info(f"Strategy registered for {domain}")

    def register_profile(self, profile: PortalProfile):
        """Register a profile-driven ListingCodeStrategy for the profile's domain"""
        self.register_strategy(profile.domain, partial(ListingCodeStrategy, profile))
