"""
Main entry point for the Property Portals Reference Scraper.
Holds the orchestrator that picks a strategy for a URL and runs it, and
starts the HTTP API.
"""

import argparse
import asyncio
from typing import Any, Dict, Optional

from config import APP_ENV, HOST, LOG_LEVEL, LOG_TO_FILE, PORT, RATE_LIMIT_DELAY, get_example_url
from models.extraction import ErrorKind, ExtractionFailure, ExtractionResult
from scrapers.factory import StrategyRegistry
from utils import url_parser
from utils.browser_pool import ContextPool
from utils.logging_config import configure_scraper_logging, get_scraper_logger

logger = get_scraper_logger("orchestrator")


class ReferenceCodeScraper:
    """Orchestrates strategy selection, throttling and scraping for single URLs"""

    def __init__(self,
                 pool: Optional[ContextPool] = None,
                 registry: Optional[StrategyRegistry] = None,
                 rate_limit_delay: int = RATE_LIMIT_DELAY):
        """
        Args:
            pool: Browser context pool; a new one is created if omitted
            registry: Strategy registry; defaults to the built-in portals on `pool`
            rate_limit_delay: Delay in ms applied before every scrape
        """
        self.pool = pool or ContextPool()
        self.registry = registry or StrategyRegistry(self.pool)
        self.rate_limit_delay = rate_limit_delay

    async def scrape_property(self, url: Optional[str]) -> ExtractionResult:
        """Scrape a listing URL and return its reference code, never raising"""
        if not url:
            return ExtractionFailure(error="URL is required", kind=ErrorKind.INPUT)

        try:
            logger.info(f"Starting property scrape: url={url}")

            strategy = self.registry.get_strategy(url)
            if strategy is None:
                supported = ", ".join(self.registry.get_supported_domains())
                return ExtractionFailure(
                    error=f"No scraping strategy available for this URL. Supported domains: {supported}",
                    url=url,
                    kind=ErrorKind.INPUT,
                )

            if self.rate_limit_delay > 0:
                logger.debug(f"Rate limiting: waiting {self.rate_limit_delay}ms")
                await asyncio.sleep(self.rate_limit_delay / 1000)

            result = await strategy.scrape(url_parser.normalize(url))
            logger.info(f"Property scrape completed: success={result.success} url={url}")
            return result

        except Exception as e:
            logger.exception(f"Scraping orchestration failed: url={url} error={e}")
            return ExtractionFailure(error=str(e), url=url)

    def get_supported_portals(self) -> Dict[str, Any]:
        """List supported portals in registration order"""
        domains = self.registry.get_supported_domains()
        return {
            "total": len(domains),
            "portals": [{"domain": domain, "exampleUrl": get_example_url(domain)} for domain in domains],
        }

    async def shutdown(self):
        """Release the browser and all contexts"""
        await self.pool.close_all()


def main():
    """Start the HTTP API server."""
    import uvicorn

    parser = argparse.ArgumentParser(description="Property Portals Reference Scraper API")
    parser.add_argument("--host", default=HOST, help=f"Host to bind to (default: {HOST})")
    parser.add_argument("--port", type=int, default=PORT, help=f"Port to bind to (default: {PORT})")
    parser.add_argument("--log-level", default=LOG_LEVEL.lower(), help="Log level for uvicorn")
    args = parser.parse_args()

    root_logger = configure_scraper_logging(log_level=LOG_LEVEL, log_to_file=LOG_TO_FILE)
    root_logger.info(f"Starting API on {args.host}:{args.port} (env={APP_ENV})")
    root_logger.info(f"Health check: http://localhost:{args.port}/api/properties/health")
    root_logger.info(f"Supported portals: http://localhost:{args.port}/api/properties/portals")

    # uvicorn handles SIGINT/SIGTERM and runs the app's shutdown, which closes the pool
    uvicorn.run("api.server:app", host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
