"""
Command-line test harness for the Property Portals Reference Scraper.
Scrapes listing URLs directly (no HTTP server) and prints each result as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime

from config import LOG_TO_FILE
from main import ReferenceCodeScraper
from utils.logging_config import configure_cli_logging, configure_scraper_logging

# Set up logging
logger = configure_cli_logging(log_to_file=LOG_TO_FILE)

# Sample URLs used when none are given (replace with live listings for real checks)
SAMPLE_URLS = [
    "https://www.zonaprop.com.ar/propiedades/departamento-venta-alquiler-palermo.html",
    "https://www.argenprop.com/propiedades/departamento-2-ambientes-en-venta-en-palermo.html",
    "https://www.example.com/property/123",
]


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Property Portals Reference Scraper CLI")
    parser.add_argument("urls", nargs="*",
                        help="Listing URLs to scrape (default: built-in sample URLs)")
    parser.add_argument("--list-portals", action="store_true",
                        help="Print supported portals")
    parser.add_argument("--no-delay", action="store_true",
                        help="Skip the politeness delay between scrapes")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    level = logging.DEBUG if args.debug else logging.INFO
    logger.setLevel(level)
    configure_scraper_logging(log_level=level, log_to_file=LOG_TO_FILE)
    logger.info(f"Starting Property Portals Reference Scraper CLI at {datetime.now()}")

    scraper = ReferenceCodeScraper(rate_limit_delay=0) if args.no_delay else ReferenceCodeScraper()

    urls = args.urls
    if not urls and not args.list_portals:
        urls = SAMPLE_URLS

    try:
        if args.list_portals or not args.urls:
            print("\nSupported portals:")
            print(json.dumps(scraper.get_supported_portals(), indent=2))

        for url in urls:
            logger.info(f"Testing URL: {url}")
            result = await scraper.scrape_property(url)
            print(f"\nResult for {url}:")
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    except Exception as e:
        logger.error(f"Test run failed: {e}")
        return 1
    finally:
        await scraper.shutdown()

    logger.info("Test run completed")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
