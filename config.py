#!/usr/bin/env python
"""
Configuration for the Property Portals Reference Scraper

This file contains configuration settings that can be adjusted without modifying
the core scraper code. Values are read once at import time.
"""

import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on missing or bad values"""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# Server settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _int_env("PORT", 3000)
APP_ENV = os.getenv("APP_ENV", "development")
APP_NAME = "Property Portals Reference Scraper"
APP_VERSION = "1.0.0"

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "True").lower() == "true"

# Browser settings
HEADLESS = os.getenv("HEADLESS", "true").lower() != "false"
SLOW_MO = _int_env("SLOW_MO", 0)  # ms
BROWSER_TIMEOUT = _int_env("BROWSER_TIMEOUT", 30000)  # ms
PAGE_SETTLE_DELAY = _int_env("PAGE_SETTLE_DELAY", 1500)  # ms
MAX_CONTEXTS = _int_env("MAX_CONTEXTS", 5)
CONTEXT_ACQUIRE_TIMEOUT = _int_env("CONTEXT_ACQUIRE_TIMEOUT", BROWSER_TIMEOUT)  # ms

VIEWPORT = {"width": 1920, "height": 1080}
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Politeness delay applied before every scrape
RATE_LIMIT_DELAY = _int_env("RATE_LIMIT_DELAY", 1000)  # ms

# Portal-specific configurations
PORTAL_CONFIGS: Dict[str, Dict[str, Any]] = {
    "zonaprop.com.ar": {
        "example_url": "https://www.zonaprop.com.ar",
    },
    "argenprop.com": {
        "example_url": "https://www.argenprop.com.ar",
    },
}


# Override any config settings with environment variables
def update_portal_config_from_env():
    """Update portal configurations from environment variables if present"""
    for domain in PORTAL_CONFIGS:
        portal_prefix = f"SITE_{domain.upper().replace('.', '_')}_"
        for key in PORTAL_CONFIGS[domain]:
            env_key = f"{portal_prefix}{key.upper()}"
            if os.getenv(env_key):
                # Handle different types
                if isinstance(PORTAL_CONFIGS[domain][key], bool):
                    PORTAL_CONFIGS[domain][key] = os.getenv(env_key).lower() == "true"
                elif isinstance(PORTAL_CONFIGS[domain][key], int):
                    PORTAL_CONFIGS[domain][key] = int(os.getenv(env_key))
                else:
                    PORTAL_CONFIGS[domain][key] = os.getenv(env_key)


def get_example_url(domain: str) -> str:
    """Return the configured example URL for a portal, or a www. guess"""
    return PORTAL_CONFIGS.get(domain, {}).get("example_url", f"https://www.{domain}")


# Call the update function to apply environment variable overrides
update_portal_config_from_env()
