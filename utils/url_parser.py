"""
URL normalization, validation and domain extraction.
"""

import re
from typing import List, Optional
from urllib.parse import urlsplit

from utils.logging_config import get_scraper_logger

logger = get_scraper_logger("url_parser")

_SCHEME_RE = re.compile(r'^https?://', re.IGNORECASE)
# Characters a WHATWG URL parser refuses in a host
_FORBIDDEN_HOST_CHARS = re.compile(r'[\s<>^|%\\"#?@/]')


def normalize(url: Optional[str]) -> str:
    """
    Normalize a URL: add https:// when no http(s) scheme is present and drop
    trailing slashes. Never raises.
    """
    normalized = (url or "").strip()

    if not _SCHEME_RE.match(normalized):
        normalized = f"https://{normalized}"

    # Strip every trailing slash so normalize(normalize(x)) == normalize(x)
    while normalized.endswith("/") and not _SCHEME_RE.fullmatch(normalized):
        normalized = normalized[:-1]

    return normalized


def is_valid(url: Optional[str]) -> bool:
    """
    Return True when the URL parses into a scheme and a usable host.

    Host-less URLs such as "mailto:x" parse but are rejected: every caller
    needs a hostname to look up a portal.
    """
    if not url or not isinstance(url, str):
        return False
    try:
        parts = urlsplit(url.strip())
        # Accessing the port validates it
        parts.port
    except ValueError:
        return False

    if not parts.scheme or not parts.hostname:
        return False

    return not _FORBIDDEN_HOST_CHARS.search(parts.hostname)


def extract_domain(url: Optional[str]) -> Optional[str]:
    """
    Extract the domain from a URL, without a leading "www.".

    e.g. "https://www.zonaprop.com.ar/aviso" -> "zonaprop.com.ar"
    """
    if not is_valid(url):
        logger.error(f"Invalid URL format: {url!r}")
        return None

    hostname = urlsplit(url.strip()).hostname
    return re.sub(r'^www\.', '', hostname)


def get_path_segments(url: Optional[str]) -> List[str]:
    """Split the URL path on "/" and drop empty segments"""
    if not is_valid(url):
        return []
    return [segment for segment in urlsplit(url.strip()).path.split("/") if segment]
