"""
Extraction result models for the reference code scraper.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Any, Union


class ErrorKind(str, Enum):
    """Category of a failed extraction"""
    INPUT = "input"
    NAVIGATION = "navigation"
    EXTRACTION = "extraction"
    DOMAIN_MISMATCH = "domain_mismatch"
    RESOURCE = "resource"
    INTERNAL = "internal"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ExtractionSuccess:
    """A reference code scraped from a listing page"""
    reference_code: str
    source: str  # portal domain, e.g. "zonaprop.com.ar"
    url: str
    scraped_at: str = field(default_factory=_utc_now)

    success = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape served by the API"""
        return {
            "success": True,
            "data": {
                "referenceCode": self.reference_code,
                "source": self.source,
                "url": self.url,
                "scrapedAt": self.scraped_at,
            },
        }


@dataclass
class ExtractionFailure:
    """A scrape that did not produce a reference code"""
    error: str
    url: Optional[str] = None
    source: Optional[str] = None
    kind: ErrorKind = ErrorKind.INTERNAL

    success = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape served by the API, omitting unknown fields"""
        data: Dict[str, Any] = {"success": False, "error": self.error, "kind": self.kind.value}
        if self.source is not None:
            data["source"] = self.source
        if self.url is not None:
            data["url"] = self.url
        return data


ExtractionResult = Union[ExtractionSuccess, ExtractionFailure]
