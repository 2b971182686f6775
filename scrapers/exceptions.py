"""
Exceptions raised while resolving and running scraping strategies.
"""

from models.extraction import ErrorKind


class ScraperError(Exception):
    """Base class for scraping errors, converted into an ExtractionFailure"""
    kind = ErrorKind.INTERNAL


class DomainMismatchError(ScraperError):
    kind = ErrorKind.DOMAIN_MISMATCH


class NavigationError(ScraperError):
    kind = ErrorKind.NAVIGATION


class ExtractionError(ScraperError):
    kind = ErrorKind.EXTRACTION


class ResourceError(ScraperError):
    """Browser or context could not be created"""
    kind = ErrorKind.RESOURCE


class PoolExhaustedError(ResourceError):
    """No context slot became free within the acquire timeout"""
