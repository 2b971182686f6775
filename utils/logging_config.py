"""
Logging setup for the Property Portals Reference Scraper.

Three top-level loggers exist: the scraping core, the HTTP API and the CLI
harness. Each writes to stdout and, optionally, to its own rotating file
under logs/. Library modules never configure logging; they log through child
loggers obtained from get_scraper_logger / get_api_logger.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional, Union

SCRAPER_LOGGER_NAME = "refcode_scraper"
API_LOGGER_NAME = "refcode_api"
CLI_LOGGER_NAME = "refcode_cli"

LOG_DIR = "logs"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def configure_logging(
    name: str,
    log_level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    quiet_loggers: Iterable[str] = ()
) -> logging.Logger:
    """
    (Re)configure the named logger with a stdout handler and, when log_file
    is given, a size-rotated file handler. Calling it again replaces the
    handlers instead of stacking them.

    quiet_loggers are third-party loggers raised to WARNING, e.g. the
    per-request lines of uvicorn.access.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=LOG_MAX_BYTES,
                                            backupCount=LOG_BACKUP_COUNT))

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for quiet in quiet_loggers:
        logging.getLogger(quiet).setLevel(logging.WARNING)

    return logger


def _log_file(filename: str, log_to_file: bool) -> Optional[str]:
    return os.path.join(LOG_DIR, filename) if log_to_file else None


def configure_scraper_logging(log_level: Union[int, str] = logging.INFO,
                              log_to_file: bool = True) -> logging.Logger:
    """Configure the logger shared by the pool, strategies and orchestrator"""
    return configure_logging(SCRAPER_LOGGER_NAME, log_level,
                             _log_file("scraper.log", log_to_file),
                             quiet_loggers=["asyncio"])


def configure_api_logging(log_level: Union[int, str] = logging.INFO,
                          log_to_file: bool = True) -> logging.Logger:
    return configure_logging(API_LOGGER_NAME, log_level,
                             _log_file("api.log", log_to_file),
                             quiet_loggers=["uvicorn.access"])


def configure_cli_logging(log_level: Union[int, str] = logging.INFO,
                          log_to_file: bool = True) -> logging.Logger:
    return configure_logging(CLI_LOGGER_NAME, log_level, _log_file("cli.log", log_to_file))


def get_scraper_logger(component_name: str) -> logging.Logger:
    """Child logger of the scraping core, e.g. "refcode_scraper.browser_pool" """
    return logging.getLogger(f"{SCRAPER_LOGGER_NAME}.{component_name}")


def get_api_logger(component_name: str) -> logging.Logger:
    return logging.getLogger(f"{API_LOGGER_NAME}.{component_name}")
