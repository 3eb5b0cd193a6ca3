"""Startup logging setup and configuration checks."""

import logging

from .config import get_fetch_timeout, get_log_level, get_official_data_url, is_enrichment_enabled

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = get_log_level()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_config() -> None:
    """Log how the checker will source its data."""
    url = get_official_data_url()
    if url is None:
        logger.info("BASELINE_OFFICIAL_DATA_URL not set. Using the embedded feature catalog.")
    elif not url.startswith(("http://", "https://")):
        logger.warning("BASELINE_OFFICIAL_DATA_URL is not an http(s) URL: %s. It will fail and fall back.", url)
    else:
        logger.info("Official Baseline data: %s (timeout %.1fs)", url, get_fetch_timeout())
    if not is_enrichment_enabled():
        logger.info("BASELINE_ENRICHMENT disabled. Usage, community and performance data will be omitted.")
