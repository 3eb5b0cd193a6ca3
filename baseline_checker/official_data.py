"""
Optional loading of official Baseline data and enrichment tables over HTTP.

Every loader here falls back to the embedded data instead of raising: a slow or
unreachable source must never keep the checker from serving requests.
"""

import asyncio
import logging
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional

import aiohttp

from .catalog import BaselineDates, Catalog, FeatureDescriptor
from .enrichment import (
    COMMUNITY_DATA,
    PERFORMANCE_DATA,
    USAGE_DATA,
    Enrichment,
    TableProvider,
    community_provider,
    performance_provider,
    usage_provider,
)
from .feature_data import EMBEDDED_FEATURES
from .issue import Availability

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0
SUPPORT_BROWSERS = ("chrome", "firefox", "safari", "edge")
FETCH_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError, KeyError, TypeError, AttributeError)


async def _fetch_json(session: aiohttp.ClientSession, url: str) -> Any:
    async with session.get(url) as response:
        response.raise_for_status()
        return await response.json(content_type=None)


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(str(value)[:10])


def _format_support(support: Mapping[str, Any]) -> Dict[str, str]:
    return {
        browser: f"{support[browser]}+" if support.get(browser) else "none"
        for browser in SUPPORT_BROWSERS
    }


def normalize_feature(feature_id: str, data: Mapping[str, Any]) -> Optional[FeatureDescriptor]:
    """Turn one web-features entry into a descriptor.

    Only features the embedded table knows how to detect are kept; remediation
    hints come from the embedded entry since the official data has none.

    An entry without a "baseline" key keeps the embedded tier. A falsy
    baseline means unsupported, and one without a low date means limited.
    """
    embedded = next((f for f in EMBEDDED_FEATURES if f.id == feature_id), None)
    if embedded is None:
        return None
    availability, dates = embedded.availability, embedded.baseline
    if "baseline" in data:
        baseline = data["baseline"]
        if not baseline:
            availability, dates = Availability.UNSUPPORTED, None
        else:
            low = _parse_date(baseline.get("low_date"))
            if low is None:
                availability, dates = Availability.LIMITED, None
            else:
                high = _parse_date(baseline.get("high_date"))
                availability, dates = None, BaselineDates(low_date=low, high_date=high)
    support = data.get("support")
    return replace(
        embedded,
        name=data.get("name") or embedded.name,
        description=data.get("description") or embedded.description,
        group=data.get("group") or embedded.group,
        spec_url=data.get("spec") or embedded.spec_url,
        availability=availability,
        baseline=dates,
        browser_support=_format_support(support) if support else dict(embedded.browser_support),
    )


def catalog_from_web_features(data: Mapping[str, Any]) -> Catalog:
    """Build a catalog from official data, keeping embedded entries it does not cover."""
    official: Dict[str, FeatureDescriptor] = {}
    for feature_id, entry in data.items():
        descriptor = normalize_feature(feature_id, entry)
        if descriptor is not None:
            official[feature_id] = descriptor
    if not official:
        raise ValueError("official data contains no detectable features")
    merged = [official.get(f.id, f) for f in EMBEDDED_FEATURES]
    return Catalog(merged, source="official")


async def load_official_catalog(url: Optional[str], timeout: float = DEFAULT_TIMEOUT) -> Catalog:
    """Fetch official Baseline data from `url`; the embedded catalog on any failure."""
    if not url:
        return Catalog.load()
    try:
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
            data = await asyncio.wait_for(_fetch_json(session, url), timeout)
        catalog = catalog_from_web_features(data)
    except FETCH_ERRORS as e:
        logger.warning("Could not load official Baseline data from %s, using embedded catalog: %s", url, e)
        return Catalog.load()
    logger.info("Loaded official Baseline data for %d features from %s", len(catalog), url)
    return catalog


async def _load_table(
    session: aiohttp.ClientSession,
    name: str,
    url: Optional[str],
    fallback: Mapping[str, Mapping[str, Any]],
    build: Callable[[Mapping[str, Mapping[str, Any]]], TableProvider],
    timeout: float,
) -> TableProvider:
    if url:
        try:
            data = await asyncio.wait_for(_fetch_json(session, url), timeout)
            provider = build(data)
            logger.info("Loaded %s data for %d features from %s", name, len(provider), url)
            return provider
        except FETCH_ERRORS as e:
            logger.warning("Could not load %s data from %s, using embedded table: %s", name, url, e)
    return build(fallback)


async def load_enrichment(
    usage_url: Optional[str] = None,
    community_url: Optional[str] = None,
    performance_url: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Enrichment:
    """Fetch the three enrichment tables concurrently, each falling back independently."""
    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
        usage, community, performance = await asyncio.gather(
            _load_table(session, "usage", usage_url, USAGE_DATA, usage_provider, timeout),
            _load_table(session, "community", community_url, COMMUNITY_DATA, community_provider, timeout),
            _load_table(session, "performance", performance_url, PERFORMANCE_DATA, performance_provider, timeout),
        )
    return Enrichment(usage=usage, community=community, performance=performance)
