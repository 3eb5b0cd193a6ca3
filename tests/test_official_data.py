"""Tests for remote data loading and its fallbacks. No network is used."""

import asyncio
from datetime import date

import aiohttp
import pytest

from baseline_checker import Availability
from baseline_checker import official_data
from baseline_checker.feature_data import EMBEDDED_FEATURES
from baseline_checker.official_data import (
    catalog_from_web_features,
    load_enrichment,
    load_official_catalog,
    normalize_feature,
)

URL = "https://data.example.test/web-features.json"

WEB_FEATURES = {
    "css-has": {
        "name": "CSS :has()",
        "description": "Relational pseudo-class",
        "spec": "https://drafts.csswg.org/selectors-4/#relational",
        "group": "css",
        "baseline": {"status": "high", "low_date": "2023-12-18", "high_date": "2026-06-18"},
        "support": {"chrome": "105", "edge": "105", "firefox": "121", "safari": "15.4"},
    },
    "not-detectable": {"name": "Something without a pattern", "baseline": False},
}


def _returning(data):
    async def fake_fetch(session, url):
        return data
    return fake_fetch


def _raising(exc):
    async def fake_fetch(session, url):
        raise exc
    return fake_fetch


class TestNormalization:

    def test_known_feature_takes_official_dates(self):
        descriptor = normalize_feature("css-has", WEB_FEATURES["css-has"])
        assert descriptor.availability is None
        assert descriptor.baseline.low_date == date(2023, 12, 18)
        assert descriptor.baseline.high_date == date(2026, 6, 18)
        assert descriptor.browser_support["firefox"] == "121+"
        assert descriptor.fallback == "JavaScript querySelector with event delegation"

    def test_unknown_feature_is_dropped(self):
        assert normalize_feature("not-detectable", WEB_FEATURES["not-detectable"]) is None

    def test_without_dates_keeps_embedded_availability(self):
        descriptor = normalize_feature("temporal-api", {"name": "Temporal"})
        assert descriptor.availability is Availability.UNSUPPORTED
        assert descriptor.baseline is None

    @pytest.mark.parametrize("feature_id", ["dialog", "structured-clone"])
    def test_missing_baseline_keeps_embedded_tier(self, feature_id):
        embedded = next(f for f in EMBEDDED_FEATURES if f.id == feature_id)
        descriptor = normalize_feature(feature_id, {"name": "Renamed"})
        assert descriptor.name == "Renamed"
        assert descriptor.availability == embedded.availability
        assert descriptor.baseline == embedded.baseline

    @pytest.mark.parametrize("feature_id", ["dialog", "structured-clone"])
    def test_false_baseline_is_unsupported(self, feature_id):
        descriptor = normalize_feature(feature_id, {"baseline": False})
        assert descriptor.availability is Availability.UNSUPPORTED
        assert descriptor.baseline is None

    def test_baseline_without_low_date_is_limited(self):
        descriptor = normalize_feature("structured-clone", {"baseline": {"status": "low"}})
        assert descriptor.availability is Availability.LIMITED
        assert descriptor.baseline is None

    def test_official_dates_replace_fixed_tier(self):
        descriptor = normalize_feature("dialog", {"baseline": {"low_date": "2022-03-14"}})
        assert descriptor.availability is None
        assert descriptor.baseline.low_date == date(2022, 3, 14)

    def test_merged_catalog_keeps_embedded_order(self):
        catalog = catalog_from_web_features(WEB_FEATURES)
        assert catalog.source == "official"
        assert [d.id for d in catalog] == [f.id for f in EMBEDDED_FEATURES]
        assert catalog.get("css-has").baseline is not None


class TestOfficialCatalogFallback:
    """Every failure mode ends with the embedded catalog."""

    def test_no_url(self):
        assert asyncio.run(load_official_catalog(None)).source == "embedded"

    def test_success(self, monkeypatch):
        monkeypatch.setattr(official_data, "_fetch_json", _returning(WEB_FEATURES))
        catalog = asyncio.run(load_official_catalog(URL, timeout=1))
        assert catalog.source == "official"

    def test_client_error(self, monkeypatch):
        monkeypatch.setattr(official_data, "_fetch_json", _raising(aiohttp.ClientError("unreachable")))
        assert asyncio.run(load_official_catalog(URL, timeout=1)).source == "embedded"

    def test_malformed_payload(self, monkeypatch):
        monkeypatch.setattr(official_data, "_fetch_json", _returning(["not", "a", "mapping"]))
        assert asyncio.run(load_official_catalog(URL, timeout=1)).source == "embedded"

    def test_bad_date(self, monkeypatch):
        data = {"css-has": {"baseline": {"low_date": "yesterday"}}}
        monkeypatch.setattr(official_data, "_fetch_json", _returning(data))
        assert asyncio.run(load_official_catalog(URL, timeout=1)).source == "embedded"

    def test_nothing_detectable(self, monkeypatch):
        monkeypatch.setattr(official_data, "_fetch_json", _returning({"not-detectable": {}}))
        assert asyncio.run(load_official_catalog(URL, timeout=1)).source == "embedded"

    def test_timeout(self, monkeypatch):
        async def slow_fetch(session, url):
            await asyncio.sleep(10)

        monkeypatch.setattr(official_data, "_fetch_json", slow_fetch)
        assert asyncio.run(load_official_catalog(URL, timeout=0.05)).source == "embedded"


class TestEnrichmentLoading:

    def test_no_urls_uses_embedded_tables(self):
        enrichment = asyncio.run(load_enrichment())
        assert enrichment.lookup_usage("dialog").percentage == 12.5
        assert enrichment.lookup_performance("css-has").bundle_size_kb == 3

    def test_each_source_falls_back_independently(self, monkeypatch):
        performance = {"fetch-api": {"impact": "high", "bundle_size": "+25KB", "polyfill_size": "4KB"}}

        async def fake_fetch(session, url):
            if "usage" in url:
                raise aiohttp.ClientError("down")
            return performance

        monkeypatch.setattr(official_data, "_fetch_json", fake_fetch)
        enrichment = asyncio.run(load_enrichment(
            usage_url="https://data.example.test/usage.json",
            performance_url="https://data.example.test/performance.json",
            timeout=1,
        ))
        assert enrichment.lookup_usage("dialog").percentage == 12.5
        assert enrichment.lookup_performance("fetch-api").bundle_size_kb == 25
        assert enrichment.lookup_performance("css-has") is None
        assert enrichment.lookup_community("array-at").votes == 342
