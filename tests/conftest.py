"""Shared fixtures: a pinned clock and checkers built on the embedded catalog."""

from datetime import datetime, timezone

import pytest

from baseline_checker import BaselineChecker, Catalog, Enrichment

FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture(scope="session")
def catalog():
    return Catalog.load()


@pytest.fixture
def checker(catalog, fixed_clock):
    """Checker without enrichment: every occurrence has multiplier 1.0."""
    return BaselineChecker(catalog, clock=fixed_clock)


@pytest.fixture
def enriched_checker(catalog, fixed_clock):
    return BaselineChecker(catalog, Enrichment.embedded(), clock=fixed_clock)
