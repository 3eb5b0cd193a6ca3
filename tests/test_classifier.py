"""Tests for availability derivation and the fixed severity table."""

from datetime import date

import pytest

from baseline_checker import Availability, BaselineDates, FeatureDescriptor, Severity
from baseline_checker.classifier import SEVERITY_BY_AVAILABILITY, classify, derive_availability, severity_for


def _dated(low, high=None):
    return FeatureDescriptor(
        id="dated",
        name="Dated",
        description="",
        detection_pattern="dated",
        group="css",
        baseline=BaselineDates(low_date=low, high_date=high),
    )


class TestSeverityMapping:
    """Severity is always the fixed image of availability."""

    @pytest.mark.parametrize("availability,severity", [
        (Availability.WIDELY_AVAILABLE, Severity.INFO),
        (Availability.NEWLY_AVAILABLE, Severity.WARNING),
        (Availability.LIMITED, Severity.WARNING),
        (Availability.UNSUPPORTED, Severity.ERROR),
    ])
    def test_table(self, availability, severity):
        assert severity_for(availability) is severity

    def test_table_covers_every_tier(self):
        assert set(SEVERITY_BY_AVAILABILITY) == set(Availability)


class TestDateDerivation:
    """Baseline dates are compared against the injected date."""

    LOW = date(2023, 3, 1)
    HIGH = date(2025, 9, 1)

    def test_before_low_date_is_limited(self):
        assert derive_availability(_dated(self.LOW, self.HIGH), date(2023, 2, 28)) is Availability.LIMITED

    def test_low_date_reached_is_newly_available(self):
        assert derive_availability(_dated(self.LOW, self.HIGH), self.LOW) is Availability.NEWLY_AVAILABLE

    def test_high_date_reached_is_widely_available(self):
        assert derive_availability(_dated(self.LOW, self.HIGH), self.HIGH) is Availability.WIDELY_AVAILABLE

    def test_missing_high_date_stays_newly_available(self):
        assert derive_availability(_dated(self.LOW), date(2040, 1, 1)) is Availability.NEWLY_AVAILABLE

    def test_no_data_is_unsupported(self):
        descriptor = FeatureDescriptor(
            id="none", name="None", description="", detection_pattern="none", group="css",
        )
        assert classify(descriptor, date(2025, 1, 1)) == (Availability.UNSUPPORTED, Severity.ERROR)

    def test_fixed_availability_ignores_date(self, catalog):
        css_has = catalog.get("css-has")
        for today in (date(2000, 1, 1), date(2100, 1, 1)):
            assert classify(css_has, today) == (Availability.NEWLY_AVAILABLE, Severity.WARNING)

    def test_catalog_entries_always_classify(self, catalog):
        for descriptor in catalog:
            availability, severity = classify(descriptor, date(2025, 1, 15))
            assert severity is SEVERITY_BY_AVAILABILITY[availability]
