"""Tests for catalog construction and validation."""

from datetime import date

import pytest

from baseline_checker import Availability, BaselineDates, Catalog, CatalogError, FeatureDescriptor
from baseline_checker.feature_data import EMBEDDED_FEATURES


def _descriptor(**overrides):
    fields = dict(
        id="sample",
        name="Sample",
        description="Sample feature",
        detection_pattern=r"sample\(",
        group="javascript",
        availability=Availability.WIDELY_AVAILABLE,
    )
    fields.update(overrides)
    return FeatureDescriptor(**fields)


class TestEmbeddedCatalog:
    """The embedded table must always load."""

    def test_load_builds_every_entry(self, catalog):
        assert len(catalog) == len(EMBEDDED_FEATURES)
        assert catalog.source == "embedded"

    def test_ids_are_unique(self, catalog):
        ids = [d.id for d in catalog]
        assert len(ids) == len(set(ids))

    def test_iteration_follows_table_order(self, catalog):
        assert [d.id for d in catalog] == [f.id for f in EMBEDDED_FEATURES]

    def test_core_features_present(self, catalog):
        for feature_id in ("optional-chaining", "nullish-coalescing", "css-has", "dialog", "temporal-api"):
            assert feature_id in catalog

    def test_get_unknown_returns_none(self, catalog):
        assert catalog.get("does-not-exist") is None
        assert catalog.get("css-has").name == "CSS :has() Selector"

    def test_entries_pair_descriptor_with_compiled_pattern(self, catalog):
        for descriptor, pattern in catalog.entries():
            assert pattern.pattern == descriptor.detection_pattern


class TestCatalogValidation:
    """Malformed data fails at construction time."""

    def test_duplicate_id(self):
        with pytest.raises(CatalogError, match="Duplicate"):
            Catalog([_descriptor(), _descriptor()])

    def test_invalid_pattern(self):
        with pytest.raises(CatalogError, match="invalid detection pattern"):
            Catalog([_descriptor(detection_pattern="(unclosed")])

    def test_empty_pattern(self):
        with pytest.raises(CatalogError):
            Catalog([_descriptor(detection_pattern="")])

    def test_empty_id(self):
        with pytest.raises(CatalogError):
            Catalog([_descriptor(id="")])

    def test_availability_and_dates_are_exclusive(self):
        dates = BaselineDates(low_date=date(2022, 1, 1), high_date=date(2024, 7, 1))
        with pytest.raises(CatalogError, match="both"):
            Catalog([_descriptor(baseline=dates)])

    def test_high_date_before_low_date(self):
        dates = BaselineDates(low_date=date(2024, 1, 1), high_date=date(2023, 1, 1))
        with pytest.raises(CatalogError):
            Catalog([_descriptor(availability=None, baseline=dates)])

    def test_descriptor_without_availability_is_accepted(self):
        catalog = Catalog([_descriptor(availability=None)])
        assert len(catalog) == 1

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)

    def test_availability_must_be_a_tier(self):
        with pytest.raises(CatalogError, match="unknown availability"):
            Catalog([_descriptor(availability="newly-available")])

    def test_pattern_must_be_a_string(self):
        with pytest.raises(CatalogError, match="not a string"):
            Catalog([_descriptor(detection_pattern=42)])

    def test_low_date_must_be_a_date(self):
        dates = BaselineDates(low_date="2022-03-14")
        with pytest.raises(CatalogError, match="low date"):
            Catalog([_descriptor(availability=None, baseline=dates)])

    def test_high_date_must_be_a_date(self):
        dates = BaselineDates(low_date=date(2022, 3, 14), high_date="2024-09-14")
        with pytest.raises(CatalogError, match="high date"):
            Catalog([_descriptor(availability=None, baseline=dates)])

    def test_browser_support_must_be_a_mapping(self):
        with pytest.raises(CatalogError, match="browser support"):
            Catalog([_descriptor(browser_support=["chrome"])])


class TestCatalogImmutability:
    """Descriptors handed out by the catalog cannot change shared state."""

    def test_browser_support_is_read_only(self, catalog):
        dialog = catalog.get("dialog")
        with pytest.raises(TypeError):
            dialog.browser_support["chrome"] = "999+"
        assert dialog.browser_support["chrome"] == "37+"

    def test_listed_descriptors_are_read_only(self, checker):
        with pytest.raises(TypeError):
            checker.list_catalog()[0].browser_support["chrome"] = "999+"
        issue = checker.analyze("<dialog open></dialog>").issues[0]
        assert issue.browser_support["chrome"] == "37+"

    def test_source_table_is_copied(self):
        support = {"chrome": "100+"}
        catalog = Catalog([_descriptor(browser_support=support)])
        support["chrome"] = "1+"
        assert catalog.get("sample").browser_support["chrome"] == "100+"

    def test_descriptor_still_equals_its_source(self):
        source = _descriptor(browser_support={"chrome": "100+"})
        assert Catalog([source]).get("sample") == source
