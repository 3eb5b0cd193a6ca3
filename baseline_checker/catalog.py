"""
Feature catalog: immutable descriptors for detectable web-platform features.
"""

import logging
import re
from dataclasses import dataclass, field, replace
from datetime import date
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Pattern, Tuple

from .issue import Availability

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog data is malformed."""


@dataclass(frozen=True)
class BaselineDates:
    """Dates a feature reached Baseline "low" (newly) and "high" (widely) status."""
    low_date: date
    high_date: Optional[date] = None


@dataclass(frozen=True)
class FeatureDescriptor:
    """One detectable web-platform capability and its compatibility metadata.

    Exactly one of `availability` or `baseline` may be set. A descriptor with
    neither is treated as unsupported.
    """
    id: str
    name: str
    description: str
    detection_pattern: str
    group: str
    availability: Optional[Availability] = None
    baseline: Optional[BaselineDates] = None
    browser_support: Mapping[str, str] = field(default_factory=dict)
    fallback: Optional[str] = None
    polyfill: Optional[str] = None
    documentation_url: Optional[str] = None
    spec_url: Optional[str] = None


def _compile(descriptor: FeatureDescriptor) -> Pattern:
    try:
        return re.compile(descriptor.detection_pattern)
    except re.error as e:
        raise CatalogError(
            f"Feature '{descriptor.id}' has an invalid detection pattern: {e}"
        ) from e


def _validate(descriptor: FeatureDescriptor) -> None:
    if not descriptor.id or not isinstance(descriptor.id, str):
        raise CatalogError("Feature descriptor without an id")
    if not isinstance(descriptor.detection_pattern, str):
        raise CatalogError(f"Feature '{descriptor.id}' has a detection pattern that is not a string")
    if not descriptor.detection_pattern:
        raise CatalogError(f"Feature '{descriptor.id}' has an empty detection pattern")
    if descriptor.availability is not None and not isinstance(descriptor.availability, Availability):
        raise CatalogError(
            f"Feature '{descriptor.id}' has unknown availability {descriptor.availability!r}"
        )
    if not isinstance(descriptor.browser_support, Mapping):
        raise CatalogError(f"Feature '{descriptor.id}' has browser support that is not a mapping")
    if descriptor.availability is not None and descriptor.baseline is not None:
        raise CatalogError(
            f"Feature '{descriptor.id}' sets both a fixed availability and baseline dates"
        )
    dates = descriptor.baseline
    if dates is not None:
        if not isinstance(dates, BaselineDates):
            raise CatalogError(f"Feature '{descriptor.id}' has malformed baseline dates")
        if not isinstance(dates.low_date, date):
            raise CatalogError(f"Feature '{descriptor.id}' has baseline dates without a low date")
        if dates.high_date is not None and not isinstance(dates.high_date, date):
            raise CatalogError(f"Feature '{descriptor.id}' has a high date that is not a date")
        if dates.high_date is not None and dates.high_date < dates.low_date:
            raise CatalogError(
                f"Feature '{descriptor.id}' reaches widely-available before newly-available"
            )


class Catalog:
    """Read-only, ordered collection of feature descriptors.

    Validation and pattern compilation happen once here, so the matcher can
    trust every entry it iterates over. Stored descriptors carry a read-only
    copy of their browser support table.
    """

    def __init__(self, descriptors: Iterable[FeatureDescriptor], source: str = "embedded"):
        self.source = source
        entries: List[Tuple[FeatureDescriptor, Pattern]] = []
        seen = set()
        for descriptor in descriptors:
            _validate(descriptor)
            if descriptor.id in seen:
                raise CatalogError(f"Duplicate feature id '{descriptor.id}'")
            seen.add(descriptor.id)
            descriptor = replace(
                descriptor, browser_support=MappingProxyType(dict(descriptor.browser_support))
            )
            entries.append((descriptor, _compile(descriptor)))
        self._entries: Tuple[Tuple[FeatureDescriptor, Pattern], ...] = tuple(entries)
        self._by_id: Mapping[str, FeatureDescriptor] = {d.id: d for d, _ in entries}

    @classmethod
    def load(cls) -> "Catalog":
        """Build the catalog from the embedded feature table."""
        from .feature_data import EMBEDDED_FEATURES

        catalog = cls(EMBEDDED_FEATURES, source="embedded")
        logger.debug("Loaded embedded catalog with %d features", len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FeatureDescriptor]:
        return (descriptor for descriptor, _ in self._entries)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self._by_id

    def entries(self) -> Iterator[Tuple[FeatureDescriptor, Pattern]]:
        """Descriptors paired with their compiled patterns, in catalog order."""
        return iter(self._entries)

    def get(self, feature_id: str) -> Optional[FeatureDescriptor]:
        return self._by_id.get(feature_id)

    def descriptors(self) -> List[FeatureDescriptor]:
        return [descriptor for descriptor, _ in self._entries]
