"""
Auxiliary usage, community and performance data keyed by feature id.

Each kind of data sits behind an `EnrichmentProvider`, so a network-backed
provider can replace the embedded tables without touching the scorer.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

from .utils import parse_size_kb


@dataclass(frozen=True)
class UsageRecord:
    """Share of pages using a feature, from platform usage statistics."""
    percentage: float
    trend: str
    monthly_growth: float = 0.0
    satisfaction: Optional[float] = None
    adoption_rate: Optional[str] = None


@dataclass(frozen=True)
class CommunityRecord:
    votes: int
    rating: float
    comments: int = 0
    issues_reported: int = 0
    success_stories: int = 0


@dataclass(frozen=True)
class PerformanceRecord:
    impact: str
    bundle_size_kb: int
    runtime_overhead: str
    polyfill_size_kb: int = 0


class EnrichmentProvider(Protocol):
    def lookup(self, feature_id: str) -> Optional[Any]:
        ...


class TableProvider:
    """Provider backed by an in-memory mapping of feature id to record."""

    def __init__(self, records: Mapping[str, Any], name: str = "table"):
        self.name = name
        self._records: Dict[str, Any] = dict(records)

    def lookup(self, feature_id: str) -> Optional[Any]:
        return self._records.get(feature_id)

    def __len__(self) -> int:
        return len(self._records)


def usage_from_dict(data: Mapping[str, Any]) -> UsageRecord:
    """Build a UsageRecord from the dashboard shape ({usage_stats, developer_sentiment})."""
    stats = data["usage_stats"]
    sentiment = data.get("developer_sentiment") or {}
    return UsageRecord(
        percentage=float(stats["percentage"]),
        trend=str(stats.get("trend", "stable")),
        monthly_growth=float(stats.get("monthly_growth", 0.0)),
        satisfaction=sentiment.get("satisfaction"),
        adoption_rate=sentiment.get("adoption_rate"),
    )


def community_from_dict(data: Mapping[str, Any]) -> CommunityRecord:
    return CommunityRecord(
        votes=int(data.get("votes", 0)),
        rating=float(data.get("rating", 3)),
        comments=int(data.get("comments", 0)),
        issues_reported=int(data.get("issues_reported", 0)),
        success_stories=int(data.get("success_stories", 0)),
    )


def performance_from_dict(data: Mapping[str, Any]) -> PerformanceRecord:
    """Build a PerformanceRecord; sizes are strings such as "+2KB" or "0KB"."""
    return PerformanceRecord(
        impact=str(data.get("impact", "minimal")),
        bundle_size_kb=parse_size_kb(data.get("bundle_size")),
        runtime_overhead=str(data.get("runtime_overhead", "negligible")),
        polyfill_size_kb=parse_size_kb(data.get("polyfill_size")),
    )


USAGE_DATA: Dict[str, Dict[str, Any]] = {
    "dialog": {
        "usage_stats": {"percentage": 12.5, "trend": "increasing", "monthly_growth": 2.3},
        "developer_sentiment": {"satisfaction": 4.2, "adoption_rate": "medium"},
    },
    "array-at": {
        "usage_stats": {"percentage": 35.7, "trend": "stable", "monthly_growth": 0.8},
        "developer_sentiment": {"satisfaction": 4.6, "adoption_rate": "high"},
    },
    "optional-chaining": {
        "usage_stats": {"percentage": 78.2, "trend": "stable", "monthly_growth": 0.2},
        "developer_sentiment": {"satisfaction": 4.8, "adoption_rate": "very_high"},
    },
}

COMMUNITY_DATA: Dict[str, Dict[str, Any]] = {
    "dialog": {"votes": 156, "rating": 4.2, "comments": 23, "issues_reported": 8, "success_stories": 12},
    "array-at": {"votes": 342, "rating": 4.7, "comments": 45, "issues_reported": 2, "success_stories": 28},
    "optional-chaining": {"votes": 1247, "rating": 4.9, "comments": 167, "issues_reported": 1, "success_stories": 89},
}

PERFORMANCE_DATA: Dict[str, Dict[str, Any]] = {
    "dialog": {"impact": "minimal", "bundle_size": "+2KB", "runtime_overhead": "negligible", "polyfill_size": "8KB"},
    "array-at": {"impact": "minimal", "bundle_size": "0KB", "runtime_overhead": "negligible", "polyfill_size": "1KB"},
    "optional-chaining": {"impact": "positive", "bundle_size": "0KB", "runtime_overhead": "reduced", "polyfill_size": "3KB"},
    "container-queries": {"impact": "moderate", "bundle_size": "+5KB", "runtime_overhead": "low", "polyfill_size": "15KB"},
    "css-has": {"impact": "moderate", "bundle_size": "+3KB", "runtime_overhead": "medium", "polyfill_size": "12KB"},
}


def usage_provider(data: Mapping[str, Mapping[str, Any]] = USAGE_DATA) -> TableProvider:
    return TableProvider({k: usage_from_dict(v) for k, v in data.items()}, name="usage")


def community_provider(data: Mapping[str, Mapping[str, Any]] = COMMUNITY_DATA) -> TableProvider:
    return TableProvider({k: community_from_dict(v) for k, v in data.items()}, name="community")


def performance_provider(data: Mapping[str, Mapping[str, Any]] = PERFORMANCE_DATA) -> TableProvider:
    return TableProvider({k: performance_from_dict(v) for k, v in data.items()}, name="performance")


@dataclass(frozen=True)
class Enrichment:
    """The optional providers consulted for every occurrence."""
    usage: Optional[EnrichmentProvider] = None
    community: Optional[EnrichmentProvider] = None
    performance: Optional[EnrichmentProvider] = None

    @classmethod
    def embedded(cls) -> "Enrichment":
        return cls(
            usage=usage_provider(),
            community=community_provider(),
            performance=performance_provider(),
        )

    def lookup_usage(self, feature_id: str) -> Optional[UsageRecord]:
        return self.usage.lookup(feature_id) if self.usage is not None else None

    def lookup_community(self, feature_id: str) -> Optional[CommunityRecord]:
        return self.community.lookup(feature_id) if self.community is not None else None

    def lookup_performance(self, feature_id: str) -> Optional[PerformanceRecord]:
        return self.performance.lookup(feature_id) if self.performance is not None else None

    @property
    def enabled(self) -> bool:
        return any(p is not None for p in (self.usage, self.community, self.performance))


def usage_multiplier(usage: Optional[UsageRecord]) -> float:
    """Rare features weigh more per occurrence than ubiquitous ones."""
    if usage is None:
        return 1.0
    if usage.percentage < 20:
        return 1.5
    if usage.percentage > 60:
        return 0.8
    return 1.0
