"""
Data models for the Baseline compatibility checker.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .enrichment import CommunityRecord, PerformanceRecord, UsageRecord


class Availability(Enum):
    """Baseline availability tiers."""
    WIDELY_AVAILABLE = "widely-available"
    NEWLY_AVAILABLE = "newly-available"
    LIMITED = "limited"
    UNSUPPORTED = "unsupported"


class Severity(Enum):
    """Issue severity levels."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class RiskLevel(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class MatchOccurrence:
    """One matched instance of a catalog feature in the analyzed text."""
    feature_id: str
    feature_name: str
    line: int
    column: int
    matched_text: str
    source_line: str
    availability: Availability
    severity: Severity
    group: str
    browser_support: Dict[str, str] = field(default_factory=dict)
    fallback: Optional[str] = None
    polyfill: Optional[str] = None
    documentation_url: Optional[str] = None
    usage: Optional["UsageRecord"] = None
    community: Optional["CommunityRecord"] = None
    performance: Optional["PerformanceRecord"] = None
    usage_multiplier: float = 1.0


@dataclass(frozen=True)
class Suggestion:
    """Advisory message derived from the whole occurrence list."""
    type: str
    message: str
    action: str


@dataclass(frozen=True)
class PerformanceImpact:
    bundle_size_kb: int
    impact: str
    recommendation: str


@dataclass(frozen=True)
class Summary:
    """Aggregate scores for one analyzed text."""
    total: int
    risk_score: float
    risk_level: RiskLevel
    severity_breakdown: Dict[str, int]
    compatibility_score: float
    performance_impact: Optional[PerformanceImpact] = None
    adoption_score: Optional[int] = None


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the engine returns for a single `analyze` call."""
    issues: List[MatchOccurrence]
    summary: Summary
    suggestions: List[Suggestion]
    metadata: Dict[str, Any]
