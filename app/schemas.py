"""Pydantic request/response models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class AnalyzeRequest(BaseModel):
    """Unified request: either code+language or file_path."""

    code: Optional[str] = None
    language: Optional[str] = Field(default=None, description="javascript, typescript, css or html")
    file_path: Optional[str] = Field(default=None, description="Absolute path to a source file on the server")


class FixRequest(BaseModel):
    code: str = Field(..., description="Source code to rewrite")
    language: str = Field(default="javascript")


class FeatureRequestIn(BaseModel):
    """Community request to cover a new feature."""

    name: str = Field(..., min_length=1)
    description: str = ""
    use_case: str = ""
    submitted_by: str = "api-user"


class VoteIn(BaseModel):
    feature_id: str
    direction: str = Field(..., pattern="^(up|down)$", description="up or down")


# --- Issue (response) ---


class UsageOut(BaseModel):
    percentage: float
    trend: str
    monthly_growth: float = 0.0
    satisfaction: Optional[float] = None
    adoption_rate: Optional[str] = None


class CommunityOut(BaseModel):
    votes: int
    rating: float
    comments: int = 0
    issues_reported: int = 0
    success_stories: int = 0


class PerformanceOut(BaseModel):
    impact: str
    bundle_size_kb: int
    runtime_overhead: str
    polyfill_size_kb: int = 0


class IssueOut(BaseModel):
    """Single feature occurrence."""

    feature_id: str
    feature: str
    line: int
    column: int
    matched_text: str
    code: str = Field(..., description="Source line, stripped")
    status: str = Field(..., description="widely-available, newly-available, limited or unsupported")
    severity: str = Field(..., description="error, warning or info")
    group: str
    browsers: Dict[str, str] = Field(default_factory=dict)
    fallback: Optional[str] = None
    polyfill: Optional[str] = None
    documentation_url: Optional[str] = None
    usage: Optional[UsageOut] = None
    community: Optional[CommunityOut] = None
    performance: Optional[PerformanceOut] = None


class PerformanceImpactOut(BaseModel):
    bundle_size_kb: int
    impact: str
    recommendation: str


class SummaryOut(BaseModel):
    total: int
    risk_score: float
    risk_level: str
    severity_breakdown: Dict[str, int] = Field(default_factory=dict)
    compatibility_score: float
    performance_impact: Optional[PerformanceImpactOut] = None
    adoption_score: Optional[int] = None


class SuggestionOut(BaseModel):
    type: str
    message: str
    action: str


# --- Responses ---


class AnalyzeResponse(BaseModel):
    """Response for POST /analyze."""

    issues: List[IssueOut] = Field(default_factory=list)
    summary: SummaryOut
    suggestions: List[SuggestionOut] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    file_path: Optional[str] = None


class FeatureOut(BaseModel):
    """Catalog entry."""

    id: str
    name: str
    description: str
    group: str
    detection_pattern: str
    status: Optional[str] = Field(default=None, description="Fixed availability, if any")
    baseline_low_date: Optional[str] = None
    baseline_high_date: Optional[str] = None
    browsers: Dict[str, str] = Field(default_factory=dict)
    fallback: Optional[str] = None
    polyfill: Optional[str] = None
    documentation_url: Optional[str] = None
    spec_url: Optional[str] = None


class CatalogResponse(BaseModel):
    source: str
    features: List[FeatureOut] = Field(default_factory=list)


class FixResponse(BaseModel):
    code: str
    applied: List[str] = Field(default_factory=list)
    changed: bool = False


class FeatureRequestReceiptOut(BaseModel):
    id: str
    name: str
    submitted_at: str


class VoteAckOut(BaseModel):
    feature_id: str
    direction: str
    accepted: bool


class RequestedFeatureOut(BaseModel):
    name: str
    votes: int
    status: str


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")


# --- Multi-file Analysis ---


class MultiFileAnalyzeRequest(BaseModel):
    """Request for multi-file analysis."""

    file_paths: List[str] = Field(..., description="Explicit list of absolute file paths to analyze")


class MultiFileAnalyzeResponse(BaseModel):
    """Response for multi-file analysis."""

    files: List[AnalyzeResponse] = Field(default_factory=list, description="One analysis per readable file")
    skipped: List[str] = Field(default_factory=list, description="Paths that could not be read")
