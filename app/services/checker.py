"""Checker service: wraps baseline_checker and maps to API models."""

from deps import Dict, List, Optional, Path, asdict, logging
from ..config import (
    get_community_url,
    get_fetch_timeout,
    get_official_data_url,
    get_performance_url,
    get_usage_url,
    is_enrichment_enabled,
)
from ..schemas import (
    AnalyzeResponse,
    CatalogResponse,
    CommunityOut,
    FeatureOut,
    IssueOut,
    PerformanceImpactOut,
    PerformanceOut,
    SummaryOut,
    SuggestionOut,
    UsageOut,
)

from baseline_checker import AnalysisResult, BaselineChecker, Catalog, Enrichment, FeatureDescriptor, MatchOccurrence
from baseline_checker.official_data import load_enrichment, load_official_catalog
from baseline_checker.utils import detect_language

logger = logging.getLogger(__name__)


def _issue_to_out(o: MatchOccurrence) -> IssueOut:
    return IssueOut(
        feature_id=o.feature_id,
        feature=o.feature_name,
        line=o.line,
        column=o.column,
        matched_text=o.matched_text,
        code=o.source_line.strip(),
        status=o.availability.value,
        severity=o.severity.value,
        group=o.group,
        browsers=o.browser_support,
        fallback=o.fallback,
        polyfill=o.polyfill,
        documentation_url=o.documentation_url,
        usage=UsageOut(**asdict(o.usage)) if o.usage is not None else None,
        community=CommunityOut(**asdict(o.community)) if o.community is not None else None,
        performance=PerformanceOut(**asdict(o.performance)) if o.performance is not None else None,
    )


def result_to_response(result: AnalysisResult, file_path: Optional[str] = None) -> AnalyzeResponse:
    s = result.summary
    impact = s.performance_impact
    return AnalyzeResponse(
        issues=[_issue_to_out(o) for o in result.issues],
        summary=SummaryOut(
            total=s.total,
            risk_score=s.risk_score,
            risk_level=s.risk_level.value,
            severity_breakdown=s.severity_breakdown,
            compatibility_score=s.compatibility_score,
            performance_impact=PerformanceImpactOut(**asdict(impact)) if impact is not None else None,
            adoption_score=s.adoption_score,
        ),
        suggestions=[SuggestionOut(**asdict(sg)) for sg in result.suggestions],
        metadata=result.metadata,
        file_path=file_path,
    )


def feature_to_out(d: FeatureDescriptor) -> FeatureOut:
    return FeatureOut(
        id=d.id,
        name=d.name,
        description=d.description,
        group=d.group,
        detection_pattern=d.detection_pattern,
        status=d.availability.value if d.availability is not None else None,
        baseline_low_date=d.baseline.low_date.isoformat() if d.baseline else None,
        baseline_high_date=(
            d.baseline.high_date.isoformat() if d.baseline and d.baseline.high_date else None
        ),
        browsers=dict(d.browser_support),
        fallback=d.fallback,
        polyfill=d.polyfill,
        documentation_url=d.documentation_url,
        spec_url=d.spec_url,
    )


class CheckerService:
    """Wraps BaselineChecker for use by the API.

    Starts on the embedded catalog; `load_remote_data` swaps in a new checker
    once remote data is fetched, so requests never see a half-built one.
    """

    def __init__(self, checker: Optional[BaselineChecker] = None):
        if checker is None:
            enrichment = Enrichment.embedded() if is_enrichment_enabled() else Enrichment()
            checker = BaselineChecker(Catalog.load(), enrichment)
        self.checker = checker

    async def load_remote_data(self) -> None:
        """Fetch configured official and enrichment data, falling back to embedded tables."""
        timeout = get_fetch_timeout()
        catalog = await load_official_catalog(get_official_data_url(), timeout)
        enrichment = Enrichment()
        if is_enrichment_enabled():
            enrichment = await load_enrichment(
                get_usage_url(), get_community_url(), get_performance_url(), timeout
            )
        self.checker = BaselineChecker(catalog, enrichment)
        logger.info("Checker ready: %d features (%s catalog)", len(catalog), catalog.source)

    def analyze_code(self, code: str, language: str) -> AnalyzeResponse:
        """Run feature detection on raw code."""
        return result_to_response(self.checker.analyze(code, language.lower()))

    def analyze_file(self, file_path: Path) -> AnalyzeResponse:
        """Run feature detection on a file path. Read errors propagate to the caller."""
        code = file_path.read_text(encoding="utf-8", errors="replace")
        result = self.checker.analyze(code, detect_language(file_path))
        return result_to_response(result, file_path=str(file_path))

    def analyze_files(self, file_paths: List[Path]) -> Dict[Path, AnalyzeResponse]:
        """Run feature detection on multiple files.

        Args:
            file_paths: List of file paths to analyze

        Returns:
            Dictionary mapping file path to its analysis; unreadable files are skipped
        """
        results: Dict[Path, AnalyzeResponse] = {}
        for file_path in file_paths:
            try:
                results[file_path] = self.analyze_file(file_path)
            except OSError as e:
                logger.warning("Could not analyze %s: %s", file_path, e)
        return results

    def catalog(self) -> CatalogResponse:
        return CatalogResponse(
            source=self.checker.catalog.source,
            features=[feature_to_out(d) for d in self.checker.list_catalog()],
        )

    def feature(self, feature_id: str) -> Optional[FeatureOut]:
        descriptor = self.checker.get_feature(feature_id)
        return feature_to_out(descriptor) if descriptor is not None else None
