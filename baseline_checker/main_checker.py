"""
Main checker class that runs the matcher and scorer over source text.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from .catalog import Catalog, FeatureDescriptor
from .enrichment import Enrichment
from .issue import AnalysisResult
from .matcher import FeatureMatcher
from .scorer import score
from .utils import split_lines

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaselineChecker:
    """Analyzes source text for web-platform features and scores the findings.

    The catalog and enrichment providers are fixed at construction and never
    mutated, so one instance can serve any number of callers. Pass `clock` to
    pin the date used for date-derived availability and the result timestamp.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        enrichment: Optional[Enrichment] = None,
        clock: Optional[Clock] = None,
    ):
        self.catalog = catalog if catalog is not None else Catalog.load()
        self.enrichment = enrichment or Enrichment()
        self.clock = clock or utc_now

    def analyze(self, source_text: str, language: str = "javascript") -> AnalysisResult:
        """Detect features in `source_text` and return issues, summary and suggestions."""
        source_text = source_text or ""
        now = self.clock()
        issues = FeatureMatcher(self.catalog, self.enrichment).match(source_text, now.date())
        summary, suggestions = score(
            issues,
            with_performance=self.enrichment.performance is not None,
            with_adoption=self.enrichment.community is not None,
        )
        logger.debug(
            "Analyzed %d characters of %s: %d issues, risk %s",
            len(source_text), language, summary.total, summary.risk_score,
        )
        return AnalysisResult(
            issues=issues,
            summary=summary,
            suggestions=suggestions,
            metadata={
                "analyzed_at": now.isoformat(),
                "language": language,
                "line_count": len(split_lines(source_text)),
                "character_count": len(source_text),
                "catalog_source": self.catalog.source,
                "enriched": self.enrichment.enabled,
            },
        )

    def analyze_many(self, sources: Mapping[str, Tuple[str, str]]) -> Dict[str, AnalysisResult]:
        """Analyze several named sources.

        Args:
            sources: Mapping of name (e.g. file path) to (text, language)

        Returns:
            Dictionary mapping the same names to their results
        """
        results: Dict[str, AnalysisResult] = {}
        for name, (text, language) in sources.items():
            results[name] = self.analyze(text, language)
        return results

    def list_catalog(self) -> List[FeatureDescriptor]:
        return self.catalog.descriptors()

    def get_feature(self, feature_id: str) -> Optional[FeatureDescriptor]:
        return self.catalog.get(feature_id)
