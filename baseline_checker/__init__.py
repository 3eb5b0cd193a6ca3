"""
Baseline browser-compatibility checker for scripts, stylesheets and markup.
"""

from .catalog import BaselineDates, Catalog, CatalogError, FeatureDescriptor
from .classifier import classify, derive_availability, severity_for
from .enrichment import Enrichment, EnrichmentProvider, TableProvider
from .issue import (
    AnalysisResult,
    Availability,
    MatchOccurrence,
    PerformanceImpact,
    RiskLevel,
    Severity,
    Suggestion,
    Summary,
)
from .main_checker import BaselineChecker
from .matcher import match
from .scorer import score

__all__ = [
    'AnalysisResult',
    'Availability',
    'BaselineChecker',
    'BaselineDates',
    'Catalog',
    'CatalogError',
    'Enrichment',
    'EnrichmentProvider',
    'FeatureDescriptor',
    'MatchOccurrence',
    'PerformanceImpact',
    'RiskLevel',
    'Severity',
    'Suggestion',
    'Summary',
    'TableProvider',
    'classify',
    'derive_availability',
    'match',
    'score',
    'severity_for',
]
