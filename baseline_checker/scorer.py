"""
Aggregation of occurrences into risk, compatibility and advisory output.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .issue import MatchOccurrence, PerformanceImpact, RiskLevel, Severity, Suggestion, Summary

BASE_SCORE: Dict[Severity, int] = {
    Severity.ERROR: 15,
    Severity.WARNING: 5,
    Severity.INFO: 1,
}

MAX_RISK = 100
HIGH_RISK_THRESHOLD = 40
MEDIUM_RISK_THRESHOLD = 15

WARNING_SUGGESTION_MIN = 3
POLYFILL_BUDGET_KB = 30
LAZY_LOADING_THRESHOLD_KB = 20
LOW_COMMUNITY_RATING = 3.5
DEFAULT_ADOPTION = 70


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def calculate_risk_score(occurrences: Sequence[MatchOccurrence]) -> float:
    total = sum(BASE_SCORE[o.severity] * o.usage_multiplier for o in occurrences)
    return round(min(MAX_RISK, total), 2)


def risk_level(score: float) -> RiskLevel:
    if score >= HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def compatibility_score(risk: float) -> float:
    return round(max(0, MAX_RISK - risk), 2)


def severity_breakdown(occurrences: Sequence[MatchOccurrence]) -> Dict[str, int]:
    """Count occurrences per severity, in first-seen order."""
    breakdown: Dict[str, int] = {}
    for o in occurrences:
        breakdown[o.severity.value] = breakdown.get(o.severity.value, 0) + 1
    return breakdown


def calculate_performance_impact(occurrences: Sequence[MatchOccurrence]) -> PerformanceImpact:
    """Sum declared bundle sizes; the overall tier only ever moves up."""
    total_kb = 0
    impact = "minimal"
    for o in occurrences:
        if o.performance is None:
            continue
        total_kb += o.performance.bundle_size_kb
        if o.performance.impact == "high":
            impact = "high"
        elif o.performance.impact == "moderate" and impact == "minimal":
            impact = "moderate"
    recommendation = (
        "Consider lazy loading" if total_kb > LAZY_LOADING_THRESHOLD_KB else "Acceptable overhead"
    )
    return PerformanceImpact(bundle_size_kb=total_kb, impact=impact, recommendation=recommendation)


def calculate_adoption_score(occurrences: Sequence[MatchOccurrence]) -> int:
    """Community-weighted adoption score; features without community data count as 70."""
    if not occurrences:
        return 100
    total = 0.0
    for o in occurrences:
        if o.community is None:
            total += DEFAULT_ADOPTION
            continue
        votes = min(o.community.votes, 1000)
        total += (o.community.rating / 5) * 100 * (votes / 1000 + 0.1)
    return round(total / len(occurrences))


def generate_suggestions(occurrences: Sequence[MatchOccurrence]) -> List[Suggestion]:
    """Apply the fixed suggestion rules in order. Rules are independent."""
    suggestions: List[Suggestion] = []
    errors = sum(1 for o in occurrences if o.severity == Severity.ERROR)
    warnings = sum(1 for o in occurrences if o.severity == Severity.WARNING)
    with_polyfill = sum(1 for o in occurrences if o.polyfill)

    if errors > 0:
        suggestions.append(Suggestion(
            type="error",
            message=f"{errors} unsupported {_plural(errors, 'feature', 'features')} may break in older browsers",
            action="Add polyfills or implement fallbacks",
        ))

    if warnings >= WARNING_SUGGESTION_MIN:
        suggestions.append(Suggestion(
            type="warning",
            message=f"{warnings} newly available features detected",
            action="Verify against your browser support requirements",
        ))

    if with_polyfill > 0:
        suggestions.append(Suggestion(
            type="fix",
            message=f"{with_polyfill} {_plural(with_polyfill, 'feature has', 'features have')} polyfill options available",
            action="Consider adding recommended polyfills",
        ))

    polyfill_kb = sum(o.performance.polyfill_size_kb for o in occurrences if o.performance is not None)
    if polyfill_kb > POLYFILL_BUDGET_KB:
        suggestions.append(Suggestion(
            type="performance",
            message=f"Polyfills would add {polyfill_kb}KB to your bundle",
            action="Consider feature detection and progressive enhancement",
        ))

    low_rated = sum(
        1 for o in occurrences
        if o.community is not None and o.community.rating < LOW_COMMUNITY_RATING
    )
    if low_rated > 0:
        suggestions.append(Suggestion(
            type="community",
            message=f"{low_rated} features have mixed community feedback",
            action="Review community concerns and alternative approaches",
        ))

    declining = sum(1 for o in occurrences if o.usage is not None and o.usage.trend == "decreasing")
    if declining > 0:
        suggestions.append(Suggestion(
            type="trend",
            message=f"{declining} features show declining usage",
            action="Consider more popular alternatives",
        ))

    return suggestions


def score(
    occurrences: Sequence[MatchOccurrence],
    with_performance: bool = False,
    with_adoption: bool = False,
) -> Tuple[Summary, List[Suggestion]]:
    """Fold occurrences into a Summary and the ordered suggestion list."""
    risk = calculate_risk_score(occurrences)
    performance: Optional[PerformanceImpact] = None
    if with_performance:
        performance = calculate_performance_impact(occurrences)
    adoption: Optional[int] = None
    if with_adoption:
        adoption = calculate_adoption_score(occurrences)
    summary = Summary(
        total=len(occurrences),
        risk_score=risk,
        risk_level=risk_level(risk),
        severity_breakdown=severity_breakdown(occurrences),
        compatibility_score=compatibility_score(risk),
        performance_impact=performance,
        adoption_score=adoption,
    )
    return summary, generate_suggestions(occurrences)
