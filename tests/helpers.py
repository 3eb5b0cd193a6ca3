"""Builders shared by scorer tests."""

from baseline_checker import Availability, MatchOccurrence, Severity
from baseline_checker.classifier import SEVERITY_BY_AVAILABILITY

_AVAILABILITY_BY_SEVERITY = {
    Severity.ERROR: Availability.UNSUPPORTED,
    Severity.WARNING: Availability.NEWLY_AVAILABLE,
    Severity.INFO: Availability.WIDELY_AVAILABLE,
}


def make_occurrence(severity=Severity.INFO, line=1, feature_id="feature", **kwargs):
    availability = kwargs.pop("availability", _AVAILABILITY_BY_SEVERITY[severity])
    assert SEVERITY_BY_AVAILABILITY[availability] == severity
    return MatchOccurrence(
        feature_id=feature_id,
        feature_name=kwargs.pop("feature_name", feature_id),
        line=line,
        column=kwargs.pop("column", 1),
        matched_text=kwargs.pop("matched_text", "x"),
        source_line=kwargs.pop("source_line", "x"),
        availability=availability,
        severity=severity,
        group=kwargs.pop("group", "javascript"),
        **kwargs,
    )
