"""
Line-oriented matcher: scans source text against every catalog entry.
"""

from datetime import date
from typing import Dict, List, Optional, Tuple

from .catalog import Catalog, FeatureDescriptor
from .classifier import classify
from .enrichment import Enrichment, usage_multiplier
from .issue import Availability, MatchOccurrence, Severity
from .utils import split_lines


class FeatureMatcher:
    """Produces one occurrence per feature per matching line.

    Each line is searched once per feature, so a feature repeated on the same
    line is reported at its first position only.
    """

    def __init__(self, catalog: Catalog, enrichment: Optional[Enrichment] = None):
        self.catalog = catalog
        self.enrichment = enrichment or Enrichment()
        self.occurrences: List[MatchOccurrence] = []
        self.lines: List[str] = []
        self.today: Optional[date] = None
        self._classified: Dict[str, Tuple[Availability, Severity]] = {}

    def match(self, text: str, today: date) -> List[MatchOccurrence]:
        """Run every catalog pattern over `text`. Order: catalog order, then line order."""
        self.lines = split_lines(text) if text else []
        self.today = today
        self.occurrences = []
        self._classified = {}
        for descriptor, pattern in self.catalog.entries():
            for i, line in enumerate(self.lines, 1):
                found = pattern.search(line)
                if not found:
                    continue
                self._add_occurrence(descriptor, i, found.start() + 1, found.group(0), line)
        return self.occurrences

    def _classification(self, descriptor: FeatureDescriptor) -> Tuple[Availability, Severity]:
        if descriptor.id not in self._classified:
            self._classified[descriptor.id] = classify(descriptor, self.today)
        return self._classified[descriptor.id]

    def _add_occurrence(
        self,
        descriptor: FeatureDescriptor,
        line_num: int,
        col: int,
        matched_text: str,
        source_line: str,
    ):
        availability, severity = self._classification(descriptor)
        usage = self.enrichment.lookup_usage(descriptor.id)
        self.occurrences.append(
            MatchOccurrence(
                feature_id=descriptor.id,
                feature_name=descriptor.name,
                line=line_num,
                column=col,
                matched_text=matched_text,
                source_line=source_line,
                availability=availability,
                severity=severity,
                group=descriptor.group,
                browser_support=dict(descriptor.browser_support),
                fallback=descriptor.fallback,
                polyfill=descriptor.polyfill,
                documentation_url=descriptor.documentation_url,
                usage=usage,
                community=self.enrichment.lookup_community(descriptor.id),
                performance=self.enrichment.lookup_performance(descriptor.id),
                usage_multiplier=usage_multiplier(usage),
            )
        )


def match(
    text: str,
    catalog: Catalog,
    today: Optional[date] = None,
    enrichment: Optional[Enrichment] = None,
) -> List[MatchOccurrence]:
    """Match `text` against `catalog`, classifying features as of `today` (default: now)."""
    return FeatureMatcher(catalog, enrichment).match(text, today or date.today())
