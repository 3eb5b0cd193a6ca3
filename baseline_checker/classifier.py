"""
Availability and severity classification for catalog features.
"""

from datetime import date
from typing import Dict, Tuple

from .catalog import FeatureDescriptor
from .issue import Availability, Severity

SEVERITY_BY_AVAILABILITY: Dict[Availability, Severity] = {
    Availability.WIDELY_AVAILABLE: Severity.INFO,
    Availability.NEWLY_AVAILABLE: Severity.WARNING,
    Availability.LIMITED: Severity.WARNING,
    Availability.UNSUPPORTED: Severity.ERROR,
}


def severity_for(availability: Availability) -> Severity:
    return SEVERITY_BY_AVAILABILITY[availability]


def derive_availability(descriptor: FeatureDescriptor, today: date) -> Availability:
    """Availability of a feature as of `today`.

    A fixed availability wins; otherwise baseline dates are compared against
    `today` (a date that has been reached counts as passed). No data at all
    means unsupported.
    """
    if descriptor.availability is not None:
        return descriptor.availability
    dates = descriptor.baseline
    if dates is None:
        return Availability.UNSUPPORTED
    if dates.high_date is not None and dates.high_date <= today:
        return Availability.WIDELY_AVAILABLE
    if dates.low_date <= today:
        return Availability.NEWLY_AVAILABLE
    return Availability.LIMITED


def classify(descriptor: FeatureDescriptor, today: date) -> Tuple[Availability, Severity]:
    availability = derive_availability(descriptor, today)
    return availability, severity_for(availability)
