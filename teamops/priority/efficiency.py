"""Estimated vs. actual time efficiency."""

from teamops.priority.models import EfficiencyResult, EfficiencyStatus
from teamops.priority.tables import DURATION_HOURS, DEFAULT_DURATION_HOURS


def calculate_efficiency(estimated_duration: str, actual_minutes: float) -> EfficiencyResult:
    """
    Compare the estimate for a duration code with the time actually logged.

    ratio = estimated hours / actual hours, so values above 1 mean the work
    went faster than planned.
    """
    estimated_hours = DURATION_HOURS.get(estimated_duration, DEFAULT_DURATION_HOURS)
    actual_hours = actual_minutes / 60

    if actual_hours == 0:
        return EfficiencyResult(ratio=0, status=EfficiencyStatus.UNDER, label="No time logged")

    ratio = estimated_hours / actual_hours

    if ratio >= 1.2:
        return EfficiencyResult(ratio=ratio, status=EfficiencyStatus.UNDER, label="Faster than expected")
    if ratio >= 0.8:
        return EfficiencyResult(ratio=ratio, status=EfficiencyStatus.ON_TRACK, label="Within estimate")
    return EfficiencyResult(ratio=ratio, status=EfficiencyStatus.OVER, label="Slower than expected")
