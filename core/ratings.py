"""Severity ratings for complexity labels, used to colour results."""

from typing import Literal

Rating = Literal["Good", "Fair", "Poor"]

POOR_TIME_LABELS = ("O(2^n)", "O(n!)")
FAIR_TIME_LABELS = ("O(n³)", "O(n²)")


def rate_time(label: str) -> Rating:
    if any(poor in label for poor in POOR_TIME_LABELS):
        return "Poor"
    if any(fair in label for fair in FAIR_TIME_LABELS):
        return "Fair"
    return "Good"


def rate_space() -> Rating:
    """Every space label is rated Good."""
    return "Good"
