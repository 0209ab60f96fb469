"""
Complexity mapping.

Fixed decision tables from signals to Big-O labels. Rows are evaluated top
to bottom and the first match wins.
"""

from .models import ComplexityVerdict, Signals


def time_complexity(signals: Signals) -> tuple[str, str]:
    """Return (label, explanation) for the time axis."""
    nested = signals.max_nested_loops

    # Recursion wins over any amount of loop nesting.
    if signals.has_recursion:
        return "O(2^n)", "Exponential time - recursive calls detected (may vary based on implementation)."
    if nested >= 3:
        return "O(n³)", f"Cubic time - {nested} nested loops detected."
    if nested == 2:
        return "O(n²)", "Quadratic time - 2 nested loops detected."
    if nested == 1:
        return "O(n)", "Linear time - single loop detected."
    return "O(1)", "Constant time - no loops or recursion detected."


def space_complexity(signals: Signals) -> tuple[str, str]:
    """Return (label, explanation) for the space axis."""
    structures = signals.data_structures

    if "tree" in structures:
        return "O(n)", "Linear space - tree/graph data structure detected."
    if "hash" in structures:
        return "O(n)", "Linear space - hash map/dictionary detected."
    if "array" in structures:
        return "O(n)", "Linear space - array/list detected."
    return "O(1)", "Constant space - no significant data structures detected."


def determine_complexity(signals: Signals) -> ComplexityVerdict:
    time_label, time_explanation = time_complexity(signals)
    space_label, space_explanation = space_complexity(signals)
    return ComplexityVerdict(
        time_complexity=time_label,
        space_complexity=space_label,
        time_explanation=time_explanation,
        space_explanation=space_explanation,
    )
