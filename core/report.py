"""
Report formatting.

Human-readable text built from signals and results. Display only; nothing
here is parsed back.
"""

from .models import ComplexityResult, Signals


REPORT_HEADER = "Analysis Details:"
REVIEW_NOTE = "Note: This is an automated analysis. For complex algorithms, manual review is recommended."


def build_report(signals: Signals) -> str:
    """
    Build the detailed analysis text.

    Args:
        signals: Signals used for the verdict

    Returns:
        Header, one bullet per detected signal, then the review note
    """
    report = f"{REPORT_HEADER}\n\n"

    nested = signals.max_nested_loops
    if nested > 0:
        report += f"• Found {nested} level{'s' if nested > 1 else ''} of nested loops\n"

    if signals.has_recursion:
        report += "• Recursive function calls detected\n"

    if signals.data_structures:
        report += f"• Data structures used: {', '.join(signals.data_structures)}\n"

    report += f"\n{REVIEW_NOTE}"
    return report


def format_export(result: ComplexityResult) -> str:
    """Plain-text summary for copying a result elsewhere."""
    return (
        f"Time Complexity: {result.timeComplexity}\n"
        f"Space Complexity: {result.spaceComplexity}\n\n"
        f"{result.detailedReport}"
    )
