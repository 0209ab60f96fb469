"""Core module for heuristic code complexity analysis."""

from .models import ComplexityResult, ComplexityVerdict, Signals
from .analyzer import HeuristicComplexityAnalyzer, analyze
from .mapper import determine_complexity
from .report import build_report, format_export
from .signals import extract_signals

__all__ = [
    "ComplexityResult",
    "ComplexityVerdict",
    "Signals",
    "HeuristicComplexityAnalyzer",
    "analyze",
    "determine_complexity",
    "build_report",
    "format_export",
    "extract_signals",
]
