"""
Core Code Complexity Analyzer.

Minimal analyzer that guesses complexity from textual heuristics.
"""

import logging

from .mapper import determine_complexity
from .models import ComplexityResult
from .report import build_report
from .signals import extract_signals

logger = logging.getLogger(__name__)


SUPPORTED_LANGUAGES = ("auto", "python", "javascript", "pseudocode")


def analyze(code: str, language: str = "auto") -> ComplexityResult:
    """
    Analyze code complexity.

    Args:
        code: Source code string to analyze (any language, may be empty)
        language: Language hint, kept for callers but not used by the heuristics

    Returns:
        ComplexityResult with time and space complexity and a detailed report
    """
    signals = extract_signals(code, language)
    verdict = determine_complexity(signals)

    return ComplexityResult(
        timeComplexity=verdict.time_complexity,
        spaceComplexity=verdict.space_complexity,
        timeExplanation=verdict.time_explanation,
        spaceExplanation=verdict.space_explanation,
        detailedReport=build_report(signals),
    )


class HeuristicComplexityAnalyzer:
    """
    Code complexity analyzer using keyword heuristics.

    Takes code as input, returns complexity analysis. Holds no state
    between calls.
    """

    def __init__(self, default_language: str = "auto"):
        self.default_language = self.normalize_language(default_language)

    @staticmethod
    def normalize_language(language: str | None) -> str:
        """Map a language hint onto the supported vocabulary, else ``auto``."""
        language = (language or "").strip().lower()
        return language if language in SUPPORTED_LANGUAGES else "auto"

    def analyze(self, code: str, language: str | None = None) -> ComplexityResult:
        language = self.normalize_language(language) if language else self.default_language
        result = analyze(code, language)
        logger.debug(
            "Analyzed %d chars (language=%s): time=%s space=%s",
            len(code),
            language,
            result.timeComplexity,
            result.spaceComplexity,
        )
        return result
