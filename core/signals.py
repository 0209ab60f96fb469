"""
Signal extraction.

A single forward pass over the source lines. Matching is plain substring
search on a trimmed, lowercased copy of each line, so keywords also match
inside longer words (``format`` opens a loop, ``append`` closes one).
"""

import logging
import re

from .models import DataStructureTag, Signals

logger = logging.getLogger(__name__)


LOOP_KEYWORDS = ("for", "while")
BLOCK_END_TOKENS = ("}", "end")
FUNCTION_KEYWORDS = ("function", "def", "func")

DATA_STRUCTURE_KEYWORDS: dict[DataStructureTag, tuple[str, ...]] = {
    "array": ("array", "list", "[]"),
    "hash": ("hash", "map", "dict", "object"),
    "tree": ("tree", "node", "graph"),
}

_DO_BLOCK = re.compile(r"do\s*\{")
_PAREN_GROUP = re.compile(r"\(.*\)")
_FUNCTION_NAME = re.compile(r"(function|def|func)\s+([A-Za-z0-9_]+)")


def normalize_line(line: str) -> str:
    return line.strip().lower()


def opens_loop(line: str) -> bool:
    """True if a normalized line contains a loop-opening construct."""
    return any(keyword in line for keyword in LOOP_KEYWORDS) or bool(_DO_BLOCK.search(line))


def closes_block(line: str) -> bool:
    """True if a normalized line contains ``}`` or ``end``."""
    return any(token in line for token in BLOCK_END_TOKENS)


def defines_function(line: str) -> bool:
    """True if a normalized line looks like a function definition."""
    return any(keyword in line for keyword in FUNCTION_KEYWORDS) and bool(_PAREN_GROUP.search(line))


def function_name(line: str) -> str | None:
    """Identifier following the first ``function``/``def``/``func`` keyword."""
    match = _FUNCTION_NAME.search(line)
    return match.group(2) if match else None


def data_structure_tags(line: str) -> list[DataStructureTag]:
    """Tags whose keywords occur in a normalized line. One line may yield several."""
    return [
        tag
        for tag, keywords in DATA_STRUCTURE_KEYWORDS.items()
        if any(keyword in line for keyword in keywords)
    ]


def extract_signals(code: str, language: str = "auto") -> Signals:
    """
    Scan source text and collect loop nesting, recursion and data structures.

    Args:
        code: Source text, any language or pseudocode
        language: Advisory hint, not used by the scan

    Returns:
        Signals for the whole text. Empty input gives the zero value.
    """
    max_nested = 0
    nesting = 0
    has_recursion = False
    tags: dict[DataStructureTag, None] = {}

    for raw_line in code.split("\n"):
        line = normalize_line(raw_line)

        # A line that opens a loop never also closes one.
        if opens_loop(line):
            nesting += 1
            max_nested = max(max_nested, nesting)
        elif closes_block(line):
            nesting = max(0, nesting - 1)

        if defines_function(line):
            name = function_name(line)
            # Looked up in the original-case text.
            if name and f"{name}(" in code:
                has_recursion = True

        for tag in data_structure_tags(line):
            tags.setdefault(tag, None)

    logger.debug(
        "Extracted signals (language=%s): loops=%d recursion=%s structures=%s",
        language,
        max_nested,
        has_recursion,
        list(tags),
    )

    return Signals(
        max_nested_loops=max_nested,
        has_recursion=has_recursion,
        data_structures=tuple(tags),
    )
