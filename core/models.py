"""
Data models for heuristic complexity analysis.

Pydantic models for the extracted signals, the verdict and the final result.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


DataStructureTag = Literal["array", "hash", "tree"]

TimeLabel = Literal["O(1)", "O(n)", "O(n²)", "O(n³)", "O(2^n)"]
SpaceLabel = Literal["O(1)", "O(n)"]


class Signals(BaseModel):
    """
    Features pulled out of the source text by a single scan.

    ``data_structures`` behaves as a set: tags are unique and kept in the
    order they were first seen.
    """

    model_config = ConfigDict(frozen=True)

    max_nested_loops: int = Field(default=0, ge=0)
    has_recursion: bool = False
    data_structures: tuple[DataStructureTag, ...] = ()


class ComplexityVerdict(BaseModel):
    """Time and space labels with one explanation per axis."""

    model_config = ConfigDict(frozen=True)

    time_complexity: TimeLabel
    space_complexity: SpaceLabel
    time_explanation: str
    space_explanation: str


class ComplexityResult(BaseModel):
    """
    Complexity analysis result.

    Shape returned to every consumer of the analyzer.
    """

    timeComplexity: TimeLabel = Field(description="Time complexity in Big-O notation")
    spaceComplexity: SpaceLabel = Field(description="Space complexity in Big-O notation")
    timeExplanation: str = Field(description="Why the time label was chosen")
    spaceExplanation: str = Field(description="Why the space label was chosen")
    detailedReport: str = Field(description="Multi-line description of detected signals")
