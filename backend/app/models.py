"""
Pydantic models for the Complexity Analyzer API.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from core.analyzer import HeuristicComplexityAnalyzer

from app.config import settings


EMPTY_CODE_MESSAGE = "Please enter some code to analyze."


class AnalysisState(str, Enum):
    """Lifecycle of one analysis as seen by a client."""
    IDLE = "idle"
    ANALYZING = "analyzing"
    DONE = "done"
    ERROR = "error"


class AnalyzeRequest(BaseModel):
    """Request payload for code analysis."""
    code: str = Field(..., description="Source code to analyze")
    language: str = Field(default="auto", description="Language hint (auto, python, javascript, pseudocode)")

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(EMPTY_CODE_MESSAGE)
        if len(v) > settings.MAX_CODE_LENGTH:
            raise ValueError(f"Code exceeds {settings.MAX_CODE_LENGTH} characters")
        return v

    @field_validator("language", mode="before")
    @classmethod
    def validate_language(cls, v: object) -> str:
        # Unknown, oversized or non-string hints fall back to auto.
        if not isinstance(v, str):
            return "auto"
        return HeuristicComplexityAnalyzer.normalize_language(v)


class AnalysisResult(BaseModel):
    """Analysis result with ratings for display."""
    timeComplexity: str = Field(..., description="Big-O time complexity")
    spaceComplexity: str = Field(..., description="Big-O space complexity")
    timeExplanation: str = Field(..., description="Explanation of the time label")
    spaceExplanation: str = Field(..., description="Explanation of the space label")
    detailedReport: str = Field(..., description="Detailed analysis text")
    timeRating: Literal["Good", "Fair", "Poor"] = Field(default="Good", description="Severity of the time label")
    spaceRating: Literal["Good", "Fair", "Poor"] = Field(default="Good", description="Severity of the space label")
    language: str = Field(default="auto", description="Language hint used for the request")
    timestamp: Optional[str] = Field(default=None, description="Analysis timestamp")


class AnalyzeResponse(BaseModel):
    """API response wrapper."""
    success: bool = Field(default=True)
    state: AnalysisState = Field(default=AnalysisState.DONE)
    result: AnalysisResult


class ExampleResponse(BaseModel):
    """Example snippet for a language."""
    language: str
    code: str


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = Field(default=False)
    state: AnalysisState = Field(default=AnalysisState.ERROR)
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(default=None, description="Additional error details")
