"""
Pydantic models for API requests and responses.
"""

from typing import List

from pydantic import BaseModel, Field


class SuggestionsResponse(BaseModel):
    """Schema for directory suggestions."""

    input: str = Field(..., description="Raw input the suggestions complete")
    suggestions: List[str] = Field(
        default_factory=list, description="Sorted directory completions"
    )
    boundary: str = Field(
        "", description="Re-scan boundary of the input (empty if unknown)"
    )


class BoundaryResponse(BaseModel):
    """Schema for the re-scan boundary of an input."""

    input: str = Field(..., description="Raw input")
    boundary: str = Field(..., description="Directory portion of the input")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
