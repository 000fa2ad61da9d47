"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from pathcomplete.api.dependencies import get_list_suggestions_uc, get_settings
from pathcomplete.api.schemas import (
    BoundaryResponse,
    ErrorResponse,
    SuggestionsResponse,
)
from pathcomplete.use_cases.suggestions.rescan_boundary import extract_dir

router = APIRouter()


@router.get(
    "/suggestions",
    response_model=SuggestionsResponse,
    responses={500: {"model": ErrorResponse}},
)
def list_suggestions(
    text: str = Query(
        ..., alias="input", description="Path typed so far, '~/' allowed"
    ),
    max_results: Optional[int] = Query(
        None, description="Maximum number of suggestions (default from settings)"
    ),
):
    """
    Suggest directories completing a partially typed path.

    Unreadable or missing directories yield an empty list, not an error.

    Args:
        text: Raw input typed so far
        max_results: Upper bound on the number of suggestions

    Returns:
        SuggestionsResponse: Sorted suggestions and the input's re-scan boundary

    Raises:
        HTTPException: If building suggestions fails unexpectedly
    """
    try:
        cfg = get_settings()
        limit = cfg.max_results if max_results is None else max_results
        suggestions = get_list_suggestions_uc().execute(
            text, cfg.home_directory, limit
        )
        return SuggestionsResponse(
            input=text,
            suggestions=suggestions,
            boundary=extract_dir(text, cfg.home_directory),
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/suggestions/boundary", response_model=BoundaryResponse)
def suggestions_boundary(
    text: str = Query(
        ..., alias="input", description="Path typed so far, '~/' allowed"
    ),
):
    """Return the directory a caller should re-scan for this input."""
    cfg = get_settings()
    return BoundaryResponse(
        input=text, boundary=extract_dir(text, cfg.home_directory)
    )
