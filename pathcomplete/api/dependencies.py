"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from pathcomplete.config.settings import Settings, settings
from pathcomplete.container import container
from pathcomplete.use_cases.suggestions.list_suggestions import (
    ListSuggestionsUseCase,
)


def get_list_suggestions_uc() -> ListSuggestionsUseCase:
    """
    Get the list suggestions use case from the container.

    Returns:
        ListSuggestionsUseCase: The list suggestions use case instance
    """
    return container.get_list_suggestions_use_case()


def get_settings() -> Settings:
    """Get the application settings."""
    return settings
