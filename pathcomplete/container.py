"""
Dependency injection container for managing application dependencies.
"""

import logging

from pathcomplete.adapters.listing.local_directory_lister import LocalDirectoryLister
from pathcomplete.ports.listing.directory_lister_port import DirectoryListerPort
from pathcomplete.use_cases.suggestions.list_suggestions import (
    ListSuggestionsUseCase,
)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_directory_lister(self) -> DirectoryListerPort:
        """
        Get directory lister adapter instance.

        Returns:
            DirectoryListerPort implementation
        """
        if "directory_lister" not in self._instances:
            self._instances["directory_lister"] = LocalDirectoryLister(self._logger)
        return self._instances["directory_lister"]

    def get_list_suggestions_use_case(self) -> ListSuggestionsUseCase:
        """
        Get list suggestions use case with injected dependencies.

        Returns:
            Configured ListSuggestionsUseCase
        """
        if "list_suggestions_use_case" not in self._instances:
            lister = self.get_directory_lister()
            self._instances["list_suggestions_use_case"] = ListSuggestionsUseCase(
                lister, self._logger
            )
        return self._instances["list_suggestions_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
