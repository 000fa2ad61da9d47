"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class DirectoryListingError(BaseAppError):
    """Exception raised when a directory cannot be listed."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
