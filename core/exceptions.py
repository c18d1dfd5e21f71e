"""
Exception Definitions - Custom exceptions for Sentibot
======================================================

This module defines the custom exceptions used throughout the application.
Request processing never raises; these cover construction and startup
problems such as invalid configuration or an incomplete response table.
"""


class ChatbotError(Exception):
    """
    Base exception for all Sentibot errors.

    All custom exceptions in this application inherit from this base class,
    allowing for easy catching of all application-specific errors.

    Attributes:
        message (str): Human-readable error description
        details (dict): Additional error details for debugging
    """

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            details: Optional dictionary with additional error context
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return formatted error message with details if present."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigError(ChatbotError):
    """
    Configuration-related errors.

    Raised when there are issues with:
    - Missing configuration files
    - Invalid configuration values
    - Environment variable conversion
    - YAML parsing errors
    """
    pass


class ResponseTableError(ConfigError):
    """
    Response table errors.

    Raised when a response table cannot serve the classifier:
    - A category has no candidate replies
    - A reply is not a string
    - A category used by an intent rule is missing
    """
    pass


class UIError(ChatbotError):
    """
    User interface errors.

    Raised when the console loop or the terminal UI cannot start.
    """
    pass
