"""
Base exception hierarchy for tree traversal operations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""


class VisitParentsError(Exception):
    """Base exception for tree traversal operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidArgumentError(VisitParentsError, TypeError):
    """Raised when traversal arguments cannot be resolved (e.g. no visitor)."""

    def __init__(self, message: str, argument: str = None, details: dict = None):
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            argument: Optional name of the offending argument
            details: Optional additional details
        """
        super().__init__(message, code="INVALID_ARGUMENT", details=details)
        self.argument = argument


class SelectorParseError(VisitParentsError, ValueError):
    """Raised when a test selector string cannot be parsed."""

    def __init__(self, message: str, selector: str = None, details: dict = None):
        super().__init__(message, code="SELECTOR_PARSE_ERROR", details=details)
        self.selector = selector


class ConfigError(VisitParentsError, ValueError):
    """Raised when a walk configuration file is missing or invalid."""

    def __init__(self, message: str, config_path: str = None, details: dict = None):
        super().__init__(message, code="CONFIG_ERROR", details=details)
        self.config_path = config_path
