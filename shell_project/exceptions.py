"""
Custom exceptions for the application.
"""

from shell_project.entities.outcome import ErrorKind


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ShellError(BaseAppError):
    """Exception carrying the kind of shell error it represents."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class PathError(ShellError):
    """Exception raised when a path argument cannot be resolved."""

    pass


class ArgumentError(ShellError):
    """Exception raised for malformed command arguments."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
