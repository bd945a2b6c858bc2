from __future__ import annotations


class RepoReaderError(Exception):
    """Base error for the repository reader service."""


class ValidationError(RepoReaderError):
    """Raised when user input is invalid."""


class AccessDeniedError(RepoReaderError):
    """Raised when an operation tries to access data outside allowed scope."""


class ExternalServiceError(RepoReaderError):
    """Raised when an external service (telemetry collector, tokenizer) fails."""


class NotFoundError(RepoReaderError):
    """Raised when a requested resource is not found."""


class ConfigurationError(RepoReaderError):
    """Raised when required settings are missing or empty."""


class NoFilesFoundError(NotFoundError):
    """Raised when the selected folder has no file matching the configured types."""
