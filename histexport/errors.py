"""Typed exceptions for the history export (no logic)."""


class ConfigurationError(Exception):
    """Fatal startup error: output directory missing/unwritable or bad settings."""


class ExportError(Exception):
    """Base for per-user failures; the run continues with the next user."""

    stage = "fetch"


class RemoteClientError(ExportError):
    """Remote API answered with a 4xx (bad token, unknown user, rate limit...)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteUnavailableError(ExportError):
    """Remote API answered with a 5xx or could not be reached at all."""


class MalformedResponseError(ExportError):
    """Response body is not the expected JSON document."""


class WriteError(ExportError):
    """History was fetched but the export file could not be saved."""

    stage = "write"

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class InvalidUserError(ExportError, ValueError):
    """User identifier cannot be used as a URL segment or a file name part."""
