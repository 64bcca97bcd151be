"""
Error taxonomy for the Viral Studio functions.

Every error carries the HTTP status the entry point should answer with.
Handlers catch these once and turn them into a JSON {"error": ...} body.
"""

from typing import Optional


class ViralStudioError(Exception):
    """Base class for errors surfaced to the caller."""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequestError(ViralStudioError):
    """Request body is not usable (not JSON, missing topic)."""
    status_code = 400


class ConfigurationError(ViralStudioError):
    """A required environment variable is missing."""
    status_code = 500


class UpstreamError(ViralStudioError):
    """AI gateway call did not succeed."""
    status_code = 500

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        self.upstream_status = upstream_status
        super().__init__(message)


class UpstreamRateLimited(UpstreamError):
    """AI gateway answered 429."""
    status_code = 429

    def __init__(self, message: str = 'Rate limit exceeded. Please try again in a moment.'):
        super().__init__(message, upstream_status=429)


class UpstreamQuotaExhausted(UpstreamError):
    """AI gateway answered 402."""
    status_code = 402

    def __init__(self, message: str = 'Credits exhausted. Please add more credits.'):
        super().__init__(message, upstream_status=402)


class NoImageError(ViralStudioError):
    """Successful gateway response without an image in it."""
    status_code = 500

    def __init__(self, message: str = 'No image generated'):
        super().__init__(message)


class HistoryError(ViralStudioError):
    """generation_history request failed."""

    def __init__(self, message: str, status_code: int = 500):
        self.status_code = status_code
        super().__init__(message)
