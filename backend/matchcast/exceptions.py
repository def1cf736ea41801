"""Application errors.

Each error carries the HTTP status it is reported with by the API layer.
"""


class MatchcastError(Exception):
    """Base class for application errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(MatchcastError):
    """A required credential or setting is missing."""


class UpstreamFetchError(MatchcastError):
    """The match source returned a non-success response or was unreachable."""

    def __init__(self, message: str, upstream_status: int | None = None, body: str = ""):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.body = body


class LLMError(MatchcastError):
    """The language-model service failed to produce a completion."""

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class RateLimitedError(LLMError):
    """The language-model service answered 429."""

    status_code = 429


class QuotaExhaustedError(LLMError):
    """The language-model service answered 402 (credits exhausted)."""

    status_code = 402


class PredictionNotFoundError(MatchcastError):
    """No prediction exists with the requested id."""

    status_code = 404


class PersistenceError(MatchcastError):
    """Writing generated predictions to the store failed."""
