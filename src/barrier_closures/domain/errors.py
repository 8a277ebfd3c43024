"""Typed failures raised while producing closure results.

Malformed schedule entries are not errors; they are dropped silently when
intervals are computed.
"""

from barrier_closures.domain.models.error_details import ErrorDetails

# Upper bound on how much of an upstream error body is carried along
MAX_ERROR_BODY_LENGTH = 300


class ClosureError(Exception):
    """Base class for failures that terminate a closures request."""

    http_status: int = 500

    def to_details(self) -> ErrorDetails:
        """Render the failure as the JSON error body."""
        return ErrorDetails(error=str(self))


class ConfigurationError(ClosureError):
    """A required setting (the API key) is missing."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(f"{setting} is not set")


class ProviderError(ClosureError):
    """The schedule provider answered with a non-success HTTP status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.http_status = status
        self.body = body[:MAX_ERROR_BODY_LENGTH]
        super().__init__(f"Schedule provider returned status {status}")

    def to_details(self) -> ErrorDetails:
        return ErrorDetails(
            error="Schedule provider error",
            status=self.status,
            body=self.body,
        )


class TransportError(ClosureError):
    """Talking to the schedule provider failed (network or malformed response)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Schedule request failed: {detail}")

    def to_details(self) -> ErrorDetails:
        return ErrorDetails(error="Schedule request failed", detail=self.detail)
