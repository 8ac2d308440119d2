"""Integration API errors."""

from listing_likes.domain.models.error_details import ErrorDetails


def error_details_for_status(status_code: int | None) -> ErrorDetails:
    """Map an HTTP status code to a human readable error reason."""
    if status_code == 401:
        reason = "Unauthorized"
    elif status_code == 403:
        reason = "Forbidden"
    elif status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    else:
        reason = "Unknown error"

    return ErrorDetails(status_code=status_code, reason=reason)


class MarketplaceApiError(RuntimeError):
    """Raised when the Integration API answers with a non-success status."""

    def __init__(self, method: str, path: str, status_code: int, body: str = "") -> None:
        self.method = method
        self.path = path
        self.details = error_details_for_status(status_code)
        self.body = body
        super().__init__(
            f"{method} {path} failed: {self.details.reason} (status: {status_code}) {body[:200]}"
        )

    @property
    def status_code(self) -> int | None:
        """HTTP status code of the failed response."""
        return self.details.status_code
