class AuthenticationError(Exception):
    """Raised when the Height API key is missing or rejected."""


class IntegrationError(Exception):
    """Raised when a Height API call fails."""


class RateLimitError(Exception):
    """Raised when the Height API rate limit is hit."""


class ApiError(IntegrationError):
    """Raised when Height answers with an error status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Height API error (HTTP {status_code}): {body[:500]}")


class ResponseValidationError(IntegrationError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, pathname: str, errors: list):
        self.pathname = pathname
        self.errors = errors
        super().__init__(f"Unexpected response shape from '{pathname}': {len(errors)} validation error(s)")
