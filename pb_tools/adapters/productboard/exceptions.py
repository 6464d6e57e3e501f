"""Productboard adapter exceptions.

Custom exception hierarchy for Productboard API errors.
"""


class ProductboardAdapterError(Exception):
    """Base exception for Productboard adapter."""

    pass


class ProductboardConfigError(ProductboardAdapterError):
    """Missing token or base URL outside productboard.com."""

    pass


class MissingPathParameterError(ProductboardAdapterError):
    """A path placeholder has no matching argument."""

    def __init__(self, name: str, template: str):
        super().__init__(f"Missing or empty path parameter '{name}' for {template}")
        self.name = name
        self.template = template


class ProductboardAPIError(ProductboardAdapterError):
    """Non-2xx response from the Productboard API."""

    def __init__(self, status: int, message: str, retry_after: int | None = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.retry_after = retry_after

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class ProductboardValidationError(ProductboardAPIError):
    """Request rejected as malformed (400 response)."""

    pass


class ProductboardAuthError(ProductboardAPIError):
    """Invalid or expired token (401 response)."""

    pass


class ProductboardForbiddenError(ProductboardAPIError):
    """Token lacks access to the resource (403 response)."""

    pass


class ProductboardNotFoundError(ProductboardAPIError):
    """Resource not found (404 response)."""

    pass


class ProductboardRateLimitError(ProductboardAPIError):
    """Rate limit exceeded (429 response). `retry_after` is in seconds."""

    pass


STATUS_ERRORS: dict[int, type[ProductboardAPIError]] = {
    400: ProductboardValidationError,
    401: ProductboardAuthError,
    403: ProductboardForbiddenError,
    404: ProductboardNotFoundError,
    429: ProductboardRateLimitError,
}


def error_for_status(
    status: int, message: str, retry_after: int | None = None
) -> ProductboardAPIError:
    """Build the exception matching an HTTP status."""
    error_cls = STATUS_ERRORS.get(status, ProductboardAPIError)
    return error_cls(status, message, retry_after)
