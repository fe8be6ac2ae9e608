"""Exception taxonomy for the SoftLayer client core.

Errors raised by the client itself (bad configuration, bad arguments) and
errors reported by the API (HTTP status failures, XML-RPC faults) share the
``SoftLayerError`` base, making it easy to catch anything the library raises.

Example:
    ```python
    from softlayer_client_core.errors import ConfigurationError

    try:
        client = Client(endpoint_url="")
    except ConfigurationError as e:
        print(f"Bad configuration: {e}")
    ```
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class SoftLayerError(Exception):
    """Base exception for all errors raised by this library."""

    pass


class ConfigurationError(SoftLayerError):
    """Raised when the resolved client settings are unusable.

    For example a missing or empty endpoint URL, or a timeout that
    is not an integer.
    """

    pass


class ValidationError(SoftLayerError):
    """Raised when required input for a helper is missing.

    Attributes:
        field: Name of the offending input (if known).
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class InvalidArgument(SoftLayerError, ValueError):
    """Raised when an argument has an unusable value, such as an empty service name."""

    pass


class APIError(SoftLayerError):
    """Base exception for errors reported by the API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        fault_code: str | int | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.fault_code = fault_code


class ClientError(APIError):
    """4xx client errors."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
