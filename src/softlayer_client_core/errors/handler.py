"""Error handling utilities for API responses."""

import xmlrpc.client

import httpx

from softlayer_client_core.errors.exceptions import (
    APIError,
    ClientError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code

    exception_map = {
        401: UnauthorizedError,
        403: ForbiddenError,
        404: NotFoundError,
        429: RateLimitError,
    }

    if status_code in exception_map:
        exc_class = exception_map[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    response_text = response.text[:200]
    message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    if exc_class == RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise exc_class(
            message=message,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
        )

    raise exc_class(message=message, status_code=status_code, response=response)


def error_from_fault(fault: xmlrpc.client.Fault, response: httpx.Response | None = None) -> APIError:
    """Build an APIError from an XML-RPC fault.

    SoftLayer reports API exceptions as faults whose code is the exception
    class name (e.g. ``SoftLayer_Exception_ObjectNotFound``).
    """
    status_code = response.status_code if response is not None else None
    return APIError(
        f"{fault.faultCode}: {fault.faultString}",
        status_code=status_code,
        response=response,
        fault_code=fault.faultCode,
    )
