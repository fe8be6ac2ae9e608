"""Error taxonomy and response error handling for SoftLayer clients."""

from softlayer_client_core.errors.exceptions import (
    APIError,
    ClientError,
    ConfigurationError,
    ForbiddenError,
    InvalidArgument,
    NotFoundError,
    RateLimitError,
    ServerError,
    SoftLayerError,
    UnauthorizedError,
    ValidationError,
)
from softlayer_client_core.errors.handler import error_from_fault, raise_for_status

__all__ = [
    "APIError",
    "ClientError",
    "ConfigurationError",
    "ForbiddenError",
    "InvalidArgument",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "SoftLayerError",
    "UnauthorizedError",
    "ValidationError",
    "error_from_fault",
    "raise_for_status",
]
