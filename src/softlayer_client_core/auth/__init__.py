"""Authentication components for SoftLayer clients.

This module decides how a client authenticates:
- Portal login token (``user_id`` + ``auth_token``), preferred when present
- API key (``username`` + ``api_key``)
- Anonymous, when neither pair is complete

Example:
    ```python
    from softlayer_client_core.auth import Credentials, is_token_based

    credentials = Credentials(user_id=1234, auth_token="abc")
    assert is_token_based(credentials)
    ```
"""

from softlayer_client_core.auth.strategy import (
    Credentials,
    authentication_headers,
    is_key_based,
    is_token_based,
)

__all__ = [
    "Credentials",
    "authentication_headers",
    "is_key_based",
    "is_token_based",
]
