"""Authentication strategy selection for SoftLayer API requests.

A client authenticates either with a portal login token (``user_id`` and
``auth_token``, usually obtained by exchanging a password) or with a static API
key (``username`` and ``api_key``). When both pairs are present the token wins.
With neither, requests are sent anonymously and the API decides whether the
called method allows that.

Example:
    ```python
    from softlayer_client_core.auth import Credentials, authentication_headers

    headers = authentication_headers(Credentials(username="jdoe", api_key="0123abcd"))
    # {"authenticate": {"username": "jdoe", "apiKey": "0123abcd"}}
    ```
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Credentials:
    """Credential pairs a client may authenticate with."""

    username: str | None = None
    api_key: str | None = None
    user_id: Any = None
    auth_token: str | None = None

    def __repr__(self) -> str:
        api_key = "***" if self.api_key else self.api_key
        auth_token = "***" if self.auth_token else self.auth_token
        return (
            f"Credentials(username={self.username!r}, api_key={api_key!r}, "
            f"user_id={self.user_id!r}, auth_token={auth_token!r})"
        )


def is_token_based(credentials: Credentials) -> bool:
    """Return True if the credentials hold a user id and a non-empty auth token."""
    return credentials.user_id is not None and bool(credentials.auth_token)


def is_key_based(credentials: Credentials) -> bool:
    """Return True if the credentials hold a non-empty username and API key."""
    return bool(credentials.username) and bool(credentials.api_key)


def authentication_headers(credentials: Credentials) -> dict[str, Any]:
    """Build the ``authenticate`` header payload sent with every API call.

    Args:
        credentials: The credentials to authenticate with.

    Returns:
        The token payload if token-based, else the key payload if key-based,
        else an empty dict.
    """
    if is_token_based(credentials):
        return {
            "authenticate": {
                "complexType": "PortalLoginToken",
                "userId": credentials.user_id,
                "authToken": credentials.auth_token,
            }
        }
    if is_key_based(credentials):
        return {
            "authenticate": {
                "username": credentials.username,
                "apiKey": credentials.api_key,
            }
        }
    return {}
