"""Process-wide default client.

Code that accepts an optional ``client`` argument falls back to the default
client when none is given. Setting and clearing it is the caller's job; the
library never creates, replaces or tears one down on its own.

Example:
    ```python
    from softlayer_client_core import Client, set_default_client

    set_default_client(Client(username="jdoe", api_key="0123abcd"))
    account = Service("SoftLayer_Account")  # bound to the default client
    ```
"""

from threading import Lock
from typing import TYPE_CHECKING

from softlayer_client_core.errors import ConfigurationError

if TYPE_CHECKING:
    from softlayer_client_core.client import Client

_default_client: "Client | None" = None
_default_client_lock = Lock()


def get_default_client() -> "Client | None":
    """Return the default client, or None if none has been set."""
    with _default_client_lock:
        return _default_client


def set_default_client(client: "Client | None") -> None:
    """Make ``client`` the default client. Pass None to clear it."""
    global _default_client
    with _default_client_lock:
        _default_client = client


def resolve_client(client: "Client | None" = None) -> "Client":
    """Return ``client`` if given, else the default client.

    Raises:
        ConfigurationError: If no client is given and no default is set.
    """
    if client is not None:
        return client

    default = get_default_client()
    if default is None:
        raise ConfigurationError("No client provided and no default client has been set")
    return default
