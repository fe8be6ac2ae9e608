"""SoftLayer Client Core - client, credentials and service registry for the SoftLayer API.

This library provides the pieces every SoftLayer API consumer needs:
- Layered settings resolution (options → environment / .env → config files)
- Token or API key authentication, chosen from whatever credentials are present
- A per-client registry that builds each service handle once
- An optional process-wide default client

Example:
    ```python
    from softlayer_client_core import Client, set_default_client

    client = Client(username="jdoe", api_key="0123abcd")
    set_default_client(client)

    account = client["Account"]
    details = account.getObject()
    ```
"""

__version__ = "0.1.0"

from softlayer_client_core.client import Client  # noqa: E402
from softlayer_client_core.default_client import (  # noqa: E402
    get_default_client,
    resolve_client,
    set_default_client,
)
from softlayer_client_core.service import Service  # noqa: E402

__all__ = [
    "Client",
    "Service",
    "__version__",
    "get_default_client",
    "resolve_client",
    "set_default_client",
]
