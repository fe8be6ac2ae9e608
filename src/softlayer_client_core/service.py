"""Service handles that call SoftLayer API methods over XML-RPC.

A ``Service`` is bound to one API service (e.g. ``SoftLayer_Account``) and one
client. Calling a method sends an XML-RPC request to
``<endpoint_url>/<service_name>`` whose first parameter carries the client's
authentication headers.

Example:
    ```python
    client = Client(username="jdoe", api_key="0123abcd")
    account = client["Account"]

    details = account.getObject()
    # same as account.call("getObject")
    ```
"""

import logging
import xmlrpc.client
from functools import partial
from typing import TYPE_CHECKING, Any

import httpx

from softlayer_client_core.default_client import resolve_client
from softlayer_client_core.errors import error_from_fault, raise_for_status

if TYPE_CHECKING:
    from softlayer_client_core.client import Client

logger = logging.getLogger(__name__)


class Service:
    """Handle for calling the methods of one SoftLayer API service.

    Args:
        service_name: Canonical service name, e.g. ``SoftLayer_User_Customer``.
        client: Client supplying endpoint, credentials and timeout. Falls back
            to the default client when omitted.
        **options: Construction options given to ``Client.service_named``,
            kept unchanged as ``options`` for callers and subclasses.
    """

    def __init__(self, service_name: str, *, client: "Client | None" = None, **options: Any) -> None:
        self.service_name = service_name
        self.client = resolve_client(client)
        self.options = options

    def __repr__(self) -> str:
        return f"Service({self.service_name!r}, endpoint_url={self.client.endpoint_url!r})"

    @property
    def url(self) -> str:
        return f"{self.client.endpoint_url.rstrip('/')}/{self.service_name}"

    def _http_client(self) -> httpx.Client:
        kwargs: dict[str, Any] = {
            "headers": {"User-Agent": self.client.user_agent, "Content-Type": "text/xml"},
        }
        if self.client.network_timeout is not None:
            kwargs["timeout"] = self.client.network_timeout
        if self.client.transport is not None:
            kwargs["transport"] = self.client.transport
        return httpx.Client(**kwargs)

    def call(self, method_name: str, *args: Any) -> Any:
        """Call an API method on this service.

        Args:
            method_name: Remote method, e.g. ``getObject``.
            *args: Positional method parameters.

        Returns:
            The decoded XML-RPC result.

        Raises:
            APIError: For XML-RPC faults (with ``fault_code`` set) and, via
                its subclasses, for HTTP error statuses.
            httpx.HTTPError: For network failures. Nothing is retried.
        """
        params = ({"headers": self.client.authentication_headers()},) + args
        payload = xmlrpc.client.dumps(params, methodname=method_name, allow_none=True)

        logger.debug(f"Calling {self.service_name}::{method_name} at {self.url}")
        with self._http_client() as http:
            response = http.post(self.url, content=payload.encode("utf-8"))

        raise_for_status(response)

        try:
            (result,), _ = xmlrpc.client.loads(response.content, use_builtin_types=True)
        except xmlrpc.client.Fault as fault:
            logger.debug(f"{self.service_name}::{method_name} failed with fault {fault.faultCode}")
            raise error_from_fault(fault, response) from fault

        return result

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return partial(self.call, name)
