"""The SoftLayer API client.

A client stores the authentication information for API calls and is the
central repository for the service handles that call into the network API.

Example:
    ```python
    from softlayer_client_core import Client

    # Settings not given here come from the environment or ~/.softlayer
    client = Client(username="jdoe", api_key="0123abcd")
    account = client["Account"]

    # Exchange a password for a portal login token instead of using an API key
    client = Client.with_password("jdoe", "s3cret")
    assert client.is_token_based()
    ```
"""

import logging
import platform
import sys
from typing import Any

import httpx

from softlayer_client_core import __version__
from softlayer_client_core.auth import Credentials, authentication_headers, is_key_based, is_token_based
from softlayer_client_core.config import ConfigResolver
from softlayer_client_core.constants import API_PUBLIC_ENDPOINT, USER_CUSTOMER_SERVICE
from softlayer_client_core.errors import ConfigurationError, ValidationError
from softlayer_client_core.registry import ServiceFactory, ServiceRegistry
from softlayer_client_core.service import Service

logger = logging.getLogger(__name__)


def default_user_agent() -> str:
    """Return the User-Agent sent when none is configured."""
    return (
        f"softlayer_client_core/{__version__} "
        f"(Python {platform.python_implementation()} {platform.python_version()}; {sys.platform})"
    )


class Client:
    """Holds credentials and endpoint settings, and hands out service handles.

    Settings not passed explicitly are looked up by a ``ConfigResolver``
    in the environment and in SoftLayer config files. Credentials are not
    checked here: a client without any is legal and sends anonymous requests.

    Attributes:
        username: Username for API key authentication.
        api_key: API key for API key authentication.
        user_id: User id for token authentication.
        auth_token: Portal login token for token authentication.
        endpoint_url: Base URL requests are sent to. Never empty.
        user_agent: Value of the User-Agent header sent with requests.
        network_timeout: Seconds to wait for HTTP requests, or None for the
            HTTP library's default.
        transport: Optional httpx transport used by this client's services.

    Raises:
        ConfigurationError: If the resolved endpoint URL is empty.
    """

    def __init__(
        self,
        *,
        username: str | None = None,
        api_key: str | None = None,
        user_id: Any = None,
        auth_token: str | None = None,
        endpoint_url: str | None = None,
        user_agent: str | None = None,
        timeout: int | None = None,
        resolver: ConfigResolver | None = None,
        service_factory: ServiceFactory | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._resolver = resolver if resolver is not None else ConfigResolver()
        self._services = ServiceRegistry(service_factory if service_factory is not None else Service)
        self.transport = transport

        settings = self._resolver.client_settings(
            {
                "username": username,
                "api_key": api_key,
                "user_id": user_id,
                "auth_token": auth_token,
                "endpoint_url": endpoint_url,
                "user_agent": user_agent,
                "timeout": timeout,
            }
        )

        self.username: str | None = settings.get("username")
        self.api_key: str | None = settings.get("api_key")
        self.user_id: Any = settings.get("user_id")
        self.auth_token: str | None = settings.get("auth_token")

        # An empty endpoint is kept (and rejected below), only a missing one is defaulted
        self.endpoint_url: str = settings.get("endpoint_url")
        if self.endpoint_url is None:
            self.endpoint_url = API_PUBLIC_ENDPOINT

        self.user_agent: str = settings.get("user_agent")
        if self.user_agent is None:
            self.user_agent = default_user_agent()

        self.network_timeout: int | None = None
        if "timeout" in settings:
            self.network_timeout = settings["timeout"]

        if not self.endpoint_url:
            raise ConfigurationError("A SoftLayer Client requires an endpoint URL")

        logger.debug(f"Created client for {self.endpoint_url} ({self._auth_kind()} authentication)")

    @classmethod
    def with_password(cls, username: str | None, password: str | None, **options: Any) -> "Client":
        """Create a client that authenticates with a portal login token.

        The username and password are exchanged for a token through
        ``SoftLayer_User_Customer::getPortalLoginToken``. Any other keyword
        arguments are passed to the constructor, both for the client making
        the login call and for the returned client.

        Args:
            username: Portal username. Required.
            password: Portal password. Required.
            **options: Constructor arguments such as ``endpoint_url``.

        Returns:
            A token-based client.

        Raises:
            ValidationError: If the username or the password is missing.
            APIError: If the login call is rejected.
        """
        if not username:
            raise ValidationError("A username is required to create this client", field="username")

        if not password:
            raise ValidationError("A password is required to create this client", field="password")

        options["username"] = username

        login_client = cls(**options)
        service = login_client.service_named(USER_CUSTOMER_SERVICE)
        token = service.getPortalLoginToken(username, password)
        logger.debug(f"Obtained portal login token for user {username}")

        options["user_id"] = token["userId"]
        options["auth_token"] = token["hash"]

        return cls(**options)

    @property
    def credentials(self) -> Credentials:
        return Credentials(
            username=self.username,
            api_key=self.api_key,
            user_id=self.user_id,
            auth_token=self.auth_token,
        )

    def is_token_based(self) -> bool:
        """Return whether this client uses token-based authentication."""
        return is_token_based(self.credentials)

    def is_key_based(self) -> bool:
        """Return whether this client uses API key authentication."""
        return is_key_based(self.credentials)

    def authentication_headers(self) -> dict[str, Any]:
        """Return the authentication header payload for API calls.

        Token authentication takes precedence over API key authentication.
        An anonymous client returns an empty dict.
        """
        return authentication_headers(self.credentials)

    def _auth_kind(self) -> str:
        if self.is_token_based():
            return "token"
        if self.is_key_based():
            return "key"
        return "anonymous"

    def service_named(self, service_name: str, **service_options: Any) -> Any:
        """Return the service with the given name.

        A service created earlier by this client is returned as is, and the
        ``service_options`` of this call are ignored. Otherwise a new service
        is built with this client injected as ``client`` and the options
        layered on top.

        If the name does not start with ``SoftLayer_`` that prefix is added.

        Raises:
            InvalidArgument: If the service name is empty.
        """
        return self._services.get_or_create(service_name, {"client": self, **service_options})

    def __getitem__(self, service_name: str) -> Any:
        return self.service_named(service_name)

    def __repr__(self) -> str:
        return f"Client(endpoint_url={self.endpoint_url!r}, username={self.username!r}, auth={self._auth_kind()!r})"
