"""Memoizing registry of service handles keyed by canonical service name."""

import logging
from collections.abc import Callable, Mapping
from threading import Lock
from typing import Any

from softlayer_client_core.constants import SERVICE_NAME_PREFIX
from softlayer_client_core.errors import InvalidArgument

logger = logging.getLogger(__name__)

# Called as factory(canonical_name, **options) to build a new service handle
ServiceFactory = Callable[..., Any]


def canonical_service_name(service_name: str) -> str:
    """Normalize a service name into its canonical form.

    Surrounding whitespace is stripped and the ``SoftLayer_`` prefix is
    added when missing, so ``" Account "`` and ``"SoftLayer_Account"`` both
    become ``"SoftLayer_Account"``.

    Raises:
        InvalidArgument: If the name is empty, blank or None.
    """
    if service_name is None or not str(service_name).strip():
        raise InvalidArgument("Please provide a service name")

    full_name = str(service_name).strip()
    if not full_name.startswith(SERVICE_NAME_PREFIX):
        full_name = f"{SERVICE_NAME_PREFIX}{full_name}"
    return full_name


class ServiceRegistry:
    """Build each service handle at most once and hand it out thereafter.

    Construction options only matter the first time a name is requested.
    Later requests for the same canonical name return the cached handle and
    ignore whatever options they carry.

    Example:
        ```python
        registry = ServiceRegistry(Service)
        account = registry.get_or_create("Account", {"client": client})
        assert registry.get_or_create("SoftLayer_Account", {}) is account
        ```
    """

    def __init__(self, factory: ServiceFactory):
        self._factory = factory
        self._services: dict[str, Any] = {}
        self._key_locks: dict[str, Lock] = {}
        self._lock = Lock()

    def get_or_create(self, service_name: str, options: Mapping[str, Any] | None = None) -> Any:
        """Return the cached handle for a service, building it on first use.

        Args:
            service_name: Service name, with or without the ``SoftLayer_`` prefix.
            options: Keyword arguments for the factory on first construction.

        Returns:
            The service handle for the canonical name.

        Raises:
            InvalidArgument: If the service name is empty.
        """
        key = canonical_service_name(service_name)

        if key in self._services:
            return self._services[key]

        # Factories run under a per-name lock only and may request other names
        with self._lock:
            key_lock = self._key_locks.setdefault(key, Lock())

        with key_lock:
            # Double-check: another thread may have built it meanwhile
            if key not in self._services:
                logger.debug(f"Creating service handle for {key}")
                self._services[key] = self._factory(key, **dict(options or {}))

        return self._services[key]

    def __contains__(self, service_name: object) -> bool:
        try:
            return canonical_service_name(service_name) in self._services  # type: ignore[arg-type]
        except InvalidArgument:
            return False

    def __len__(self) -> int:
        return len(self._services)
