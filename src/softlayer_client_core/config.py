"""Layered settings resolution for SoftLayer clients.

This module resolves client settings (credentials, endpoint, user agent,
timeout) from multiple sources with priority ordering.

Resolution order (highest to lowest priority):
1. Explicitly provided options
2. Environment variables (including values loaded from a .env file by python-dotenv)
3. INI config files (``/etc/softlayer.conf``, ``~/.softlayer``, ``./.softlayer``)

Example:
    ```python
    from softlayer_client_core.config import ConfigResolver

    resolver = ConfigResolver()

    # Environment and config files fill whatever is not given explicitly
    settings = resolver.client_settings({"username": "jdoe"})

    # Only read a specific config file, skip .env loading
    resolver = ConfigResolver(config_files=["~/work/softlayer.ini"], load_dotenv=False)
    ```

A config file looks like:

    [softlayer]
    username = jdoe
    api_key = 0123abcd
    endpoint_url = https://api.service.softlayer.com/xmlrpc/v3/
    timeout = 60

Security Considerations:
    - Credential values are never logged in full (masked with ***)
    - Only source information is logged (env var name, file path, etc.)
    - Thread-safe dotenv loading with lock
"""

import configparser
import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from threading import Lock
from typing import Any

from dotenv import load_dotenv

from softlayer_client_core.constants import (
    CONFIG_FILE_KEYS,
    CONFIG_FILE_LOCATIONS,
    CONFIG_FILE_SECTION,
    ENVIRONMENT_VARIABLE_KEYS,
)
from softlayer_client_core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Settings whose values must not appear in logs
SECRET_SETTINGS = frozenset(["api_key", "auth_token"])


class ConfigResolver:
    """Resolve client settings from config files, the environment and explicit options.

    Attributes:
        config_files: Config file paths read in order (later files win).
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.

    Example:
        ```python
        resolver = ConfigResolver(load_dotenv=False)
        settings = resolver.client_settings({"endpoint_url": API_PRIVATE_ENDPOINT})
        ```
    """

    def __init__(
        self,
        *,
        config_files: Iterable[str | Path] | None = None,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ):
        """Initialize settings resolver.

        Args:
            config_files: Paths of INI files to read. Defaults to the standard
                SoftLayer locations. Pass an empty list to skip config files.
            dotenv_path: Path to .env file. If None, searches parent directories
                for .env file (default behavior of python-dotenv).
            load_dotenv: Whether to load .env file. Default is True.
        """
        self.config_files = list(CONFIG_FILE_LOCATIONS if config_files is None else config_files)
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Ensure .env file is loaded (thread-safe, only once)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for settings resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    @staticmethod
    def _mask(key: str, value: Any) -> str:
        if value is None:
            return "None"
        if key in SECRET_SETTINGS:
            return "***"
        return repr(value)

    @staticmethod
    def _parse_timeout(value: str, source: str) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Timeout from {source} must be an integer number of seconds, got {value!r}") from None

    def file_settings(self) -> dict[str, Any]:
        """Read settings from the configured INI files.

        Missing files are skipped. A file without a ``[softlayer]`` section
        contributes nothing.

        Returns:
            Settings found in the files, later files overriding earlier ones.

        Raises:
            ConfigurationError: If a file cannot be parsed or has a
                non-integer timeout.
        """
        settings: dict[str, Any] = {}

        for file_path in self.config_files:
            path_obj = Path(os.path.expanduser(os.path.expandvars(str(file_path))))
            if not path_obj.is_file():
                continue

            # API keys may contain '%'
            parser = configparser.ConfigParser(interpolation=None)
            try:
                parser.read(path_obj)
            except configparser.Error as e:
                raise ConfigurationError(f"Error reading config file {path_obj}: {e}") from e

            if not parser.has_section(CONFIG_FILE_SECTION):
                logger.debug(f"Config file {path_obj} has no [{CONFIG_FILE_SECTION}] section")
                continue

            section = parser[CONFIG_FILE_SECTION]
            for key in CONFIG_FILE_KEYS:
                if key not in section:
                    continue
                value: Any = section[key]
                if key == "timeout":
                    value = self._parse_timeout(value, f"config file {path_obj}")
                settings[key] = value
                logger.debug(f"Resolved setting '{key}' from config file {path_obj}: {self._mask(key, value)}")

        return settings

    def environment_settings(self) -> dict[str, Any]:
        """Read settings from environment variables.

        Returns:
            Settings for every variable that is set.

        Raises:
            ConfigurationError: If ``SL_API_TIMEOUT`` is not an integer.
        """
        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

        settings: dict[str, Any] = {}
        for key, env_var_name in ENVIRONMENT_VARIABLE_KEYS.items():
            if env_var_name not in os.environ:
                continue
            value: Any = os.environ[env_var_name]
            if key == "timeout":
                value = self._parse_timeout(value, f"environment variable '{env_var_name}'")
            settings[key] = value
            logger.debug(f"Resolved setting '{key}' from environment variable '{env_var_name}': {self._mask(key, value)}")

        return settings

    def client_settings(self, provided: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Resolve the full settings map for a client.

        Args:
            provided: Explicit options. ``None`` values count as not provided
                and are filled from lower-priority sources.

        Returns:
            Merged settings. Only keys found in some source are present, so
            callers can distinguish "not set" from any particular value.
        """
        settings: dict[str, Any] = {}
        settings.update(self.file_settings())
        settings.update(self.environment_settings())

        for key, value in (provided or {}).items():
            if value is None:
                continue
            settings[key] = value
            logger.debug(f"Resolved setting '{key}' from explicit parameter: {self._mask(key, value)}")

        return settings
