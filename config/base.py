"""
Device connection settings.

Values come from the environment, with a local .env file loaded first, so
the same code runs from a shell, a service unit or the interactive menu.
"""
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8060
DEFAULT_TIMEOUT = 5.0


class ConfigurationError(Exception):
    """Raised when required settings are missing or invalid."""


@dataclass(frozen=True)
class RokuConfiguration:
    host: str
    port: int = DEFAULT_PORT
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RokuConfiguration":
        """Read ROKU_HOST, ROKU_PORT and ROKU_TIMEOUT.

        When ``environ`` is omitted the process environment is used after
        loading .env.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        host = (environ.get("ROKU_HOST") or "").strip()
        if not host:
            raise ConfigurationError("Please set ROKU_HOST in your .env file")

        port_value = environ.get("ROKU_PORT") or str(DEFAULT_PORT)
        try:
            port = int(port_value)
        except ValueError:
            raise ConfigurationError(f"ROKU_PORT must be a number, got {port_value!r}") from None
        if not 0 < port < 65536:
            raise ConfigurationError(f"ROKU_PORT out of range: {port}")

        timeout_value = environ.get("ROKU_TIMEOUT") or str(DEFAULT_TIMEOUT)
        try:
            timeout = float(timeout_value)
        except ValueError:
            raise ConfigurationError(f"ROKU_TIMEOUT must be a number of seconds, got {timeout_value!r}") from None
        if timeout <= 0:
            raise ConfigurationError(f"ROKU_TIMEOUT must be positive, got {timeout}")

        logger.debug(f"Using device at {host}:{port} (timeout {timeout}s)")
        return cls(host=host, port=port, timeout=timeout)
