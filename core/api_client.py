import logging
import xml.etree.ElementTree as ET
from typing import Callable, Optional, Tuple, TypeVar, Union

import requests

from core.data_models import ActiveApp, App, DeviceInfo, PlayerStatus
from core.key_codes import RokuKey
from core.xml_parsing import (
    parse_active_app,
    parse_app_list,
    parse_device_info,
    parse_player_status,
)

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8060

T = TypeVar("T")


class RokuError(Exception):
    """Base error for failed device calls."""

    def __init__(self, url: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"{message}, URL: {url}")
        self.url = url
        self.message = message
        self.cause = cause


class CommandFailed(RokuError):
    """A POST command could not be delivered."""


class QueryFailed(RokuError):
    """A GET query did not produce a usable result."""


class RokuClient:
    """Client for the device's local HTTP control API.

    The session is owned by the caller; its connection handling is left
    untouched here. ``timeout`` is passed to every request.
    """

    def __init__(
        self,
        session: requests.Session,
        host: str,
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = None,
    ):
        self.session = session
        self.timeout = timeout

        self.base_url = f"http://{host}:{port}"
        self.url_keypress = f"{self.base_url}/keypress/"
        self.url_launch = f"{self.base_url}/launch/"
        self.url_device_info = f"{self.base_url}/query/device-info"
        self.url_active_app = f"{self.base_url}/query/active-app"
        self.url_apps = f"{self.base_url}/query/apps"
        self.url_media_player = f"{self.base_url}/query/media-player"

    @classmethod
    def from_config(cls, config, session: Optional[requests.Session] = None) -> "RokuClient":
        """Build a client from a RokuConfiguration, creating a session if needed"""
        return cls(
            session if session is not None else requests.Session(),
            config.host,
            config.port,
            timeout=config.timeout,
        )

    def __enter__(self) -> "RokuClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Commands

    def press_key(self, key: Union[RokuKey, str]) -> None:
        """Send a keypress, e.g. ``press_key(RokuKey.HOME)``"""
        if isinstance(key, RokuKey):
            key = key.value
        self._post(self.url_keypress + key)

    def launch_app(self, app_id: str) -> None:
        self._post(self.url_launch + app_id)

    def send_text(self, text: str) -> None:
        """Type text one literal key at a time; stops at the first failed key."""
        for char in text:
            self._post(self.url_keypress + RokuKey.literal(char))

    # Queries

    def get_device_info(self) -> DeviceInfo:
        return self._query(self.url_device_info, parse_device_info, "DeviceInfo")

    def get_active_app(self) -> ActiveApp:
        return self._query(self.url_active_app, parse_active_app, "ActiveApp")

    def get_app_list(self) -> Tuple[App, ...]:
        """Installed apps in the order the device lists them."""
        return self._query(self.url_apps, parse_app_list, "AppList")

    def get_player_status(self) -> PlayerStatus:
        return self._query(self.url_media_player, parse_player_status, "Player info")

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.session.close()

    def _query(self, url: str, parser: Callable[[str], Optional[T]], label: str) -> T:
        body = self._get(url)
        try:
            result = parser(body)
        except ET.ParseError as e:
            raise QueryFailed(url, f"Malformed {label} response: {e}", e) from e

        if result is None:
            raise QueryFailed(url, f"No {label} model in response")
        return result

    def _get(self, url: str) -> str:
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error executing GET command, URL: {url}, {e}")
            raise QueryFailed(url, f"Error executing GET command: {e}", e) from e
        return response.text

    def _post(self, url: str) -> None:
        logger.debug(f"POST {url}")
        try:
            response = self.session.post(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error executing POST command, URL: {url}, {e}")
            raise CommandFailed(url, f"Error executing POST command: {e}", e) from e
