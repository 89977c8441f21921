"""Core data structures for the Roku control client.

Plain records built from one query response each. They are frozen so a
value handed back to the caller is never changed behind its back.
"""
from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class DeviceInfo:
    """Identity and capability values reported by /query/device-info.

    ``fields`` keeps every element exactly as the device sent it, the
    typed attributes are shortcuts for the commonly used ones.
    """

    udn: str = ""
    serial_number: str = ""
    device_id: str = ""
    vendor_name: str = ""
    model_number: str = ""
    model_name: str = ""
    friendly_device_name: str = ""
    user_device_name: str = ""
    software_version: str = ""
    software_build: str = ""
    network_type: str = ""
    wifi_mac: str = ""
    ethernet_mac: str = ""
    power_mode: str = ""
    is_tv: bool = False
    fields: Mapping[str, str] = field(default_factory=dict)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a raw device-info element, e.g. ``get("wifi-driver")``."""
        return self.fields.get(name, default)


@dataclass(frozen=True)
class App:
    """One installed channel/app."""

    app_id: str
    name: str
    app_type: str = ""
    version: str = ""

    def __str__(self) -> str:
        return f"{self.name} ({self.app_id})" if self.app_id else self.name


@dataclass(frozen=True)
class ActiveApp:
    """The application currently in the foreground."""

    app_id: str
    name: str
    app_type: str = ""
    version: str = ""
    screensaver: Optional[App] = None

    @property
    def is_home(self) -> bool:
        # The home screen is reported as an app without an id
        return not self.app_id


@dataclass(frozen=True)
class MediaFormat:
    audio: str = ""
    video: str = ""
    container: str = ""
    captions: str = ""
    drm: str = ""


@dataclass(frozen=True)
class PlayerStatus:
    """Media player state from /query/media-player."""

    state: str
    error: bool = False
    plugin_id: str = ""
    plugin_name: str = ""
    position_ms: Optional[int] = None
    duration_ms: Optional[int] = None
    is_live: Optional[bool] = None
    format: Optional[MediaFormat] = None

    @property
    def is_playing(self) -> bool:
        return self.state == "play"
