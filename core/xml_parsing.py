"""
XML payload mapping for the device query endpoints.

Each ``parse_*`` function takes the raw response body and returns the
matching record, or None when the document is well formed but is not the
expected payload (wrong root element, missing required node).
Malformed or empty input raises ``xml.etree.ElementTree.ParseError``.
"""
import logging
import xml.etree.ElementTree as ET
from typing import Optional, Tuple

from .data_models import ActiveApp, App, DeviceInfo, MediaFormat, PlayerStatus

logger = logging.getLogger(__name__)

# device-info element name -> DeviceInfo attribute
DEVICE_INFO_FIELDS = {
    "udn": "udn",
    "serial-number": "serial_number",
    "device-id": "device_id",
    "vendor-name": "vendor_name",
    "model-number": "model_number",
    "model-name": "model_name",
    "friendly-device-name": "friendly_device_name",
    "user-device-name": "user_device_name",
    "software-version": "software_version",
    "software-build": "software_build",
    "network-type": "network_type",
    "wifi-mac": "wifi_mac",
    "ethernet-mac": "ethernet_mac",
    "power-mode": "power_mode",
}


def _load_root(xml_text: str, tag: str) -> Optional[ET.Element]:
    root = ET.fromstring(xml_text.strip())
    if root.tag != tag:
        logger.debug(f"Expected <{tag}> document, got <{root.tag}>")
        return None
    return root


def _text(element: Optional[ET.Element]) -> str:
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def _as_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def _as_millis(value: str) -> Optional[int]:
    """Turn values like '12345 ms' into 12345."""
    parts = value.split()
    if not parts:
        return None
    try:
        return int(parts[0])
    except ValueError:
        return None


def _app_from_element(element: ET.Element) -> App:
    return App(
        app_id=element.get("id", ""),
        name=_text(element),
        app_type=element.get("type", ""),
        version=element.get("version", ""),
    )


def parse_device_info(xml_text: str) -> Optional[DeviceInfo]:
    root = _load_root(xml_text, "device-info")
    if root is None:
        return None

    fields = {child.tag: _text(child) for child in root}
    typed = {attr: fields.get(tag, "") for tag, attr in DEVICE_INFO_FIELDS.items()}
    return DeviceInfo(is_tv=_as_bool(fields.get("is-tv", "")), fields=fields, **typed)


def parse_active_app(xml_text: str) -> Optional[ActiveApp]:
    root = _load_root(xml_text, "active-app")
    if root is None:
        return None

    app = root.find("app")
    if app is None:
        return None

    screensaver = root.find("screensaver")
    return ActiveApp(
        app_id=app.get("id", ""),
        name=_text(app),
        app_type=app.get("type", ""),
        version=app.get("version", ""),
        screensaver=_app_from_element(screensaver) if screensaver is not None else None,
    )


def parse_app_list(xml_text: str) -> Optional[Tuple[App, ...]]:
    """Installed apps in document order. An empty <apps/> is a valid, empty list."""
    root = _load_root(xml_text, "apps")
    if root is None:
        return None
    return tuple(_app_from_element(app) for app in root.findall("app"))


def parse_player_status(xml_text: str) -> Optional[PlayerStatus]:
    root = _load_root(xml_text, "player")
    if root is None:
        return None

    state = root.get("state")
    if not state:
        return None

    plugin = root.find("plugin")
    fmt = root.find("format")
    is_live = root.find("is_live")

    return PlayerStatus(
        state=state,
        error=_as_bool(root.get("error", "false")),
        plugin_id=plugin.get("id", "") if plugin is not None else "",
        plugin_name=plugin.get("name", "") if plugin is not None else "",
        position_ms=_as_millis(_text(root.find("position"))),
        duration_ms=_as_millis(_text(root.find("duration"))),
        is_live=_as_bool(_text(is_live)) if is_live is not None else None,
        format=MediaFormat(
            audio=fmt.get("audio", ""),
            video=fmt.get("video", ""),
            container=fmt.get("container", ""),
            captions=fmt.get("captions", ""),
            drm=fmt.get("drm", ""),
        ) if fmt is not None else None,
    )
