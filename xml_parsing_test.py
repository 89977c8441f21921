"""
Payload mapping tests using captured device responses.
"""
import xml.etree.ElementTree as ET

import pytest

from core.data_models import App
from core.xml_parsing import (
    parse_active_app,
    parse_app_list,
    parse_device_info,
    parse_player_status,
)

DEVICE_INFO_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<device-info>
    <udn>29380007-0800-1025-80a4-d83134a9b2c4</udn>
    <serial-number>X004000AAAAA</serial-number>
    <device-id>S0A123456789</device-id>
    <vendor-name>Roku</vendor-name>
    <model-number>4660X</model-number>
    <model-name>Roku Ultra</model-name>
    <wifi-mac>d8:31:34:a9:b2:c5</wifi-mac>
    <ethernet-mac>d8:31:34:a9:b2:c4</ethernet-mac>
    <network-type>ethernet</network-type>
    <user-device-name>Living Room</user-device-name>
    <friendly-device-name>Living Room</friendly-device-name>
    <software-version>9.2.0</software-version>
    <software-build>4803</software-build>
    <power-mode>PowerOn</power-mode>
    <is-tv>false</is-tv>
    <supports-suspend>false</supports-suspend>
</device-info>
"""

APPS_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<apps>
    <app id="31012" type="menu" version="1.9.47">FandangoNOW Movies &amp; TV</app>
    <app id="12" type="appl" version="4.2.81179053">Netflix</app>
    <app id="2285" type="appl" version="6.36.0">Hulu</app>
</apps>
"""

PLAYER_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<player error="false" state="play">
    <plugin bandwidth="10000000 bps" id="12" name="Netflix"/>
    <format audio="aac_adts" captions="none" container="mp4" drm="widevine" video="mpeg4_10b"/>
    <buffering current="1000" max="1000" target="0"/>
    <new_stream speed="128000 bps"/>
    <position>147209 ms</position>
    <duration>2712000 ms</duration>
    <is_live>false</is_live>
    <runtime>2712000 ms</runtime>
</player>
"""


def test_device_info_fields_match_payload():
    info = parse_device_info(DEVICE_INFO_XML)

    assert info.udn == "29380007-0800-1025-80a4-d83134a9b2c4"
    assert info.serial_number == "X004000AAAAA"
    assert info.device_id == "S0A123456789"
    assert info.vendor_name == "Roku"
    assert info.model_number == "4660X"
    assert info.model_name == "Roku Ultra"
    assert info.wifi_mac == "d8:31:34:a9:b2:c5"
    assert info.ethernet_mac == "d8:31:34:a9:b2:c4"
    assert info.network_type == "ethernet"
    assert info.user_device_name == "Living Room"
    assert info.software_version == "9.2.0"
    assert info.software_build == "4803"
    assert info.power_mode == "PowerOn"
    assert info.is_tv is False


def test_device_info_keeps_unknown_elements():
    info = parse_device_info(DEVICE_INFO_XML)

    assert info.get("supports-suspend") == "false"
    assert info.get("missing", "n/a") == "n/a"
    assert len(info.fields) == 16


def test_device_info_tv_flag():
    info = parse_device_info("<device-info><is-tv>true</is-tv></device-info>")

    assert info.is_tv is True
    assert info.model_name == ""


def test_app_list_keeps_document_order():
    apps = parse_app_list(APPS_XML)

    assert apps == (
        App("31012", "FandangoNOW Movies & TV", "menu", "1.9.47"),
        App("12", "Netflix", "appl", "4.2.81179053"),
        App("2285", "Hulu", "appl", "6.36.0"),
    )


def test_empty_app_list():
    assert parse_app_list("<apps/>") == ()


def test_active_app_with_screensaver():
    active = parse_active_app(
        '<active-app>'
        '<app id="12" type="appl" version="4.2">Netflix</app>'
        '<screensaver id="55545" type="ssvr" version="2.0.1">Default screensaver</screensaver>'
        '</active-app>'
    )

    assert active.app_id == "12"
    assert active.name == "Netflix"
    assert not active.is_home
    assert active.screensaver == App("55545", "Default screensaver", "ssvr", "2.0.1")


def test_active_app_home_screen():
    active = parse_active_app("<active-app><app>Roku</app></active-app>")

    assert active.is_home
    assert active.name == "Roku"
    assert active.screensaver is None


def test_active_app_without_app_node():
    assert parse_active_app("<active-app/>") is None


def test_player_status():
    player = parse_player_status(PLAYER_XML)

    assert player.state == "play"
    assert player.is_playing
    assert player.error is False
    assert player.plugin_id == "12"
    assert player.plugin_name == "Netflix"
    assert player.position_ms == 147209
    assert player.duration_ms == 2712000
    assert player.is_live is False
    assert player.format.container == "mp4"
    assert player.format.drm == "widevine"


def test_idle_player_has_no_media_details():
    player = parse_player_status('<player error="false" state="close"/>')

    assert player.state == "close"
    assert player.position_ms is None
    assert player.duration_ms is None
    assert player.is_live is None
    assert player.format is None


def test_player_without_state_is_unusable():
    assert parse_player_status("<player/>") is None


@pytest.mark.parametrize("parser", [
    parse_device_info, parse_active_app, parse_app_list, parse_player_status,
])
def test_wrong_document_returns_none(parser):
    assert parser("<error>not found</error>") is None


@pytest.mark.parametrize("parser", [
    parse_device_info, parse_active_app, parse_app_list, parse_player_status,
])
@pytest.mark.parametrize("body", ["", "   ", "<apps><app>", "not xml"])
def test_malformed_body_raises_parse_error(parser, body):
    with pytest.raises(ET.ParseError):
        parser(body)
