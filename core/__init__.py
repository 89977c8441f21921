"""
Core client layer: HTTP access to the device and the records it returns.
"""
from .api_client import RokuClient, RokuError, CommandFailed, QueryFailed
from .data_models import DeviceInfo, ActiveApp, App, PlayerStatus, MediaFormat
from .key_codes import RokuKey

__all__ = [
    'RokuClient',
    'RokuError',
    'CommandFailed',
    'QueryFailed',
    'DeviceInfo',
    'ActiveApp',
    'App',
    'PlayerStatus',
    'MediaFormat',
    'RokuKey',
]
