"""
Configuration package.

Provides the device connection settings and the error raised when they
cannot be loaded.
"""
from .base import RokuConfiguration, ConfigurationError

__all__ = [
    'RokuConfiguration',
    'ConfigurationError',
]
