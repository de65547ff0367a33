"""
Configuration access for the OpenClaw token bridge.

This package reads the gateway token from the OpenClaw configuration file and
loads the bridge's own optional settings.
"""

from .reader import TokenReader, read_token
from .settings import BridgeSettings, SettingsError, load_settings, apply_logging

__all__ = [
    'TokenReader',
    'read_token',
    'BridgeSettings',
    'SettingsError',
    'load_settings',
    'apply_logging'
]
