"""
Data models for the OpenClaw token bridge.
"""

from .openclaw import OpenClawDocument, GatewaySection, GatewayAuth, extract_gateway_token
from .result import CommandResult

__all__ = [
    'OpenClawDocument',
    'GatewaySection',
    'GatewayAuth',
    'extract_gateway_token',
    'CommandResult'
]
