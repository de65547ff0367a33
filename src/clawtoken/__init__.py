"""
OpenClaw Token Bridge - Core Package

Reads the OpenClaw gateway authentication token from the user's home
directory and exposes it to a desktop host shell as a named command.
"""

from .config.reader import TokenReader, read_token
from .errors import (
    TokenReadError,
    HomeDirUnresolvedError,
    FileReadError,
    ParseError,
    FieldNotFoundError
)

__version__ = "0.1.0"
__author__ = "OpenClaw Token Bridge Team"

__all__ = [
    'TokenReader',
    'read_token',
    'TokenReadError',
    'HomeDirUnresolvedError',
    'FileReadError',
    'ParseError',
    'FieldNotFoundError'
]
