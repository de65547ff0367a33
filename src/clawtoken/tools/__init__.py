"""
Platform access for the OpenClaw token bridge.

This package isolates home-directory resolution and file reads so the token
reader can run against the real filesystem, a temporary directory, or memory.
"""

from .home_fs import (
    HomeFileSystem,
    HomeDirUnresolvedError,
    LocalHomeFileSystem,
    FixedHomeFileSystem,
    InMemoryHomeFileSystem
)

__all__ = [
    'HomeFileSystem',
    'HomeDirUnresolvedError',
    'LocalHomeFileSystem',
    'FixedHomeFileSystem',
    'InMemoryHomeFileSystem'
]
