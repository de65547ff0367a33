"""
OpenClaw gateway token reader.

This module reads the gateway authentication token from the user's OpenClaw
configuration file (~/.openclaw/openclaw.json). The read is a single
resolve-read-parse-extract sequence: any failure is terminal for the call and
is raised as one of the TokenReadError subclasses, never retried and never
returned as a partial result.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..errors import (
    TokenReadError,
    HomeDirUnresolvedError,
    FileReadError,
    ParseError,
    FieldNotFoundError
)
from ..models.openclaw import extract_gateway_token
from ..tools.home_fs import HomeFileSystem, LocalHomeFileSystem


logger = logging.getLogger(__name__)

CONFIG_DIR = ".openclaw"
CONFIG_FILE = "openclaw.json"


def _parse_int(text: str):
    """Parse a JSON integer, falling back to float past the int digit limit."""
    try:
        return int(text)
    except ValueError:
        return float(text)


class TokenReader:
    """
    Reads gateway.auth.token from the OpenClaw configuration file.

    The reader holds no state between calls; it only keeps a reference to the
    filesystem capability it was built with, so one instance may be shared
    by concurrent callers.
    """

    def __init__(self, fs: Optional[HomeFileSystem] = None):
        """
        Initialize the token reader.

        Args:
            fs: Filesystem capability. Defaults to the real filesystem.
        """
        self.fs = fs if fs is not None else LocalHomeFileSystem()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def config_path(self) -> Path:
        """
        Resolve the configuration file path without reading it.

        Returns:
            <home>/.openclaw/openclaw.json

        Raises:
            HomeDirUnresolvedError: If the home directory cannot be determined
        """
        try:
            home = self.fs.home_dir()
        except HomeDirUnresolvedError as e:
            self.logger.warning(f"Home directory lookup failed: {e}")
            raise
        return home / CONFIG_DIR / CONFIG_FILE

    def read_token(self) -> str:
        """
        Read the gateway authentication token.

        Returns:
            The token string exactly as stored in the file

        Raises:
            HomeDirUnresolvedError: If the home directory cannot be determined
            FileReadError: If the file is missing or unreadable
            ParseError: If the file is not valid JSON
            FieldNotFoundError: If gateway.auth.token is absent or not a string
        """
        path = self.config_path()
        self.logger.debug(f"Reading gateway token from {path}")

        try:
            raw = self.fs.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            error = FileReadError(path, e)
            self.logger.warning(str(error))
            raise error from e

        try:
            document = json.loads(raw, parse_int=_parse_int)
        except (json.JSONDecodeError, RecursionError) as e:
            # RecursionError: nesting deeper than the decoder can follow
            self.logger.warning(f"Invalid JSON in {path}: {e}")
            raise ParseError(e) from e

        try:
            token = extract_gateway_token(document, source=CONFIG_FILE)
        except FieldNotFoundError as e:
            self.logger.warning(f"No usable gateway token in {path}: {e.field} {e.reason}")
            raise

        self.logger.info(f"Gateway token read from {path}")
        return token


def read_token() -> str:
    """
    Read the gateway token from ~/.openclaw/openclaw.json on the real filesystem.

    Returns:
        The token string

    Raises:
        TokenReadError: On any failure; see TokenReader.read_token
    """
    return TokenReader().read_token()


__all__ = [
    'TokenReader',
    'read_token',
    'TokenReadError',
    'HomeDirUnresolvedError',
    'FileReadError',
    'ParseError',
    'FieldNotFoundError'
]
