"""
Error types for the OpenClaw token bridge.

Every failure of a token read is one of four kinds. None of them is retried;
each carries a human-readable message naming the offending path or the
underlying cause, and never the file contents or the token itself.
"""

from pathlib import Path
from typing import Union


class TokenReadError(Exception):
    """Base class for failures while reading the gateway token."""

    kind = "TokenReadError"


class HomeDirUnresolvedError(TokenReadError):
    """Raised when the platform cannot determine the user's home directory."""

    kind = "HomeDirUnresolved"

    def __init__(self, message: str = "cannot resolve home directory"):
        super().__init__(message)


class FileReadError(TokenReadError):
    """
    Raised when the configuration file is missing or unreadable.

    Attributes:
        path: The resolved configuration file path
        cause: The underlying OS or decoding error
    """

    kind = "FileReadError"

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"cannot read {self.path}: {_describe_cause(cause)}")


def _describe_cause(cause: Exception) -> str:
    """Summarize a read failure without quoting any file bytes."""
    if isinstance(cause, UnicodeDecodeError):
        return f"invalid {cause.encoding} data at position {cause.start}"
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)


class ParseError(TokenReadError):
    """
    Raised when the configuration file is not valid JSON.

    Attributes:
        cause: The underlying JSON decoding error
    """

    kind = "ParseError"

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"invalid JSON: {cause}")


class FieldNotFoundError(TokenReadError):
    """
    Raised when gateway.auth.token is absent or not a string.

    Attributes:
        field: Dotted path of the step that failed, e.g. 'gateway.auth'
        reason: 'missing', 'not an object' or 'not a string'
    """

    kind = "FieldNotFound"

    def __init__(self, field: str = "gateway.auth.token", reason: str = "missing",
                 source: str = "openclaw.json"):
        self.field = field
        self.reason = reason
        super().__init__(f"gateway.auth.token not found in {source} ({field}: {reason})")
