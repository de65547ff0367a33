"""
Command result returned to the host runtime.

A command either succeeds with a string value or fails with a message; the
host decides how to present either. Token values never appear in repr output.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a bridge command.

    Attributes:
        ok: Whether the command succeeded
        value: Result value when ok is True
        error: Human-readable error message when ok is False
        error_kind: Error category when ok is False, e.g. 'FileReadError'
    """
    ok: bool
    value: Optional[str] = field(default=None, repr=False)
    error: Optional[str] = None
    error_kind: Optional[str] = None

    def __post_init__(self):
        if self.ok and (self.value is None or self.error is not None):
            raise ValueError("Successful result needs a value and no error")
        if not self.ok and (self.error is None or self.value is not None):
            raise ValueError("Failed result needs an error and no value")

    @classmethod
    def success(cls, value: str) -> 'CommandResult':
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str, error_kind: Optional[str] = None) -> 'CommandResult':
        return cls(ok=False, error=error, error_kind=error_kind)

    def unwrap(self) -> str:
        """Return the value, or raise RuntimeError carrying the error message."""
        if not self.ok:
            raise RuntimeError(self.error)
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the payload handed to the host."""
        if self.ok:
            return {'ok': True, 'value': self.value}
        return {'ok': False, 'error': self.error, 'kind': self.error_kind}
