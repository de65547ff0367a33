"""
Typed view over the OpenClaw configuration document.

Only one path of ~/.openclaw/openclaw.json is interpreted: gateway.auth.token.
The models below describe that path step by step so a failed lookup reports
which step was missing or had the wrong type. Every other key is ignored.
"""

from typing import Any, Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from ..errors import FieldNotFoundError


# pydantic error types mapped to the reason reported by FieldNotFoundError
_REASONS: Dict[str, str] = {
    'missing': 'missing',
    'model_type': 'not an object',
    'model_attributes_type': 'not an object',
    'dict_type': 'not an object',
    'string_type': 'not a string',
}


class GatewayAuth(BaseModel):
    """
    The gateway.auth section.

    Attributes:
        token: Gateway authentication token, kept verbatim
    """

    model_config = ConfigDict(extra='ignore', frozen=True)

    token: StrictStr = Field(..., repr=False, description="Gateway authentication token")


class GatewaySection(BaseModel):
    """The gateway section; only auth is read."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    auth: GatewayAuth = Field(..., description="Gateway authentication settings")


class OpenClawDocument(BaseModel):
    """Top level of openclaw.json; only gateway is read."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    gateway: GatewaySection = Field(..., description="Gateway settings")

    @property
    def token(self) -> str:
        """The gateway authentication token."""
        return self.gateway.auth.token


def _describe_error(error: Dict[str, Any]) -> Tuple[str, str]:
    """
    Turn one pydantic error entry into a (field, reason) pair.

    Args:
        error: An entry from ValidationError.errors()

    Returns:
        Dotted path of the failing step and a short reason
    """
    loc = [str(part) for part in error.get('loc', ())]
    field = '.'.join(loc) if loc else 'document'
    reason = _REASONS.get(error.get('type', ''), error.get('msg', 'invalid'))
    return field, reason


def extract_gateway_token(document: Any, source: str = "openclaw.json") -> str:
    """
    Extract gateway.auth.token from a parsed JSON value.

    Args:
        document: Any value produced by json.loads
        source: File name used in the error message

    Returns:
        The token string, unmodified

    Raises:
        FieldNotFoundError: If any step of the path is absent, is not an object,
            or the token is not a string
    """
    try:
        parsed = OpenClawDocument.model_validate(document)
    except ValidationError as e:
        field, reason = _describe_error(e.errors()[0])
        raise FieldNotFoundError(field, reason, source=source) from e
    return parsed.token
