"""
Unit tests for the OpenClaw document models.

Tests the typed gateway.auth.token accessor and how validation failures are
reported per lookup step.
"""

import pytest
from pydantic import ValidationError

from clawtoken.errors import FieldNotFoundError
from clawtoken.models.openclaw import (
    OpenClawDocument,
    GatewaySection,
    GatewayAuth,
    extract_gateway_token
)


class TestGatewayModels:
    """Test cases for the document models."""

    def test_document_token_property(self):
        """Test the token property walks the nested sections."""
        document = OpenClawDocument.model_validate({"gateway": {"auth": {"token": "abc123"}}})

        assert isinstance(document.gateway, GatewaySection)
        assert isinstance(document.gateway.auth, GatewayAuth)
        assert document.token == "abc123"

    def test_extra_keys_ignored(self):
        """Test unknown keys are accepted and dropped."""
        document = OpenClawDocument.model_validate({
            "gateway": {"auth": {"token": "abc", "mode": "token"}, "bind": "loopback"},
            "channels": {}
        })

        assert document.token == "abc"
        assert not hasattr(document, "channels")

    def test_token_is_strict(self):
        """Test numbers are not coerced to strings."""
        with pytest.raises(ValidationError):
            GatewayAuth(token=123)

    def test_token_hidden_from_repr(self):
        """Test repr does not expose the token."""
        auth = GatewayAuth(token="hidden-value")

        assert "hidden-value" not in repr(auth)

    def test_models_are_frozen(self):
        """Test models cannot be mutated."""
        auth = GatewayAuth(token="abc")

        with pytest.raises(ValidationError):
            auth.token = "other"


class TestExtractGatewayToken:
    """Test cases for extract_gateway_token."""

    def test_valid_document(self):
        """Test a valid document yields its token."""
        assert extract_gateway_token({"gateway": {"auth": {"token": "abc123"}}}) == "abc123"

    def test_missing_gateway(self):
        """Test an empty object reports the gateway step."""
        with pytest.raises(FieldNotFoundError) as exc_info:
            extract_gateway_token({})

        assert exc_info.value.field == "gateway"
        assert exc_info.value.reason == "missing"
        assert exc_info.value.kind == "FieldNotFound"

    def test_non_string_token(self):
        """Test a numeric token is reported as not a string."""
        with pytest.raises(FieldNotFoundError) as exc_info:
            extract_gateway_token({"gateway": {"auth": {"token": 42}}})

        assert exc_info.value.field == "gateway.auth.token"
        assert exc_info.value.reason == "not a string"

    def test_non_object_document(self):
        """Test a non-object document is reported at the root."""
        with pytest.raises(FieldNotFoundError) as exc_info:
            extract_gateway_token(None)

        assert exc_info.value.field == "document"
        assert exc_info.value.reason == "not an object"

    def test_error_chains_validation_error(self):
        """Test the pydantic error is kept as the cause."""
        with pytest.raises(FieldNotFoundError) as exc_info:
            extract_gateway_token({"gateway": {}})

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_source_in_message(self):
        """Test the source file name appears in the message."""
        with pytest.raises(FieldNotFoundError, match="not found in other.json"):
            extract_gateway_token({}, source="other.json")
