"""Tests for payments client exceptions."""

import pytest

from payments_client_core.errors import (
    ConfigurationError,
    InvalidRequestOptionsError,
    PaymentsClientError,
)


@pytest.mark.unit
def test_exception_inheritance():
    """Test exception inheritance chain."""
    assert issubclass(InvalidRequestOptionsError, PaymentsClientError)
    assert issubclass(InvalidRequestOptionsError, ValueError)
    assert issubclass(ConfigurationError, PaymentsClientError)


@pytest.mark.unit
def test_invalid_request_options_error_attributes():
    """Test InvalidRequestOptionsError carries the failing field and lengths."""
    error = InvalidRequestOptionsError(
        "Idempotency key length was 300, which is larger than the 255 character maximum!",
        field="idempotency_key",
        length=300,
        max_length=255,
    )

    assert error.field == "idempotency_key"
    assert error.length == 300
    assert error.max_length == 255


@pytest.mark.unit
def test_invalid_request_options_error_defaults():
    """Test optional attributes default to None."""
    error = InvalidRequestOptionsError("Empty API key specified!")

    assert str(error) == "Empty API key specified!"
    assert error.field is None
    assert error.length is None
    assert error.max_length is None


@pytest.mark.unit
def test_configuration_error_env_var_name():
    """Test ConfigurationError keeps the offending variable name."""
    error = ConfigurationError("bad value", env_var_name="PAYMENTS_READ_TIMEOUT_MS")

    assert str(error) == "bad value"
    assert error.env_var_name == "PAYMENTS_READ_TIMEOUT_MS"
