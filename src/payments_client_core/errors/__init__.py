"""Error types raised by the payments client."""

from payments_client_core.errors.exceptions import (
    ConfigurationError,
    InvalidRequestOptionsError,
    PaymentsClientError,
)

__all__ = [
    "ConfigurationError",
    "InvalidRequestOptionsError",
    "PaymentsClientError",
]
