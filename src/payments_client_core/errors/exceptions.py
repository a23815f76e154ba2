"""Structured exceptions for the payments client."""


class PaymentsClientError(Exception):
    """Base exception for all payments client errors."""

    pass


class InvalidRequestOptionsError(PaymentsClientError, ValueError):
    """Raised when a request option fails normalization.

    Attributes:
        field: Name of the request option that failed (e.g. ``"api_key"``).
        length: Actual length of an over-long idempotency key, otherwise None.
        max_length: Maximum allowed idempotency key length, otherwise None.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        length: int | None = None,
        max_length: int | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.length = length
        self.max_length = max_length


class ConfigurationError(PaymentsClientError):
    """Raised when client configuration cannot be loaded."""

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name
