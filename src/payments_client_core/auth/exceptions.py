"""Exceptions raised while resolving API credentials.

Example:
    ```python
    from payments_client_core.auth.exceptions import CredentialNotFoundError

    if not api_key:
        raise CredentialNotFoundError("API key not found", env_var_name="PAYMENTS_API_KEY")
    ```
"""

from payments_client_core.errors.exceptions import PaymentsClientError


class CredentialError(PaymentsClientError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass
