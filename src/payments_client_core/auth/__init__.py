"""Credential resolution for the payments client.

Example:
    ```python
    from payments_client_core.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="PAYMENTS_API_KEY", required=True)
    ```
"""

from payments_client_core.auth.credentials import CredentialResolver
from payments_client_core.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
