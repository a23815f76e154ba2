"""Client-wide defaults for request options.

A ``ClientConfig`` is built once at startup and treated as read-only
afterwards. It is passed explicitly to ``RequestOptions.get_default`` and
``RequestOptions.builder`` rather than living in module-level state.

Example:
    ```python
    from payments_client_core.config import load_client_config
    from payments_client_core.request_options import RequestOptions

    config = load_client_config()  # PAYMENTS_* env vars and .env
    options = RequestOptions.builder(config).set_account_id("acct_123").build()
    ```
"""

import logging
from dataclasses import dataclass

from payments_client_core.auth.credentials import CredentialResolver
from payments_client_core.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "PAYMENTS_API_KEY"
API_KEY_FILE_ENV_VAR = "PAYMENTS_API_KEY_FILE"
CLIENT_ID_ENV_VAR = "PAYMENTS_CLIENT_ID"
CONNECT_TIMEOUT_ENV_VAR = "PAYMENTS_CONNECT_TIMEOUT_MS"
READ_TIMEOUT_ENV_VAR = "PAYMENTS_READ_TIMEOUT_MS"
MAX_NETWORK_RETRIES_ENV_VAR = "PAYMENTS_MAX_NETWORK_RETRIES"

DEFAULT_CONNECT_TIMEOUT_MS = 30 * 1000
DEFAULT_READ_TIMEOUT_MS = 80 * 1000
DEFAULT_MAX_NETWORK_RETRIES = 0


@dataclass(frozen=True)
class ClientConfig:
    """Defaults applied to every request unless overridden per request.

    Credentials are stripped of surrounding whitespace and must not be
    blank. Numeric values are not range-checked; enforcing them is up to the
    transport that consumes the built request options.
    """

    api_key: str | None = None
    client_id: str | None = None
    connect_timeout_ms: int = DEFAULT_CONNECT_TIMEOUT_MS
    read_timeout_ms: int = DEFAULT_READ_TIMEOUT_MS
    max_network_retries: int = DEFAULT_MAX_NETWORK_RETRIES

    def __post_init__(self) -> None:
        for name, label in (("api_key", "API key"), ("client_id", "client_id")):
            value = getattr(self, name)
            if value is None:
                continue
            normalized = value.strip()
            if not normalized:
                raise ConfigurationError(f"Empty {label} in client config!")
            if normalized != value:
                object.__setattr__(self, name, normalized)

    def __repr__(self) -> str:
        api_key = "***" if self.api_key is not None else None
        return (
            f"ClientConfig(api_key={api_key!r}, client_id={self.client_id!r}, "
            f"connect_timeout_ms={self.connect_timeout_ms}, read_timeout_ms={self.read_timeout_ms}, "
            f"max_network_retries={self.max_network_retries})"
        )


def _resolve_str(
    resolver: CredentialResolver, value: str | None, env_var_name: str, mask_in_logs: bool = True
) -> str | None:
    if value is not None:
        return value
    raw = resolver.resolve(env_var_name=env_var_name, mask_in_logs=mask_in_logs)
    if raw is None or not raw.strip():
        return None
    return raw


def _resolve_int(resolver: CredentialResolver, value: int | None, env_var_name: str, default: int) -> int:
    if value is not None:
        return value

    raw = resolver.resolve(env_var_name=env_var_name, mask_in_logs=False)
    if raw is None or not raw.strip():
        return default

    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"Environment variable {env_var_name} must be an integer, got {raw!r}",
            env_var_name=env_var_name,
        ) from None


def load_client_config(
    *,
    resolver: CredentialResolver | None = None,
    api_key: str | None = None,
    client_id: str | None = None,
    connect_timeout_ms: int | None = None,
    read_timeout_ms: int | None = None,
    max_network_retries: int | None = None,
) -> ClientConfig:
    """Build a ``ClientConfig`` from explicit values and the environment.

    Explicit keyword arguments win over environment variables, which win over
    the built-in defaults. Blank environment values and an empty key file
    count as unset. The API key is read from ``PAYMENTS_API_KEY`` or, if that
    is unset, from the file named by ``PAYMENTS_API_KEY_FILE``.

    Args:
        resolver: Credential resolver to use. Defaults to one that loads the
            nearest .env file.

    Raises:
        ConfigurationError: If a numeric environment variable is not an
            integer, or an explicit credential is blank.
    """
    if resolver is None:
        resolver = CredentialResolver()

    resolved_key = _resolve_str(resolver, api_key, API_KEY_ENV_VAR)
    if resolved_key is None:
        resolved_key = resolver.resolve_from_file(env_var_name=API_KEY_FILE_ENV_VAR) or None

    config = ClientConfig(
        api_key=resolved_key,
        client_id=_resolve_str(resolver, client_id, CLIENT_ID_ENV_VAR, mask_in_logs=False),
        connect_timeout_ms=_resolve_int(
            resolver, connect_timeout_ms, CONNECT_TIMEOUT_ENV_VAR, DEFAULT_CONNECT_TIMEOUT_MS
        ),
        read_timeout_ms=_resolve_int(resolver, read_timeout_ms, READ_TIMEOUT_ENV_VAR, DEFAULT_READ_TIMEOUT_MS),
        max_network_retries=_resolve_int(
            resolver, max_network_retries, MAX_NETWORK_RETRIES_ENV_VAR, DEFAULT_MAX_NETWORK_RETRIES
        ),
    )
    logger.debug(f"Loaded client config: {config!r}")
    return config
