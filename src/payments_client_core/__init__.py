"""Payments Client Core - request options runtime for the payments API client.

This library provides the pieces every API call needs before it hits the wire:
- Client-wide defaults loaded from the environment or a .env file
- Validated, immutable per-request options (credentials, connected account,
  idempotency key, API version override, timeouts, retries)
- Mapping of those options onto httpx headers and timeouts

Example:
    ```python
    from payments_client_core import RequestOptions, load_client_config

    config = load_client_config()
    options = (
        RequestOptions.builder(config)
        .set_account_id("acct_1032D82eZvKYlo2C")
        .set_idempotency_key("order-8812-capture")
        .build()
    )
    ```
"""

from payments_client_core.config import ClientConfig, load_client_config
from payments_client_core.errors.exceptions import InvalidRequestOptionsError
from payments_client_core.request_options import RequestOptions, RequestOptionsBuilder
from payments_client_core.version import API_VERSION

__version__ = "0.1.0"

__all__ = [
    "API_VERSION",
    "ClientConfig",
    "InvalidRequestOptionsError",
    "RequestOptions",
    "RequestOptionsBuilder",
    "__version__",
    "load_client_config",
]
