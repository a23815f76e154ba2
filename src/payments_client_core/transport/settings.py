"""Translate ``RequestOptions`` into httpx request parameters.

Only the mapping lives here; sending requests and retrying them is the job of
whatever HTTP client consumes these settings.

| Option | Transport parameter |
|--------|---------------------|
| `api_key` | `Authorization: Bearer <key>` |
| `account_id` | `Payments-Account` header |
| `idempotency_key` | `Idempotency-Key` header |
| `effective_api_version` | `Payments-Version` header |
| `connect_timeout_ms` | `httpx.Timeout.connect` |
| `read_timeout_ms` | `httpx.Timeout.read` (also write and pool) |
| `max_network_retries` | passed through unchanged |
"""

from dataclasses import dataclass

import httpx

from payments_client_core.request_options import RequestOptions

AUTHORIZATION_HEADER = "Authorization"
ACCOUNT_HEADER = "Payments-Account"
IDEMPOTENCY_KEY_HEADER = "Idempotency-Key"
API_VERSION_HEADER = "Payments-Version"


@dataclass(frozen=True)
class TransportSettings:
    """Headers, timeouts and retry budget for one request."""

    headers: httpx.Headers
    timeout: httpx.Timeout
    max_network_retries: int


def build_headers(options: RequestOptions) -> httpx.Headers:
    """Build the auth, account, idempotency and version headers for ``options``."""
    headers = httpx.Headers()
    if options.api_key is not None:
        headers[AUTHORIZATION_HEADER] = f"Bearer {options.api_key}"
    if options.account_id is not None:
        headers[ACCOUNT_HEADER] = options.account_id
    if options.idempotency_key is not None:
        headers[IDEMPOTENCY_KEY_HEADER] = options.idempotency_key
    headers[API_VERSION_HEADER] = options.effective_api_version
    return headers


def build_timeout(options: RequestOptions) -> httpx.Timeout:
    """Convert the millisecond timeouts in ``options`` to an ``httpx.Timeout``.

    Values are not range-checked.
    """
    return httpx.Timeout(options.read_timeout_ms / 1000, connect=options.connect_timeout_ms / 1000)


def transport_settings(options: RequestOptions) -> TransportSettings:
    return TransportSettings(
        headers=build_headers(options),
        timeout=build_timeout(options),
        max_network_retries=options.max_network_retries,
    )
