"""Mapping of request options onto httpx transport parameters.

Example:
    ```python
    from payments_client_core.transport import transport_settings

    settings = transport_settings(options)
    response = httpx_client.post(url, headers=settings.headers, timeout=settings.timeout)
    ```
"""

from payments_client_core.transport.settings import (
    TransportSettings,
    build_headers,
    build_timeout,
    transport_settings,
)

__all__ = [
    "TransportSettings",
    "build_headers",
    "build_timeout",
    "transport_settings",
]
