"""Base client classes for the payments API."""

import logging
from typing import Any

import httpx

from payments_client_core.config import ClientConfig
from payments_client_core.request_options import RequestOptions, RequestOptionsBuilder
from payments_client_core.transport.settings import transport_settings

logger = logging.getLogger(__name__)


class BaseClient:
    """Base class for payments API clients.

    Holds the ``ClientConfig`` that seeds every request's options and turns
    options into ready-to-send ``httpx.Request`` objects. Sending, retrying
    and parsing responses are left to subclasses.

    Example:
        ```python
        client = BaseClient(load_client_config())
        options = client.request_options().set_idempotency_key("po-1138").build()
        request = client.build_request("POST", "/v1/charges", options=options, data={"amount": 2000})
        ```
    """

    default_base_url = "https://api.payments.example.com"

    def __init__(self, config: ClientConfig, *, base_url: str | None = None):
        self.config = config
        self.base_url = (base_url or self.default_base_url).rstrip("/")

    def request_options(self) -> RequestOptionsBuilder:
        """Start building options for one request from this client's config."""
        return RequestOptions.builder(self.config)

    def build_request(
        self,
        method: str,
        path: str,
        *,
        options: RequestOptions | None = None,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> httpx.Request:
        """Build an unsent request carrying the headers and timeout from ``options``.

        Args:
            method: HTTP method.
            path: API path relative to ``base_url``.
            options: Per-request options. Defaults to the config's defaults.
            params: Query parameters.
            data: Form-encoded body parameters.

        Raises:
            ValueError: If ``path`` is a full URL.
        """
        if "://" in path:
            raise ValueError("Full URLs are not allowed in path")
        if options is None:
            options = RequestOptions.get_default(self.config)

        settings = transport_settings(options)
        request = httpx.Request(
            method.upper(),
            f"{self.base_url}/{path.lstrip('/')}",
            params=params,
            data=data,
            headers=settings.headers,
            extensions={"timeout": settings.timeout.as_dict()},
        )
        logger.debug(f"Prepared {request.method} {request.url} (api version {options.effective_api_version})")
        return request
