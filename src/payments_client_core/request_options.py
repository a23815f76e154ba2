"""Per-request options: credentials, account context, versioning and timeouts.

``RequestOptions`` is an immutable value. It is produced either directly from
a ``ClientConfig`` (``RequestOptions.get_default``) or through a
``RequestOptionsBuilder`` seeded from one.

String options are normalized the same way everywhere: ``None`` means unset
and is always valid; anything else is stripped of surrounding whitespace and
must not end up empty. Idempotency keys are additionally limited to 255
characters. Normalization runs when a setter is called and again in
``build()``.

Example:
    ```python
    options = (
        RequestOptions.builder(config)
        .set_account_id("acct_1032D82eZvKYlo2C")
        .set_idempotency_key("order-8812-capture")
        .build()
    )

    # Follow-up request for the same account; nothing else is carried over.
    refund_options = options.same_account_builder(config).build()
    ```
"""

import logging
from dataclasses import dataclass, field

from payments_client_core.config import ClientConfig
from payments_client_core.errors.exceptions import InvalidRequestOptionsError
from payments_client_core.version import API_VERSION

logger = logging.getLogger(__name__)

MAX_IDEMPOTENCY_KEY_LENGTH = 255

_EMPTY_VALUE_MESSAGES = {
    "api_key": "Empty API key specified!",
    "client_id": "Empty client_id specified!",
    "idempotency_key": "Empty idempotency key specified!",
    "account_id": "Empty account specified!",
    "api_version_override": "Empty API version specified!",
}


def normalize_option(value: str | None, field_name: str) -> str | None:
    """Strip a string option, rejecting values that are blank.

    Args:
        value: Raw option value. None is passed through.
        field_name: Option name, one of the normalizable request options.

    Raises:
        InvalidRequestOptionsError: If the stripped value is empty.
    """
    if value is None:
        return None
    normalized = value.strip()
    if not normalized:
        raise InvalidRequestOptionsError(_EMPTY_VALUE_MESSAGES[field_name], field=field_name)
    return normalized


def normalize_idempotency_key(value: str | None) -> str | None:
    """Normalize an idempotency key and enforce its maximum length."""
    normalized = normalize_option(value, "idempotency_key")
    if normalized is not None and len(normalized) > MAX_IDEMPOTENCY_KEY_LENGTH:
        raise InvalidRequestOptionsError(
            f"Idempotency key length was {len(normalized)}, which is larger than the "
            f"{MAX_IDEMPOTENCY_KEY_LENGTH} character maximum!",
            field="idempotency_key",
            length=len(normalized),
            max_length=MAX_IDEMPOTENCY_KEY_LENGTH,
        )
    return normalized


@dataclass(frozen=True)
class RequestOptions:
    """Options applied to a single API request.

    Build instances through ``RequestOptions.builder`` or
    ``RequestOptions.get_default``. Direct construction is allowed, but string
    options are normalized here as well, so a blank value raises
    ``InvalidRequestOptionsError`` however the instance is created.

    ``api_version`` is always the version this library is pinned to and can't
    be passed in. ``api_version_override`` replaces it on the wire and should
    only be used when the response is handed on as raw data instead of being
    parsed by this library.
    """

    api_key: str | None = field(default=None, repr=False)
    client_id: str | None = None
    idempotency_key: str | None = None
    account_id: str | None = None
    api_version_override: str | None = None
    connect_timeout_ms: int = 0
    read_timeout_ms: int = 0
    max_network_retries: int = 0
    api_version: str = field(default=API_VERSION, init=False)

    def __post_init__(self) -> None:
        normalized = {
            "api_key": normalize_option(self.api_key, "api_key"),
            "client_id": normalize_option(self.client_id, "client_id"),
            "idempotency_key": normalize_idempotency_key(self.idempotency_key),
            "account_id": normalize_option(self.account_id, "account_id"),
            "api_version_override": normalize_option(self.api_version_override, "api_version_override"),
        }
        for name, value in normalized.items():
            object.__setattr__(self, name, value)

    @classmethod
    def get_default(cls, config: ClientConfig) -> "RequestOptions":
        """Options taken entirely from ``config``, with no per-request values.

        Never raises: ``ClientConfig`` only holds normalized credentials.
        """
        return cls(
            api_key=config.api_key,
            client_id=config.client_id,
            connect_timeout_ms=config.connect_timeout_ms,
            read_timeout_ms=config.read_timeout_ms,
            max_network_retries=config.max_network_retries,
        )

    @staticmethod
    def builder(config: ClientConfig) -> "RequestOptionsBuilder":
        """Return a builder seeded with the credentials and timeouts from ``config``."""
        return RequestOptionsBuilder(config)

    def same_account_builder(self, config: ClientConfig) -> "RequestOptionsBuilder":
        """Start a new request in the same account context.

        This is not a copy. Only ``api_key`` and ``account_id`` are carried
        over; every other option starts from ``config`` or unset, so an
        idempotency key is never reused by accident.
        """
        return RequestOptionsBuilder(config).set_api_key(self.api_key).set_account_id(self.account_id)

    @property
    def effective_api_version(self) -> str:
        """The API version to send: the override if present, else the pinned one."""
        if self.api_version_override is not None:
            return self.api_version_override
        return self.api_version


class RequestOptionsBuilder:
    """Mutable staging area for ``RequestOptions``.

    Setters validate eagerly and return the builder for chaining. Passing
    None to a string setter unsets the option. A builder must not be shared
    between threads.
    """

    def __init__(self, config: ClientConfig):
        self._api_key = config.api_key
        self._client_id = config.client_id
        self._idempotency_key: str | None = None
        self._account_id: str | None = None
        self._api_version_override: str | None = None
        self._connect_timeout_ms = config.connect_timeout_ms
        self._read_timeout_ms = config.read_timeout_ms
        self._max_network_retries = config.max_network_retries

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def client_id(self) -> str | None:
        return self._client_id

    @property
    def idempotency_key(self) -> str | None:
        return self._idempotency_key

    @property
    def account_id(self) -> str | None:
        return self._account_id

    @property
    def api_version_override(self) -> str | None:
        return self._api_version_override

    @property
    def connect_timeout_ms(self) -> int:
        return self._connect_timeout_ms

    @property
    def read_timeout_ms(self) -> int:
        return self._read_timeout_ms

    @property
    def max_network_retries(self) -> int:
        return self._max_network_retries

    def set_api_key(self, api_key: str | None) -> "RequestOptionsBuilder":
        """Use a different secret key for this request."""
        self._api_key = normalize_option(api_key, "api_key")
        return self

    def clear_api_key(self) -> "RequestOptionsBuilder":
        """Send the request without a secret key."""
        self._api_key = None
        return self

    def set_client_id(self, client_id: str | None) -> "RequestOptionsBuilder":
        """Set the OAuth client ID used by the request."""
        self._client_id = normalize_option(client_id, "client_id")
        return self

    def clear_client_id(self) -> "RequestOptionsBuilder":
        """Unset the OAuth client ID."""
        self._client_id = None
        return self

    def set_idempotency_key(self, idempotency_key: str | None) -> "RequestOptionsBuilder":
        """Make retries of this request safe; at most 255 characters after stripping."""
        self._idempotency_key = normalize_idempotency_key(idempotency_key)
        return self

    def clear_idempotency_key(self) -> "RequestOptionsBuilder":
        """Unset the idempotency key."""
        self._idempotency_key = None
        return self

    def set_account_id(self, account_id: str | None) -> "RequestOptionsBuilder":
        """Act on behalf of a connected account."""
        self._account_id = normalize_option(account_id, "account_id")
        return self

    def clear_account_id(self) -> "RequestOptionsBuilder":
        """Act on the platform's own account again."""
        self._account_id = None
        return self

    def set_api_version_override(self, api_version_override: str | None) -> "RequestOptionsBuilder":
        """Send a different API version than the one this library is pinned to.

        Only for responses that are passed through as raw data, e.g. when
        acting on behalf of another integration with its own API version.
        Model classes in this library are shaped by the pinned version and
        will not match a response produced under a different one.
        """
        self._api_version_override = normalize_option(api_version_override, "api_version_override")
        return self

    def clear_api_version_override(self) -> "RequestOptionsBuilder":
        """Go back to sending the pinned API version."""
        self._api_version_override = None
        return self

    def set_connect_timeout_ms(self, timeout_ms: int) -> "RequestOptionsBuilder":
        """Set the connect timeout in milliseconds. Not range-checked."""
        self._connect_timeout_ms = timeout_ms
        return self

    def set_read_timeout_ms(self, timeout_ms: int) -> "RequestOptionsBuilder":
        """Set the read timeout in milliseconds. Not range-checked."""
        self._read_timeout_ms = timeout_ms
        return self

    def set_max_network_retries(self, max_network_retries: int) -> "RequestOptionsBuilder":
        """Set how many times the transport may retry. Not range-checked."""
        self._max_network_retries = max_network_retries
        return self

    def build(self) -> RequestOptions:
        """Validate the staged values and return a new ``RequestOptions``.

        String options are normalized again by ``RequestOptions`` itself, so
        values staged through any path are checked.

        Raises:
            InvalidRequestOptionsError: If any staged string option is invalid.
        """
        options = RequestOptions(
            api_key=self._api_key,
            client_id=self._client_id,
            idempotency_key=self._idempotency_key,
            account_id=self._account_id,
            api_version_override=self._api_version_override,
            connect_timeout_ms=self._connect_timeout_ms,
            read_timeout_ms=self._read_timeout_ms,
            max_network_retries=self._max_network_retries,
        )
        logger.debug(f"Built request options: {options!r}")
        return options
