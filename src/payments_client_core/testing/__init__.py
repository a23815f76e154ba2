"""Testing utilities for code built on the payments client.

Example:
    ```python
    from payments_client_core.testing import make_client_config


    def test_charge_uses_connected_account():
        config = make_client_config(max_network_retries=2)
        options = RequestOptions.builder(config).set_account_id("acct_1").build()
        ...
    ```
"""

from payments_client_core.config import ClientConfig

TEST_API_KEY = "sk_test_4eC39HqLyjWDarjtT1zdp7dc"
TEST_CLIENT_ID = "ca_test_FkyHCg7X8mlvCUdMDao4mMxagUfhIwXb"


def make_client_config(**overrides) -> ClientConfig:
    """Return a ``ClientConfig`` with test credentials, updated with ``overrides``."""
    values = {"api_key": TEST_API_KEY, "client_id": TEST_CLIENT_ID}
    values.update(overrides)
    return ClientConfig(**values)


__all__ = ["TEST_API_KEY", "TEST_CLIENT_ID", "make_client_config"]
