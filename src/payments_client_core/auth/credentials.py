"""Credential resolution for the payments client.

Secret keys and client IDs are looked up from several sources, first match
wins:

1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Default value

Secret keys can also be read from a file, which keeps them out of the process
environment (useful with mounted secrets).

Example:
    ```python
    from payments_client_core.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="PAYMENTS_API_KEY", required=True)
    api_key = resolver.resolve_from_file(env_var_name="PAYMENTS_API_KEY_FILE")
    ```

Resolved values are never logged in full; only their source is.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from payments_client_core.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve API credentials from explicit values, the environment and files.

    The .env file is loaded at most once per resolver, under a lock, and only
    fills variables that are not already set in the process environment.

    Example:
        ```python
        resolver = CredentialResolver(dotenv_path="/app/.env")
        client_id = resolver.resolve(env_var_name="PAYMENTS_CLIENT_ID")
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for payments credentials")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Attempted either way; a broken .env never blocks explicit values.
            self._dotenv_loaded = True

    @staticmethod
    def _mask_credential(value: str | None) -> str:
        if value is None:
            return "None"
        return "***"

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a credential or setting.

        Args:
            value: Explicitly provided value. Wins over every other source.
            env_var_name: Environment variable to check.
            default: Value used when no other source provides one.
            required: Raise instead of returning None when nothing is found.
            mask_in_logs: Mask the resolved value in debug logs. Disable only
                for non-secret settings such as timeouts.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and no source provides a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = self._mask_credential(result) if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path may come from ``file_path`` or from the environment variable
        ``env_var_name``; ``~`` and ``$VAR`` are expanded. The file contents
        are stripped of surrounding whitespace.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False) or None

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content
