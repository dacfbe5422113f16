"""Access token store: resolve, save and delete the CLI access token."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..config import Config, get_config
from ..errors import (
    CredentialNotFoundError,
    CredentialsNotSupportedError,
    InvalidTokenError,
    MissingTokenError,
    NotLoggedInError,
)
from ..storage.base import TokenSource
from ..storage.env import EnvTokenSource
from ..storage.file import FallbackTokenFile
from ..storage.native import NativeCredentialStore, NativeTokenSource
from .validation import is_valid_access_token

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "access-token"


class AccessTokenStore:
    """Loads and persists the access token across three tiers.

    Resolution order is the environment variable, then the native credential
    store, then the fallback file under the home directory. Nothing is cached
    between calls.

    Example:
        ```python
        from supabase_token import AccessTokenStore

        store = AccessTokenStore()
        store.save("sbp_" + "0" * 40)
        token = store.load()
        store.delete()
        ```
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        native_store: Optional[NativeCredentialStore] = None,
    ):
        """Initialize access token store.

        Args:
            config: Store configuration (defaults to the global config)
            native_store: Native credential store (defaults to the keyring
                backend selected for this host)
        """
        self.config = config or get_config()
        self.native_store = native_store or NativeCredentialStore(self.config.keyring_service)
        self.fallback_file = FallbackTokenFile(self.get_path)

    @property
    def sources(self) -> List[TokenSource]:
        """Token sources in resolution order."""
        return [
            EnvTokenSource(self.config.token_env_var),
            NativeTokenSource(self.native_store, ACCESS_TOKEN_KEY),
            self.fallback_file,
        ]

    def get_path(self) -> Path:
        """Path of the fallback token file.

        Raises:
            RuntimeError: The home directory cannot be determined
        """
        return Path.home() / self.config.config_dir_name / ACCESS_TOKEN_KEY

    def resolve(self) -> Tuple[str, str]:
        """Resolve and validate the access token.

        Only the value from the first tier that yields one is validated; an
        invalid value does not fall through to later tiers.

        Returns:
            Tuple of (token, name of the tier it came from)

        Raises:
            MissingTokenError: No tier holds a token
            InvalidTokenError: The resolved token has the wrong format
        """
        for source in self.sources:
            token = source.try_load()
            if token is not None:
                logger.debug("Access token resolved from %s", source.name)
                break
        else:
            raise MissingTokenError()

        if not is_valid_access_token(token):
            raise InvalidTokenError()
        return token, source.name

    def load(self) -> str:
        """Load the access token.

        Raises:
            MissingTokenError: No tier holds a token
            InvalidTokenError: The resolved token has the wrong format
            OSError: The fallback file exists but cannot be read
        """
        token, _ = self.resolve()
        return token

    def save(self, token: str) -> None:
        """Persist the access token.

        Tries the native credential store first and falls back to the token
        file if that fails.

        Raises:
            InvalidTokenError: Token has the wrong format; nothing is written
            OSError: Writing the fallback file failed
        """
        if not is_valid_access_token(token):
            raise InvalidTokenError()

        try:
            self.native_store.set(ACCESS_TOKEN_KEY, token)
            logger.debug("Saved access token to native credential store")
            return
        except Exception as e:
            logger.debug("Native credential store unavailable, using fallback file: %s", e)

        self.fallback_file.write(token)

    def delete(self) -> None:
        """Delete the access token from the fallback file and native store.

        Raises:
            NotLoggedInError: Neither tier held a token
            OSError: Removing the fallback file failed for a reason other than
                it being absent
        """
        # Always remove the fallback file to clean up after older CLI versions
        try:
            self.fallback_file.remove()
        except FileNotFoundError:
            pass
        else:
            # Normally only one tier holds the token, but clear both
            try:
                self.native_store.delete(ACCESS_TOKEN_KEY)
            except Exception as e:
                logger.debug("Ignoring native credential store delete error: %s", e)
            return

        try:
            self.native_store.delete(ACCESS_TOKEN_KEY)
        except (CredentialsNotSupportedError, CredentialNotFoundError) as e:
            raise NotLoggedInError() from e
