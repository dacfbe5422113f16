"""OS-native credential store backed by keyring."""

import logging
from typing import Optional

import keyring
from keyring.backend import KeyringBackend
from keyring.errors import NoKeyringError, PasswordDeleteError

from ..errors import CredentialNotFoundError, CredentialsNotSupportedError
from .base import TokenSource

logger = logging.getLogger(__name__)


class NativeCredentialStore:
    """Key-value access to the platform keychain under a single service name."""

    def __init__(self, service: str, backend: Optional[KeyringBackend] = None):
        """Initialize native credential store.

        Args:
            service: Keyring service name the credentials are filed under
            backend: Keyring backend to use (defaults to the one keyring selects
                for this host)
        """
        self.service = service
        self._backend = backend

    @property
    def backend(self) -> KeyringBackend:
        if self._backend is None:
            self._backend = keyring.get_keyring()
        return self._backend

    def get(self, key: str) -> str:
        """Retrieve a credential.

        Raises:
            CredentialsNotSupportedError: No usable keyring backend
            CredentialNotFoundError: Nothing stored under key
        """
        try:
            value = self.backend.get_password(self.service, key)
        except NoKeyringError as e:
            raise CredentialsNotSupportedError() from e

        if value is None:
            raise CredentialNotFoundError(key)
        return value

    def set(self, key: str, value: str) -> None:
        """Store or overwrite a credential.

        Raises:
            CredentialsNotSupportedError: No usable keyring backend
        """
        try:
            self.backend.set_password(self.service, key, value)
        except NoKeyringError as e:
            raise CredentialsNotSupportedError() from e

    def delete(self, key: str) -> None:
        """Delete a credential.

        Raises:
            CredentialsNotSupportedError: No usable keyring backend
            CredentialNotFoundError: Nothing stored under key
        """
        try:
            self.backend.delete_password(self.service, key)
        except NoKeyringError as e:
            raise CredentialsNotSupportedError() from e
        except PasswordDeleteError as e:
            raise CredentialNotFoundError(key) from e


class NativeTokenSource(TokenSource):
    """Reads the access token from the native credential store."""

    name = "native credential store"

    def __init__(self, store: NativeCredentialStore, key: str):
        self.store = store
        self.key = key

    def try_load(self) -> Optional[str]:
        # Any failure here falls through to the next tier
        try:
            return self.store.get(self.key)
        except Exception as e:
            logger.debug("Native credential store lookup failed: %s", e)
        return None
