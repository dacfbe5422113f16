"""
Shared pytest fixtures for the supabase-token test suite.

Provides an in-memory keyring backend, an unsupported keyring backend, and a
temporary home directory so tests never touch the real keychain or the real
~/.supabase directory.
"""

from pathlib import Path

import pytest
from keyring.backend import KeyringBackend
from keyring.backends import fail
from keyring.errors import PasswordDeleteError

from supabase_token.config import Config
from supabase_token.core.token_store import AccessTokenStore
from supabase_token.storage.native import NativeCredentialStore


class MemoryKeyring(KeyringBackend):
    """Keyring backend holding passwords in a dict."""

    priority = 1

    def __init__(self):
        super().__init__()
        self.passwords = {}

    def get_password(self, service, username):
        return self.passwords.get((service, username))

    def set_password(self, service, username, password):
        self.passwords[(service, username)] = password

    def delete_password(self, service, username):
        try:
            del self.passwords[(service, username)]
        except KeyError:
            raise PasswordDeleteError("Password not found")


# ---------------------------------------------------------------------------
# Environment fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Point the home directory at a temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    return home_dir


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no access token leaks in from the real environment."""
    monkeypatch.delenv("SUPABASE_ACCESS_TOKEN", raising=False)


@pytest.fixture
def token_path(home) -> Path:
    return home / ".supabase" / "access-token"


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_keyring() -> MemoryKeyring:
    return MemoryKeyring()


@pytest.fixture
def store(home, memory_keyring) -> AccessTokenStore:
    """Store with a working native credential store."""
    config = Config()
    native = NativeCredentialStore(config.keyring_service, backend=memory_keyring)
    return AccessTokenStore(config=config, native_store=native)


@pytest.fixture
def unsupported_store(home) -> AccessTokenStore:
    """Store on a host without a native credential store."""
    config = Config()
    native = NativeCredentialStore(config.keyring_service, backend=fail.Keyring())
    return AccessTokenStore(config=config, native_store=native)
