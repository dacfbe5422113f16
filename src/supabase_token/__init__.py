"""Supabase Token: access token storage for the Supabase command-line tool.

Public API:
    - AccessTokenStore: Load, save and delete the access token
    - is_valid_access_token: Access token format check
    - NativeCredentialStore: keyring-backed native credential store
    - TokenSource: Abstract resolution tier interface
    - EnvTokenSource, NativeTokenSource, FallbackTokenFile: Resolution tiers
    - InvalidTokenError, MissingTokenError, NotLoggedInError: Store errors
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("supabase-token")
except PackageNotFoundError:
    # Package not installed, use development version
    __version__ = "0.0.0.dev"

# Core store
from .core import ACCESS_TOKEN_KEY, ACCESS_TOKEN_PATTERN, AccessTokenStore, is_valid_access_token

# Storage tiers
from .storage import (
    EnvTokenSource,
    FallbackTokenFile,
    NativeCredentialStore,
    NativeTokenSource,
    TokenSource,
)

# Errors
from .errors import (
    CredentialNotFoundError,
    CredentialsNotSupportedError,
    InvalidTokenError,
    MissingTokenError,
    NativeStoreError,
    NotLoggedInError,
    TokenStoreError,
)

# Configuration
from .config import Config, get_config

__all__ = [
    # Version
    "__version__",
    # Core store
    "AccessTokenStore",
    "ACCESS_TOKEN_KEY",
    "ACCESS_TOKEN_PATTERN",
    "is_valid_access_token",
    # Storage
    "TokenSource",
    "EnvTokenSource",
    "NativeCredentialStore",
    "NativeTokenSource",
    "FallbackTokenFile",
    # Errors
    "TokenStoreError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotLoggedInError",
    "NativeStoreError",
    "CredentialsNotSupportedError",
    "CredentialNotFoundError",
    # Configuration
    "Config",
    "get_config",
]
