"""Access token storage tiers."""

from .base import TokenSource
from .env import EnvTokenSource
from .file import FallbackTokenFile
from .native import NativeCredentialStore, NativeTokenSource

__all__ = [
    "TokenSource",
    "EnvTokenSource",
    "FallbackTokenFile",
    "NativeCredentialStore",
    "NativeTokenSource",
]
