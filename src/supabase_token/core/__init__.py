"""Access token resolution and persistence."""

from .token_store import ACCESS_TOKEN_KEY, AccessTokenStore
from .validation import ACCESS_TOKEN_PATTERN, is_valid_access_token

__all__ = ["ACCESS_TOKEN_KEY", "ACCESS_TOKEN_PATTERN", "AccessTokenStore", "is_valid_access_token"]
