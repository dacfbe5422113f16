"""Access token format check."""

import re

ACCESS_TOKEN_PATTERN = re.compile(r"^sbp_[a-f0-9]{40}$")


def is_valid_access_token(token: str) -> bool:
    """Return True if token is ``sbp_`` followed by 40 lowercase hex characters."""
    # fullmatch so a trailing newline does not slip past the `$` anchor
    return ACCESS_TOKEN_PATTERN.fullmatch(token) is not None
