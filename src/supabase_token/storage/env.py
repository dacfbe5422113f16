"""Environment variable token source."""

import os
from typing import Optional

from .base import TokenSource


class EnvTokenSource(TokenSource):
    """Reads the access token from an environment variable."""

    name = "environment"

    def __init__(self, var_name: str):
        self.var_name = var_name

    def try_load(self) -> Optional[str]:
        # An empty value counts as unset
        return os.getenv(self.var_name) or None
