"""Abstract base class for access token sources."""

from abc import ABC, abstractmethod
from typing import Optional


class TokenSource(ABC):
    """One tier of the access token resolution chain."""

    #: Short label used in logs and status output
    name: str = "unknown"

    @abstractmethod
    def try_load(self) -> Optional[str]:
        """Look up the access token in this tier.

        Returns:
            The raw token if this tier holds one, None to fall through
            to the next tier

        Raises:
            Any error that should stop resolution instead of falling through
        """
        pass
