"""Plaintext fallback file holding the access token."""

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from .base import TokenSource

logger = logging.getLogger(__name__)

TOKEN_FILE_MODE = 0o600


class FallbackTokenFile(TokenSource):
    """Access token stored as raw text in a file under the home directory.

    The path is resolved through ``path_factory`` on every call, so changes to
    the home directory between calls are picked up.
    """

    name = "fallback file"

    def __init__(self, path_factory: Callable[[], Path]):
        self.path_factory = path_factory

    def try_load(self) -> Optional[str]:
        """Read the token file.

        Returns:
            File contents, or None if the file does not exist

        Raises:
            OSError: Any read error other than a missing file
        """
        path = self.path_factory()
        try:
            # Undecodable bytes become U+FFFD and fail format validation
            return path.read_bytes().decode("utf-8", errors="replace")
        except FileNotFoundError:
            logger.debug("No access token file at %s", path)
            return None

    def write(self, token: str) -> Path:
        """Write the token, creating the parent directory if needed.

        Existing content is overwritten and the file is left readable and
        writable by its owner only.
        """
        path = self.path_factory()
        path.parent.mkdir(parents=True, exist_ok=True)

        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, TOKEN_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(token)
        # O_CREAT mode is ignored for a file that already exists
        os.chmod(path, TOKEN_FILE_MODE)

        logger.debug("Wrote access token file at %s", path)
        return path

    def remove(self) -> None:
        """Remove the token file.

        Raises:
            FileNotFoundError: The file does not exist
            OSError: Any other removal error
        """
        self.path_factory().unlink()
