"""Configuration management for the Supabase access token store."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_TOKEN_ENV_VAR = "SUPABASE_ACCESS_TOKEN"
DEFAULT_KEYRING_SERVICE = "Supabase CLI"
DEFAULT_CONFIG_DIR_NAME = ".supabase"


@dataclass
class Config:
    """Access token store configuration from environment variables."""

    # Environment tier
    token_env_var: str = DEFAULT_TOKEN_ENV_VAR

    # Native credential store
    keyring_service: str = DEFAULT_KEYRING_SERVICE

    # Fallback file, relative to the home directory
    config_dir_name: str = DEFAULT_CONFIG_DIR_NAME

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables with validation."""
        config_values = {
            "token_env_var": os.getenv("SUPABASE_ACCESS_TOKEN_ENV", DEFAULT_TOKEN_ENV_VAR),
            "keyring_service": os.getenv("SUPABASE_KEYRING_SERVICE", DEFAULT_KEYRING_SERVICE),
            "config_dir_name": os.getenv("SUPABASE_CONFIG_DIR_NAME", DEFAULT_CONFIG_DIR_NAME),
        }

        empty = [name for name, value in config_values.items() if not value.strip()]
        if empty:
            raise ValueError(
                f"Configuration values must not be empty: {', '.join(empty)}\n"
                f"Please check your .env file or environment configuration."
            )

        # The fallback directory lives directly under the home directory
        dir_name = config_values["config_dir_name"]
        if os.sep in dir_name or (os.altsep and os.altsep in dir_name) or dir_name in (".", ".."):
            raise ValueError(
                f"Invalid SUPABASE_CONFIG_DIR_NAME: {dir_name!r}\n"
                "It must be a single directory name, for example: .supabase"
            )

        return cls(**config_values)


# Global config instance (lazy loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
