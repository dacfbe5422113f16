"""Exceptions raised by the access token store."""


class TokenStoreError(Exception):
    """Base class for access token store errors."""


class InvalidTokenError(TokenStoreError):
    """Token does not match the access token format."""

    def __init__(self, message: str = "Invalid access token format. Must be like `sbp_0102...1920`."):
        super().__init__(message)


class MissingTokenError(TokenStoreError):
    """No tier yielded an access token."""

    def __init__(
        self,
        message: str = (
            "Access token not provided. Supply an access token by running "
            "supabase login or setting the SUPABASE_ACCESS_TOKEN environment variable."
        ),
    ):
        super().__init__(message)


class NotLoggedInError(TokenStoreError):
    """Delete found no token in either the fallback file or the native store."""

    def __init__(self, message: str = "You were not logged in, nothing to do."):
        super().__init__(message)


class NativeStoreError(TokenStoreError):
    """Base class for conditions reported by the native credential store."""


class CredentialsNotSupportedError(NativeStoreError):
    """No usable native credential store on this host."""

    def __init__(self, message: str = "Native credential store is not supported on this platform."):
        super().__init__(message)


class CredentialNotFoundError(NativeStoreError):
    """Native credential store has no entry for the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No credential stored for key: {key}")
