"""SDK-level errors."""

from shopappstore.core.errors import ShopAppstoreError


class SdkError(ShopAppstoreError):
    """Base SDK error."""


class ConfigError(SdkError):
    """Configuration resolution error."""
