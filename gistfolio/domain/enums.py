"""Domain enumerations for gistfolio."""

from enum import Enum


class AccentMode(str, Enum):
    """Strategy used to pick the site accent colour"""

    HERO = "hero"
    CUSTOM = "custom"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [mode.value for mode in cls]


class AuthState(str, Enum):
    """Authentication state of the admin store"""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class ActionStatus(str, Enum):
    """Outcome of an admin store operation"""

    OK = "ok"
    NOT_AUTHENTICATED = "not_authenticated"
    AUTH_FAILED = "auth_failed"
    NOT_FOUND = "not_found"
    PRIVACY_RESTRICTED = "privacy_restricted"
    CANCELLED = "cancelled"
    FAILED = "failed"
    STALE = "stale"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [status.value for status in cls]
