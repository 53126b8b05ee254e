"""Declarative schema for environment variable configuration.

Each TIKTOK_* variable the SDK understands is declared once here with
its default, type and description. The loader coerces raw strings
according to these specs.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..constants import HttpDefaults, OpenApiUrls
from ..log import VALID_LEVELS


def _log_level(raw: str) -> str:
    # First word only, so trailing .env comments are tolerated
    words = raw.split()
    return words[0].upper() if words else ""


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "TIKTOK_CLIENT_KEY")
        default: Default value if env var not set
        type_hint: Target type (str, float or tuple)
        description: Human-readable description for docs
        validator: Optional custom validation function
        coerce: Optional function to convert string to target type
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None
    coerce: Callable[[str], Any] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    # === Credentials ===

    CLIENT_KEY = EnvVarSpec(
        name="TIKTOK_CLIENT_KEY",
        default=None,
        type_hint=str,
        description="Client key issued by the TikTok developer portal",
    )

    CLIENT_SECRET = EnvVarSpec(
        name="TIKTOK_CLIENT_SECRET",
        default=None,
        type_hint=str,
        description="Client secret issued by the TikTok developer portal",
    )

    # === Endpoints ===

    USER_INFO_URL = EnvVarSpec(
        name="TIKTOK_USER_INFO_URL",
        default=OpenApiUrls.USER_INFO_URL,
        type_hint=str,
        description="User info endpoint",
    )

    CREATOR_INFO_QUERY_URL = EnvVarSpec(
        name="TIKTOK_CREATOR_INFO_QUERY_URL",
        default=OpenApiUrls.CREATOR_INFO_QUERY_URL,
        type_hint=str,
        description="Creator info query endpoint",
    )

    AUTH_URL = EnvVarSpec(
        name="TIKTOK_AUTH_URL",
        default=OpenApiUrls.AUTH_URL,
        type_hint=str,
        description="OAuth authorization endpoint",
    )

    TOKEN_URL = EnvVarSpec(
        name="TIKTOK_TOKEN_URL",
        default=OpenApiUrls.TOKEN_URL,
        type_hint=str,
        description="OAuth token endpoint",
    )

    REVOKE_TOKEN_URL = EnvVarSpec(
        name="TIKTOK_REVOKE_TOKEN_URL",
        default=OpenApiUrls.REVOKE_TOKEN_URL,
        type_hint=str,
        description="OAuth token revocation endpoint",
    )

    # === Authorization ===

    SCOPES = EnvVarSpec(
        name="TIKTOK_SCOPES",
        default=(),
        type_hint=tuple,
        description="Comma-separated list of scopes to request",
    )

    REDIRECT_URI = EnvVarSpec(
        name="TIKTOK_REDIRECT_URI",
        default=None,
        type_hint=str,
        description="Registered OAuth redirect URI",
    )

    # === Transport ===

    READ_TIMEOUT = EnvVarSpec(
        name="TIKTOK_HTTP_READ_TIMEOUT",
        default=HttpDefaults.READ_TIMEOUT,
        type_hint=float,
        description="Seconds to wait for response data",
        validator=lambda x: x > 0,
    )

    OPEN_TIMEOUT = EnvVarSpec(
        name="TIKTOK_HTTP_OPEN_TIMEOUT",
        default=HttpDefaults.OPEN_TIMEOUT,
        type_hint=float,
        description="Seconds to wait for a connection to open",
        validator=lambda x: x > 0,
    )

    LOG_LEVEL = EnvVarSpec(
        name="TIKTOK_LOG_LEVEL",
        default="WARNING",
        type_hint=str,
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        validator=lambda x: x in VALID_LEVELS,
        coerce=_log_level,
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications.

        Returns:
            Dictionary mapping spec names to EnvVarSpec objects
        """
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }

    @classmethod
    def get_spec(cls, name: str) -> EnvVarSpec | None:
        """Get specification for a specific env var by name.

        Args:
            name: The environment variable name (e.g., "TIKTOK_SCOPES")

        Returns:
            EnvVarSpec if found, None otherwise
        """
        for spec in cls.all_specs().values():
            if spec.name == name:
                return spec
        return None
