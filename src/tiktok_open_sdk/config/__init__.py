"""Configuration for the TikTok Open SDK."""

from .loader import (
    ConfigError,
    load_config_from_env,
    load_dotenv_file,
    load_env_var,
    validate_all,
)
from .schema import ConfigSchema, EnvVarSpec
from .settings import Config, UserAuthConfig

__all__ = [
    "Config",
    "UserAuthConfig",
    "ConfigSchema",
    "EnvVarSpec",
    "ConfigError",
    "load_env_var",
    "load_config_from_env",
    "load_dotenv_file",
    "validate_all",
]
