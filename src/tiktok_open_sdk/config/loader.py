"""Reading TIKTOK_* variables into a Config.

Every variable goes through its EnvVarSpec: the raw string is coerced to
the declared type, then checked by its validator, if any. A failure names
the variable and the offending value.
"""

import os
from collections.abc import Callable
from typing import Any

from dotenv import find_dotenv, load_dotenv

from ..exceptions import ConfigurationError
from ..http_client import HttpClientConfig
from .schema import ConfigSchema, EnvVarSpec
from .settings import Config, UserAuthConfig


class ConfigError(ConfigurationError):
    """A TIKTOK_* variable could not be used.

    Attributes:
        env_var: Name of the offending variable
        value: Its raw string value
        message: What went wrong
    """

    def __init__(self, env_var: str, value: str, message: str) -> None:
        self.env_var = env_var
        self.value = value
        self.message = message
        super().__init__(f"{env_var}={value}: {message}")


def _split_csv(value: str) -> tuple[str, ...]:
    """Split a comma-separated value, dropping blank entries."""
    return tuple(item.strip() for item in value.split(",") if item.strip())


_COERCERS: dict[type, Callable[[str], Any]] = {
    str: str,
    float: float,
    tuple: _split_csv,
}


def load_env_var(spec: EnvVarSpec) -> Any:
    """Read one variable, returning ``spec.default`` when it is unset.

    Raises:
        ConfigError: If the value cannot be coerced or fails the validator
    """
    raw = os.environ.get(spec.name)
    if raw is None:
        return spec.default

    coerce = spec.coerce or _COERCERS[spec.type_hint]
    try:
        value = coerce(raw)
    except (TypeError, ValueError) as e:
        message = f"Cannot convert to {spec.type_hint.__name__}: {e}"
        raise ConfigError(spec.name, raw, message) from e

    if spec.validator is not None and not spec.validator(value):
        raise ConfigError(spec.name, raw, f"Rejected {spec.type_hint.__name__} value")

    return value


def load_dotenv_file(dotenv_path: str | None = None) -> None:
    """Load a .env file without overriding variables already set.

    Without a path, the file is searched from the current directory upwards.
    """
    load_dotenv(dotenv_path=dotenv_path or find_dotenv(usecwd=True))


def load_config_from_env(dotenv_path: str | None = None) -> Config:
    """Build a Config from the environment.

    Args:
        dotenv_path: Optional .env file; defaults to searching from the
            current directory

    Raises:
        ConfigError: If any variable fails coercion or validation
    """
    load_dotenv_file(dotenv_path)

    schema = ConfigSchema
    return Config(
        client_key=load_env_var(schema.CLIENT_KEY),
        client_secret=load_env_var(schema.CLIENT_SECRET),
        user_info_url=load_env_var(schema.USER_INFO_URL),
        creator_info_query_url=load_env_var(schema.CREATOR_INFO_QUERY_URL),
        user_auth=UserAuthConfig(
            auth_url=load_env_var(schema.AUTH_URL),
            token_url=load_env_var(schema.TOKEN_URL),
            revoke_token_url=load_env_var(schema.REVOKE_TOKEN_URL),
            scopes=list(load_env_var(schema.SCOPES)),
            redirect_uri=load_env_var(schema.REDIRECT_URI),
        ),
        http=HttpClientConfig(
            read_timeout=load_env_var(schema.READ_TIMEOUT),
            open_timeout=load_env_var(schema.OPEN_TIMEOUT),
        ),
    )


def validate_all() -> list[ConfigError]:
    """Check every declared variable, collecting all failures instead of stopping at one."""
    errors: list[ConfigError] = []
    for spec in ConfigSchema.all_specs().values():
        try:
            load_env_var(spec)
        except ConfigError as e:
            errors.append(e)
    return errors
