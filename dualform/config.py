"""Configuration management using environment variables.

This module provides centralized configuration management using python-decouple
to read from .env files and environment variables. Database targets are
required and have no defaults; loading them yields a ``ConfigResult`` that the
entry point checks once before the server starts.
"""

from dataclasses import dataclass
from typing import Optional

from decouple import UndefinedValueError, config

from dualform.exceptions import ConfigurationError

PRIMARY_PREFIX = "RDS_DB"
SECONDARY_PREFIX = "LOCAL_DB"

# Suffixes read for every database target, in the order they are checked.
TARGET_KEYS = ("HOST", "PORT", "USER", "PASSWORD", "NAME", "SSLMODE")


class Config:
    """Application configuration."""

    # Environment
    DEBUG: bool = config('DEBUG', default=False, cast=bool)

    # Logging
    LOG_LEVEL: str = config('LOG_LEVEL', default='INFO')
    LOG_FILE: str = config('LOG_FILE', default='')

    # Static form page served on GET /; empty means the bundled static/index.html
    FORM_PAGE: str = config('FORM_PAGE', default='')


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters for one database target."""

    prefix: str
    host: str
    port: int
    user: str
    password: str
    name: str
    sslmode: str

    def __repr__(self) -> str:
        return (
            f"<DatabaseSettings prefix={self.prefix} host={self.host} "
            f"port={self.port} user={self.user} name={self.name} sslmode={self.sslmode}>"
        )


@dataclass(frozen=True)
class DatabaseTargets:
    """Both database targets."""

    primary: DatabaseSettings
    secondary: DatabaseSettings


@dataclass(frozen=True)
class ConfigResult:
    """Outcome of loading settings: either ``targets`` or ``error`` is set."""

    targets: Optional[DatabaseTargets] = None
    error: Optional[ConfigurationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> DatabaseTargets:
        """Return the targets or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.targets


def require(key: str) -> str:
    """Read a required value; absent and empty values are both missing."""
    try:
        value = config(key)
    except UndefinedValueError:
        raise ConfigurationError(key, f"Missing environment variable: {key}")
    if value == "":
        raise ConfigurationError(key, f"Missing environment variable: {key}")
    return value


def load_database_settings(prefix: str) -> DatabaseSettings:
    """Read the six ``{prefix}_*`` keys for one database target.

    Raises:
        ConfigurationError: If a key is missing or the port is not an integer
    """
    values = {suffix: require(f"{prefix}_{suffix}") for suffix in TARGET_KEYS}

    try:
        port = int(values["PORT"])
    except ValueError:
        raise ConfigurationError(
            f"{prefix}_PORT",
            f"Invalid environment variable: {prefix}_PORT={values['PORT']!r} is not a port number",
        )

    return DatabaseSettings(
        prefix=prefix,
        host=values["HOST"],
        port=port,
        user=values["USER"],
        password=values["PASSWORD"],
        name=values["NAME"],
        sslmode=values["SSLMODE"],
    )


def load_settings() -> ConfigResult:
    """Load both database targets from the environment.

    Returns:
        ConfigResult holding the targets, or the first configuration error
    """
    try:
        primary = load_database_settings(PRIMARY_PREFIX)
        secondary = load_database_settings(SECONDARY_PREFIX)
    except ConfigurationError as e:
        return ConfigResult(error=e)
    return ConfigResult(targets=DatabaseTargets(primary=primary, secondary=secondary))


# Global config instance
settings = Config()
