# --------------------------------------------------
# config.py
# --------------------------------------------------
# This file loads all environment-based configuration for the service.
# It follows the 12-factor app pattern:
#   - SERVER_HOST / SERVER_PORT (listening address)
#   - DB_PRIMARY_* / DB_REPLICA{1,2}_* (database topology)
#   - DB_NAME / DB_USER / DB_PASSWORD / DB_SSLMODE (shared by all instances)
#   - DB_POOL_* (connection pool limits)
#   - LOG_LEVEL (INFO, DEBUG, etc.)
#
# The environment is read once, inside load(). Unset or empty
# variables fall back to the defaults below; integer and duration
# values that fail to parse also fall back, with a warning log.
# --------------------------------------------------

import os
import logging
from datetime import timedelta
from typing import Callable, Mapping, Optional, TypeVar

from .durations import parse_duration, parse_int
from .schemas import (
    Config,
    DatabaseConfig,
    DatabaseInstanceConfig,
    PoolConfig,
    ServerConfig,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


# --------------------------------------------------
# Defaults
# --------------------------------------------------

DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 8080

DEFAULT_DB_HOST = "localhost"
DEFAULT_DB_PRIMARY_PORT = 5432
DEFAULT_DB_REPLICA1_PORT = 5433
DEFAULT_DB_REPLICA2_PORT = 5434
DEFAULT_DB_NAME = "userdb"
DEFAULT_DB_USER = "postgres"
DEFAULT_DB_PASSWORD = "postgres"
DEFAULT_DB_SSLMODE = "disable"

DEFAULT_POOL_MIN_CONNECTIONS = 10
DEFAULT_POOL_MAX_CONNECTIONS = 100
DEFAULT_POOL_MAX_IDLE_TIME = timedelta(minutes=30)
DEFAULT_POOL_MAX_LIFETIME = timedelta(hours=1)

DEFAULT_LOG_LEVEL = "INFO"


# --------------------------------------------------
# Typed-default accessors
# --------------------------------------------------

def lookup(
    key: str,
    parser: Callable[[str], T],
    default: T,
    environ: Optional[Mapping[str, str]] = None,
) -> T:
    """
    Read `key` from the environment and convert it with `parser`.

    Returns `default` when the variable is unset, empty, or when
    `parser` raises ValueError.
    """
    if environ is None:
        environ = os.environ

    value = environ.get(key, "")
    if not value:
        return default

    try:
        return parser(value)
    except ValueError:
        logger.warning({
            "msg": "invalid environment value, using default",
            "key": key,
            "value": value,
            "default": str(default),
        })
        return default


def get_env(key: str, default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    return lookup(key, str, default, environ)


def get_env_as_int(key: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    return lookup(key, parse_int, default, environ)


def get_env_as_duration(
    key: str,
    default: timedelta,
    environ: Optional[Mapping[str, str]] = None,
) -> timedelta:
    return lookup(key, parse_duration, default, environ)


# --------------------------------------------------
# Loader
# --------------------------------------------------

def load(environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build the full Config from environment variables.

    Args:
        environ: mapping to read instead of os.environ (tests, embedding).

    Never raises: malformed values are replaced by their defaults.
    """
    # Single snapshot so the tree is consistent even if the env changes mid-load
    env = dict(os.environ if environ is None else environ)

    # Shared by the primary and both replicas
    database = get_env("DB_NAME", DEFAULT_DB_NAME, env)
    user = get_env("DB_USER", DEFAULT_DB_USER, env)
    password = get_env("DB_PASSWORD", DEFAULT_DB_PASSWORD, env)
    ssl_mode = get_env("DB_SSLMODE", DEFAULT_DB_SSLMODE, env)

    def instance(prefix: str, default_port: int) -> DatabaseInstanceConfig:
        return DatabaseInstanceConfig(
            host=get_env(f"{prefix}_HOST", DEFAULT_DB_HOST, env),
            port=get_env_as_int(f"{prefix}_PORT", default_port, env),
            database=database,
            user=user,
            password=password,
            ssl_mode=ssl_mode,
        )

    return Config(
        server=ServerConfig(
            host=get_env("SERVER_HOST", DEFAULT_SERVER_HOST, env),
            port=get_env_as_int("SERVER_PORT", DEFAULT_SERVER_PORT, env),
        ),
        database=DatabaseConfig(
            primary=instance("DB_PRIMARY", DEFAULT_DB_PRIMARY_PORT),
            replicas=(
                instance("DB_REPLICA1", DEFAULT_DB_REPLICA1_PORT),
                instance("DB_REPLICA2", DEFAULT_DB_REPLICA2_PORT),
            ),
            pool=PoolConfig(
                min_connections=get_env_as_int(
                    "DB_POOL_MIN_CONNECTIONS", DEFAULT_POOL_MIN_CONNECTIONS, env
                ),
                max_connections=get_env_as_int(
                    "DB_POOL_MAX_CONNECTIONS", DEFAULT_POOL_MAX_CONNECTIONS, env
                ),
                max_idle_time=get_env_as_duration(
                    "DB_POOL_MAX_IDLE_TIME", DEFAULT_POOL_MAX_IDLE_TIME, env
                ),
                max_lifetime=get_env_as_duration(
                    "DB_POOL_MAX_LIFETIME", DEFAULT_POOL_MAX_LIFETIME, env
                ),
            ),
        ),
        log_level=get_env("LOG_LEVEL", DEFAULT_LOG_LEVEL, env),
    )


def dsn(instance: DatabaseInstanceConfig) -> str:
    """
    PostgreSQL connection string for one database instance.
    """
    return instance.dsn()
