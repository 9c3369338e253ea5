# --------------------------------------------------
# schemas.py
# --------------------------------------------------
# This file defines the configuration value tree
# produced by config.load():
#
#   Config
#     ├── server: ServerConfig
#     ├── database: DatabaseConfig
#     │     ├── primary: DatabaseInstanceConfig
#     │     ├── replicas: (DatabaseInstanceConfig, DatabaseInstanceConfig)
#     │     └── pool: PoolConfig
#     └── log_level
#
# All models are frozen Pydantic v2 models: built once
# at startup, compared structurally, never mutated.
#
# No range or enumeration checks are applied to values
# (negative ports, min > max connections are accepted).
# --------------------------------------------------

from datetime import timedelta
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class ServerConfig(BaseModel):
    """
    Listening address for the HTTP server.
    """

    model_config = ConfigDict(frozen=True)

    host: str
    port: int


class DatabaseInstanceConfig(BaseModel):
    """
    Connection parameters for one PostgreSQL endpoint
    (the primary or one of the replicas).
    """

    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    database: str
    user: str
    password: str
    ssl_mode: str

    def dsn(self) -> str:
        """
        Render the libpq key/value connection string.

        Values are substituted verbatim: no quoting or escaping.
        """
        return (
            f"host={self.host} port={self.port:d} user={self.user} "
            f"password={self.password} dbname={self.database} "
            f"sslmode={self.ssl_mode}"
        )


class PoolConfig(BaseModel):
    """
    Limits handed to the connection pool.
    """

    model_config = ConfigDict(frozen=True)

    min_connections: int
    max_connections: int
    max_idle_time: timedelta
    max_lifetime: timedelta


class DatabaseConfig(BaseModel):
    """
    Database topology: one primary, exactly two replicas, pool limits.
    """

    model_config = ConfigDict(frozen=True)

    primary: DatabaseInstanceConfig
    replicas: Tuple[DatabaseInstanceConfig, DatabaseInstanceConfig]
    pool: PoolConfig


class Config(BaseModel):
    """
    Top-level application configuration.
    """

    model_config = ConfigDict(frozen=True)

    server: ServerConfig
    database: DatabaseConfig

    # Logging verbosity passed to setup_logging()
    log_level: str
