# --------------------------------------------------
# conftest.py (Test bootstrap)
# --------------------------------------------------
# This file isolates every test from the developer's
# shell environment.
#
# Responsibilities:
#   - Remove every variable config.load() reads, so each
#     test starts from the documented defaults
#   - Offer a helper fixture to set variables for one test
#
# Note:
#   monkeypatch restores the original environment after
#   each test, so no manual cleanup is needed.
# --------------------------------------------------

import pytest

# Every variable consumed by config.load()
ENV_KEYS = (
    "SERVER_HOST",
    "SERVER_PORT",
    "DB_PRIMARY_HOST",
    "DB_PRIMARY_PORT",
    "DB_NAME",
    "DB_USER",
    "DB_PASSWORD",
    "DB_SSLMODE",
    "DB_REPLICA1_HOST",
    "DB_REPLICA1_PORT",
    "DB_REPLICA2_HOST",
    "DB_REPLICA2_PORT",
    "DB_POOL_MIN_CONNECTIONS",
    "DB_POOL_MAX_CONNECTIONS",
    "DB_POOL_MAX_IDLE_TIME",
    "DB_POOL_MAX_LIFETIME",
    "LOG_LEVEL",
    "TEST_DURATION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Clear all configuration variables before each test.
    """
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def set_env(clean_env):
    """
    Helper: set several environment variables at once.
    """
    def _set(**values):
        for key, value in values.items():
            clean_env.setenv(key, value)

    return _set
