"""Test configuration and fixtures."""

import os

# Must be set before any Settings() is built. Cheap argon2 parameters keep
# the suite fast; production defaults are exercised in test_config.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("HASHING__TIME_COST", "1")
os.environ.setdefault("HASHING__MEMORY_COST", "1024")
os.environ.setdefault("HASHING__PARALLELISM", "1")

import logfire  # noqa: E402
import pytest  # noqa: E402

from jolt.config import HashingSettings  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def fast_hashing_settings() -> HashingSettings:
    """Argon2 parameters for tests that build services by hand."""
    return HashingSettings(time_cost=1, memory_cost=1024, parallelism=1)
