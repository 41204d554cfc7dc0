"""Integration tests run only against a real PostgreSQL."""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("DATABASE__URL"):
        return
    skip = pytest.mark.skip(reason="set DATABASE__URL to a migrated PostgreSQL")
    for item in items:
        if "tests/integration/" in item.nodeid:
            item.add_marker(skip)
