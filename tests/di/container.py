"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from jolt.util.di import Component, mockable_components
from jolt.util.di.container import build_providers


def build_test_container(
    unmock: set[Component] | None = None, for_app: bool = False
) -> AsyncContainer:
    """Build a container that mocks every swappable component by default.

    Settings are loaded from environment variables (see tests/conftest.py).

    Args:
        unmock: Components to use production implementations for
        for_app: Add the FastAPI integration provider, for containers
                 handed to ``create_app``

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - in-memory store, mock provider adapter
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})

        # API tests
        app = create_app(container=build_test_container(for_app=True))
    """
    unmock = unmock or set()
    known = mockable_components()
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = build_providers(mocked=known - unmock)
    if for_app:
        providers.append(FastapiProvider())
    return make_async_container(*providers)
