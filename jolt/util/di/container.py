"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from jolt.util.di import PROVIDERS, Component, get_provider


def build_providers(mocked: Collection[Component] = ()) -> list[Provider]:
    """Instantiate one provider per ``PROVIDERS`` entry.

    Args:
        mocked: Components to take from their mock implementation

    Returns:
        Provider instances ready for ``make_async_container``
    """
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings come from the environment (see ``jolt.config.Settings``).
    """
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container; dishka opens a REQUEST scope per HTTP request."""
    setup_dishka(container=container, app=app)
