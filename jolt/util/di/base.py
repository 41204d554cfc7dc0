"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable infrastructure: the identity store and the provider-assertion adapter
Component = Literal["persistence", "provider"]


class ProviderBase(Provider):
    """Base for every provider listed in ``PROVIDERS``.

    A provider that is subclassed is a swappable component: its subclasses
    are the implementations, told apart by ``__is_mock__``. A provider
    without subclasses is used as it is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
