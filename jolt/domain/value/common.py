"""Base class for single-value identity types."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one validated primitive.

    Subclasses put their rules in a ``root`` field validator, so an
    instance that exists is a valid one. ``model_dump()`` yields the bare
    primitive, which is what the mappers write to the store.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
