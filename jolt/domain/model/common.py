"""Base model for identity-subsystem entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model.

    State changes go through ``model_copy(update=...)`` and a repository
    write; nothing mutates an entity in place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
