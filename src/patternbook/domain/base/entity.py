"""Base domain models - foundation for the pedagogical data objects."""
from abc import ABC

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Base class for mutable data objects used by the demonstrations."""
    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        arbitrary_types_allowed=True
    )


class AbstractEntity(Entity, ABC):
    """Base class for data objects that also declare abstract behaviour."""
