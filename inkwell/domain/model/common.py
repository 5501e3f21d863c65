"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for posts, comments and likes.

    Entities are frozen; repositories hand out updated copies made with
    ``model_copy(update=...)`` instead of mutating stored instances.
    """

    model_config = ConfigDict(frozen=True)
