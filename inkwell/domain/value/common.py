"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared field by field.

    Caller identities and toggle results are value objects; entities with
    their own lifecycle live in ``inkwell.domain.model``.
    """

    model_config = ConfigDict(frozen=True)
