"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from inkwell.domain.value.common import ValueObject


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"


class LikeOutcome(str, Enum):
    """Outcome of a like toggle."""

    LIKED = "liked"
    UNLIKED = "unliked"
    POST_NOT_FOUND = "post_not_found"
    FAILED = "failed"


class Identity(ValueObject):
    """Requesting identity resolved by the caller.

    The core only ever reads the id, name and email of the user making
    the request. Credentials never reach the core.
    """

    id: str
    name: str | None = None
    email: str | None = None

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Validate id is not blank."""
        if not v.strip():
            raise ValueError("Identity id must not be blank")
        return v.strip()


class LikeToggleResult(ValueObject):
    """Result of toggling a like.

    A failed toggle is reported through ``outcome`` rather than as a zero
    count, so callers can tell "nobody likes this" apart from "the toggle
    did not happen".
    """

    outcome: LikeOutcome
    liked: bool = False
    likes_count: int = 0

    @property
    def ok(self) -> bool:
        """Whether the toggle was applied."""
        return self.outcome in (LikeOutcome.LIKED, LikeOutcome.UNLIKED)
