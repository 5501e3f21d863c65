"""Get current user use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from inkwell.domain.value import Identity, parse_id


class GetCurrentUserRequest(BaseModel):
    """Get current user request.

    Values are the identity headers set by the upstream auth gateway.
    """

    user_id: str | None = None
    name: str | None = None
    email: str | None = None


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    name: str | None
    email: str | None

    def to_identity(self) -> Identity:
        """Convert to the domain identity."""
        return Identity(id=self.user_id, name=self.name, email=self.email)


class GetCurrentUserUseCase:
    """Use case for resolving the requesting user."""

    async def execute(
        self, request: GetCurrentUserRequest
    ) -> Optional[GetCurrentUserResponse]:
        """Execute get current user flow.

        A request without a user id, or with one that is not a UUID, is
        anonymous. In particular the literal ``"anonymous"`` never resolves
        to a user, so it can't match the author of an anonymous post.

        Args:
            request: Identity headers

        Returns:
            The signed-in user, None if the request is anonymous
        """
        if not request.user_id:
            return None

        user_id = parse_id(request.user_id)
        if user_id is None:
            logfire.warn("Ignoring malformed user id header", user_id=request.user_id)
            return None

        return GetCurrentUserResponse(
            user_id=str(user_id),
            name=(request.name or "").strip() or None,
            email=(request.email or "").strip() or None,
        )
