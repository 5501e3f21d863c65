"""Requesting identity, resolved from gateway headers."""

from fastapi import Header, HTTPException, status

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)


def identity_headers(
    x_user_id: str | None = Header(default=None),
    x_user_name: str | None = Header(default=None),
    x_user_email: str | None = Header(default=None),
) -> GetCurrentUserRequest:
    """Collect the identity headers set by the upstream auth gateway."""
    return GetCurrentUserRequest(
        user_id=x_user_id, name=x_user_name, email=x_user_email
    )


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    headers: GetCurrentUserRequest,
    action: str,
) -> GetCurrentUserResponse:
    """Resolve the current user or fail with 401.

    Args:
        get_current_user_use_case: Get current user use case
        headers: Identity headers
        action: What the caller is trying to do, for the error message

    Returns:
        The signed-in user

    Raises:
        HTTPException: If the request is anonymous
    """
    user = await get_current_user_use_case.execute(headers)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user
