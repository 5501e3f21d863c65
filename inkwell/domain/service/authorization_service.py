"""Authorization domain service."""

import logfire

from inkwell.domain.model.post import Post
from inkwell.domain.value import identities_equal


class AuthorizationService:
    """Decides whether a user may change a post.

    Fails closed: a missing post, a post without an author, a malformed
    identity or any error while comparing all deny.
    """

    def can_mutate(self, post: Post | None, requesting_user_id: object) -> bool:
        """Check whether the requesting user is the post's author.

        The author may be stored as a UUID or a raw string and the request
        id may arrive in either form; both compare equal when they name the
        same user.

        Args:
            post: Post to change
            requesting_user_id: ID of the user asking

        Returns:
            True only if the user is the post's author
        """
        if post is None or not post.author_id:
            return False
        if requesting_user_id is None:
            return False

        try:
            allowed = identities_equal(post.author_id, requesting_user_id)
        except Exception as e:
            logfire.warn(
                "Authorization check failed",
                post_id=str(post.id),
                error=str(e),
            )
            return False

        if not allowed:
            logfire.info(
                "Mutation denied",
                post_id=str(post.id),
                user_id=str(requesting_user_id),
            )
        return allowed
