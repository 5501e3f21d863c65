"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import ContentSettings
from inkwell.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
)
from inkwell.domain.service import (
    AuthorizationService,
    CommentService,
    LikeService,
    PostService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(
        self, post_repository: PostRepository, content_settings: ContentSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, content_settings=content_settings
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_repository=post_repository,
            post_service=post_service,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_authorization_service(self) -> AuthorizationService:
        """Provide authorization domain service."""
        return AuthorizationService()
