"""In-memory persistence for test containers."""

from dishka import Scope, provide

from inkwell.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
)
from inkwell.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryPostRepository,
)
from inkwell.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Repositories that live as long as the container.

    Each test builds its own container, so data never leaks between tests
    but does survive across the requests of one API test.
    """

    __is_mock__ = True

    posts = provide(InMemoryPostRepository, scope=Scope.APP, provides=PostRepository)
    comments = provide(
        InMemoryCommentRepository, scope=Scope.APP, provides=CommentRepository
    )
    likes = provide(InMemoryLikeRepository, scope=Scope.APP, provides=LikeRepository)
