"""Unit tests for PostgreSQL repository helpers."""

from uuid import UUID, uuid4

from sqlalchemy.dialects import postgresql

from inkwell.domain.value import PostId, UserId
from inkwell.persistence.repository.like import pair_lock_key
from inkwell.persistence.repository.post import escape_like, search_statement


class TestEscapeLike:
    """Tests for escape_like."""

    def test_wildcards_are_escaped(self):
        assert escape_like("50%_off") == "50\\%\\_off"

    def test_backslash_is_escaped_first(self):
        assert escape_like("a\\b%") == "a\\\\b\\%"

    def test_plain_text_is_unchanged(self):
        assert escape_like("python") == "python"


class TestPairLockKey:
    """Tests for pair_lock_key."""

    def test_key_is_stable_and_fits_bigint(self):
        post_id = PostId(UUID("00000000-0000-0000-0000-000000000001"))
        user_id = UserId(UUID("00000000-0000-0000-0000-000000000002"))

        key = pair_lock_key(post_id, user_id)

        assert key == pair_lock_key(post_id, user_id)
        assert -(2**63) <= key < 2**63

    def test_different_pairs_get_different_keys(self):
        post_id = PostId(uuid4())

        assert pair_lock_key(post_id, UserId(uuid4())) != pair_lock_key(
            post_id, UserId(uuid4())
        )

    def test_order_of_ids_matters(self):
        a, b = uuid4(), uuid4()

        assert pair_lock_key(PostId(a), UserId(b)) != pair_lock_key(PostId(b), UserId(a))


class TestSearchStatement:
    """Tests for the compiled search query."""

    def compile(self, query: str) -> str:
        return str(search_statement(query, limit=20).compile(dialect=postgresql.dialect()))

    def test_tags_are_matched_one_at_a_time(self):
        sql = self.compile("python")

        assert "EXISTS" in sql
        assert "unnest(posts.tags)" in sql
        assert "array_to_string" not in sql

    def test_tag_subquery_is_correlated_to_outer_posts(self):
        sql = self.compile("python")

        assert sql.count("FROM posts") == 1

    def test_matching_is_case_insensitive_and_escaped(self):
        sql = self.compile("50%")

        assert sql.count("ILIKE") == 3
        assert "ESCAPE" in sql
