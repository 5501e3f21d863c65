"""Unit tests for identity parsing and comparison."""

from uuid import UUID, uuid4

from inkwell.domain.value import (
    ANONYMOUS_AUTHOR,
    identities_equal,
    normalize_author_ref,
    parse_id,
)


class Unprintable:
    """Object whose string conversion fails."""

    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class TestParseId:
    """Tests for parse_id."""

    def test_uuid_passes_through(self):
        value = uuid4()
        assert parse_id(value) is value

    def test_string_is_parsed(self):
        value = uuid4()
        assert parse_id(str(value)) == value

    def test_surrounding_whitespace_is_ignored(self):
        value = uuid4()
        assert parse_id(f"  {value}\n") == value

    def test_malformed_string_is_none(self):
        assert parse_id("not-a-uuid") is None
        assert parse_id("") is None

    def test_other_types_are_none(self):
        assert parse_id(None) is None
        assert parse_id(42) is None


class TestIdentitiesEqual:
    """Tests for identities_equal."""

    def test_uuid_and_its_string_form_are_equal(self):
        """Same user given as a UUID and as a string should compare equal."""
        user_id = uuid4()
        assert identities_equal(user_id, str(user_id))
        assert identities_equal(str(user_id), user_id)

    def test_uppercase_string_matches_through_parse(self):
        """String comparison fails but the parsed UUIDs match."""
        user_id = uuid4()
        assert identities_equal(user_id, str(user_id).upper())

    def test_different_users_are_not_equal(self):
        assert not identities_equal(uuid4(), str(uuid4()))

    def test_raw_strings_compare_by_value(self):
        assert identities_equal(ANONYMOUS_AUTHOR, "anonymous")

    def test_malformed_side_is_not_equal(self):
        assert not identities_equal(uuid4(), "garbage")

    def test_none_is_never_equal(self):
        assert not identities_equal(None, None)
        assert not identities_equal(uuid4(), None)

    def test_failing_conversion_is_not_equal(self):
        """Errors while comparing deny rather than raise."""
        assert not identities_equal(Unprintable(), uuid4())


class TestNormalizeAuthorRef:
    """Tests for normalize_author_ref."""

    def test_well_formed_string_becomes_uuid(self):
        user_id = uuid4()
        result = normalize_author_ref(str(user_id))
        assert isinstance(result, UUID)
        assert result == user_id

    def test_malformed_string_is_kept_raw(self):
        assert normalize_author_ref(" legacy-user ") == "legacy-user"

    def test_missing_or_blank_becomes_anonymous(self):
        assert normalize_author_ref(None) == ANONYMOUS_AUTHOR
        assert normalize_author_ref("   ") == ANONYMOUS_AUTHOR
