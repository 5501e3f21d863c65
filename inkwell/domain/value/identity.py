"""Identity comparison.

Author identity is persisted in structured form (a UUID) but arrives from
callers as a plain string, and posts created without a signed-in user carry
a raw sentinel string. Comparisons therefore go through two paths: the
string forms first, then the parsed UUIDs. Anything that cannot be parsed
compares unequal.
"""

from uuid import UUID

from inkwell.domain.value.identifiers import ANONYMOUS_AUTHOR, AuthorRef, UserId


def parse_id(value: object) -> UUID | None:
    """Parse a value into a UUID.

    Args:
        value: UUID, string or anything else

    Returns:
        The UUID, or None if the value is not a well-formed id
    """
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        return None
    try:
        return UUID(value.strip())
    except ValueError:
        return None


def identities_equal(a: object, b: object) -> bool:
    """Compare two identities expressed as strings or UUIDs.

    Never raises: any failure to interpret either side yields False.
    """
    if a is None or b is None:
        return False
    try:
        if str(a) == str(b):
            return True
    except Exception:
        return False

    left = parse_id(a)
    right = parse_id(b)
    if left is None or right is None:
        return False
    return left == right


def normalize_author_ref(value: object) -> AuthorRef:
    """Normalize a supplied author id into its stored form.

    Well-formed ids are kept as UserId; anything else is kept as the raw
    string, with blank values falling back to the anonymous sentinel.
    """
    parsed = parse_id(value)
    if parsed is not None:
        return UserId(parsed)
    if value is None:
        return ANONYMOUS_AUTHOR
    raw = str(value).strip()
    return raw or ANONYMOUS_AUTHOR
