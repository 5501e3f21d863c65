"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from inkwell.domain.value import Identity

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_identity(name: str = "Ada Lovelace", email: str | None = None) -> Identity:
    """Build a signed-in identity with a fresh UUID."""
    return Identity(
        id=str(uuid4()),
        name=name,
        email=email or f"{name.split()[0].lower()}@example.com",
    )


@pytest.fixture
def author() -> Identity:
    """A signed-in post author."""
    return make_identity("Ada Lovelace")


@pytest.fixture
def reader() -> Identity:
    """A signed-in reader who didn't write the post."""
    return make_identity("Grace Hopper")
