"""Test container builder."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from inkwell.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[Component]:
    """Components that have an in-memory implementation."""
    return {
        slot.__mock_component__
        for slot in PROVIDERS
        if slot.__mock_component__ is not None
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with in-memory versions of every mockable component.

    Args:
        unmock: Components to run against their production implementation,
            e.g. ``{"persistence"}`` for tests against PostgreSQL

    Returns:
        Container that also serves FastAPI apps built with ``create_app``

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(
            slot,
            use_mock=slot.__mock_component__ is not None
            and slot.__mock_component__ not in unmock,
        )()
        for slot in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
