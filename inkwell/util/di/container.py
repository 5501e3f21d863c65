"""Production container and FastAPI integration."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from inkwell.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container used by the running service.

    Returns:
        Container with PostgreSQL persistence and request-scoped FastAPI context
    """
    providers = [get_provider(slot)() for slot in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Resolve ``FromDishka`` route parameters from ``container``."""
    setup_dishka(container, app)
