"""Provider base class and component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for an in-memory version
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider with the metadata the container builders select on.

    A provider class with subclasses is a component slot: one subclass is
    the production implementation and one sets ``__is_mock__``. A provider
    without subclasses is always used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
