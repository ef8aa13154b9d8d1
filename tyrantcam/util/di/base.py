"""Provider base class and swappable component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider class that has subclasses is a swappable component: the base
    names it via __mock_component__ and each subclass declares whether it is
    the stand-in via __is_mock__. Providers without subclasses are used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
