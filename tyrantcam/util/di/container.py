"""Container assembly.

create_container() builds the production graph. Tests pass the components
they want replaced; the stand-in providers register themselves by subclassing
the component base, so they only exist once the test package is imported.
"""

from typing import Iterable, Type

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from tyrantcam.util.di.application import ProdApplicationProvider
from tyrantcam.util.di.base import Component, ProviderBase
from tyrantcam.util.di.core import ProdConfigProvider
from tyrantcam.util.di.domain import ProdDomainProvider
from tyrantcam.util.di.infrastructure import PersistenceProvider
from tyrantcam.util.error import DependencyInjectionError

# Settings and rate limiter, services, use cases, storage
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def swappable_components() -> set[Component]:
    """Names of the components that have alternative implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a PROVIDERS entry.

    Args:
        base: Entry from PROVIDERS
        use_mock: Select the stand-in implementation of a swappable component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If no implementation of the requested kind exists
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    name = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {name}")


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the DI container.

    Settings are loaded from the environment when first resolved.

    Args:
        mocked: Components to replace with their stand-in implementations

    Returns:
        Container with FastapiProvider so routes can resolve the Request

    Raises:
        DependencyInjectionError: If a mocked component is unknown
    """
    mocked = set(mocked)
    unknown = mocked - swappable_components()
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app; it is closed on app shutdown."""
    setup_dishka(container, app)
