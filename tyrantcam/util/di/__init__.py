"""Dependency injection for the TyrantCam API."""

from tyrantcam.util.di.base import Component, ProviderBase
from tyrantcam.util.di.container import (
    PROVIDERS,
    create_container,
    get_provider,
    setup_di,
    swappable_components,
)

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "create_container",
    "get_provider",
    "setup_di",
    "swappable_components",
]
