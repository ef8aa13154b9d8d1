"""Tyrant use cases."""

from .common import TyrantListResponse, TyrantResponse
from .create_tyrant import CreateTyrantRequest, CreateTyrantUseCase
from .delete_tyrant import (
    DeleteTyrantRequest,
    DeleteTyrantResponse,
    DeleteTyrantUseCase,
)
from .get_tyrant import GetTyrantRequest, GetTyrantUseCase
from .list_all_tyrants import ListAllTyrantsRequest, ListAllTyrantsUseCase
from .list_tyrants import ListTyrantsRequest, ListTyrantsUseCase
from .set_publication import SetPublicationRequest, SetPublicationUseCase

__all__ = [
    "CreateTyrantRequest",
    "CreateTyrantUseCase",
    "DeleteTyrantRequest",
    "DeleteTyrantResponse",
    "DeleteTyrantUseCase",
    "GetTyrantRequest",
    "GetTyrantUseCase",
    "ListAllTyrantsRequest",
    "ListAllTyrantsUseCase",
    "ListTyrantsRequest",
    "ListTyrantsUseCase",
    "SetPublicationRequest",
    "SetPublicationUseCase",
    "TyrantListResponse",
    "TyrantResponse",
]
