"""Dependency container wiring for the application."""

from dataclasses import dataclass

from costume_connections.adapters.mongo_costume_repository import (
    MongoCostumeRepository,
)
from costume_connections.config import Settings
from costume_connections.services.costumes import CostumeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    costume_service: CostumeService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    costume_repository = MongoCostumeRepository.create(
        uri=resolved_settings.mongo_uri,
        database_name=resolved_settings.db_name,
        collection_name=resolved_settings.costumes_collection,
    )
    return AppContainer(
        settings=resolved_settings,
        costume_service=CostumeService(costume_repository),
    )
