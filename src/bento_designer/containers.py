"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from bento_designer.adapters.blob_store import item_repository, placement_repository
from bento_designer.adapters.supabase_blob_store import SupabaseBlobStore
from bento_designer.config import Settings
from bento_designer.domain.factories import create_box
from bento_designer.domain.geometry import Size
from bento_designer.domain.models import Box
from bento_designer.services.bento_state import PlacementStateService
from bento_designer.services.catalog import CatalogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    box: Box
    catalog_service: CatalogService
    placement_state_service: PlacementStateService


def build_box(settings: Settings) -> Box:
    """Create the box layout described by the settings."""
    return create_box(
        settings.box_type,
        Size(width=settings.box_width, height=settings.box_height),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    store = SupabaseBlobStore(supabase_client, table=resolved_settings.storage_table)
    catalog_service = CatalogService(item_repository(store))
    placement_state_service = PlacementStateService(placement_repository(store))

    return AppContainer(
        settings=resolved_settings,
        box=build_box(resolved_settings),
        catalog_service=catalog_service,
        placement_state_service=placement_state_service,
    )
