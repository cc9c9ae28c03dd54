"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, Response, status

from bento_designer.api.schemas import (
    BoxModel,
    DropRequest,
    ItemCreateRequest,
    ItemModel,
    PartitionModel,
    PlacedItemModel,
    PlacementOutcomeModel,
    PositionModel,
    SelectionScoreModel,
    SuggestionModel,
    SuggestionRequest,
)
from bento_designer.app_logging import configure_logging
from bento_designer.containers import AppContainer
from bento_designer.services.catalog import ItemValidationError
from bento_designer.services.layout import (
    PARTITION_NOT_FOUND,
    DropEvent,
    locate_partition,
)
from bento_designer.services.suggestions import (
    SuggestionContext,
    UnsupportedCriterionError,
    evaluate_selection,
    score,
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/box")
    async def get_box(request: Request) -> BoxModel:
        """Return the box layout in use."""
        state_container: AppContainer = request.app.state.container
        return BoxModel.from_domain(state_container.box)

    @app.post("/box/locate")
    async def locate(point: PositionModel, request: Request) -> PartitionModel | None:
        """Return the partition under a drop point, or null when outside the box."""
        state_container: AppContainer = request.app.state.container
        partition = locate_partition(state_container.box, point.to_domain())
        if partition is None:
            return None
        return PartitionModel.from_domain(partition)

    @app.get("/items")
    async def list_items(
        request: Request, category: str | None = None, color: str | None = None
    ) -> list[ItemModel]:
        """Return catalog items, optionally filtered by category and color."""
        state_container: AppContainer = request.app.state.container
        items = await state_container.catalog_service.list_items()
        return [
            ItemModel.from_domain(item)
            for item in items
            if (category is None or item.category == category)
            and (color is None or item.color == color)
        ]

    @app.post("/items", status_code=status.HTTP_201_CREATED)
    async def create_item(payload: ItemCreateRequest, request: Request) -> ItemModel:
        """Add a user item to the catalog."""
        state_container: AppContainer = request.app.state.container
        try:
            item = await state_container.catalog_service.add_user_item(
                **payload.to_fields()
            )
        except ItemValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail={"errors": exc.errors},
            ) from exc
        except Exception:
            logger.exception(
                "Failed to save user item", extra={"item_name": payload.name}
            )
            raise
        return ItemModel.from_domain(item)

    @app.delete("/items/{item_id}")
    async def delete_item(item_id: str, request: Request) -> dict[str, str]:
        """Remove a user item."""
        state_container: AppContainer = request.app.state.container
        removed = await state_container.catalog_service.remove_user_item(item_id)
        if not removed:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "ok"}

    @app.post("/suggestions")
    async def suggestions(
        payload: SuggestionRequest, request: Request
    ) -> list[SuggestionModel]:
        """Rank catalog items for the selected criterion."""
        state_container: AppContainer = request.app.state.container
        items = await state_container.catalog_service.list_items()
        if payload.item_ids is not None:
            wanted = set(payload.item_ids)
            items = [item for item in items if item.id in wanted]
        try:
            ranked = score(
                payload.criterion,
                items,
                context=SuggestionContext(season=payload.season),
                limit=payload.limit,
            )
        except UnsupportedCriterionError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return [SuggestionModel.from_domain(suggestion) for suggestion in ranked]

    @app.get("/placements")
    async def list_placements(request: Request) -> list[PlacedItemModel]:
        """Return the saved placements."""
        state_container: AppContainer = request.app.state.container
        placed_items = await state_container.placement_state_service.load()
        return [PlacedItemModel.from_domain(placed) for placed in placed_items]

    @app.get("/placements/score")
    async def placement_score(request: Request) -> SelectionScoreModel:
        """Score the items currently placed in the box as a set."""
        state_container: AppContainer = request.app.state.container
        placed_items = await state_container.placement_state_service.load()
        items = []
        for placed in placed_items:
            item = await state_container.catalog_service.find_by_id(placed.item_id)
            if item is not None:
                items.append(item)
        return SelectionScoreModel.from_domain(evaluate_selection(items))

    @app.post("/placements")
    async def drop_item(
        payload: DropRequest, request: Request, response: Response
    ) -> PlacementOutcomeModel:
        """Handle a drop event and persist the placement when it is legal."""
        state_container: AppContainer = request.app.state.container
        item = await state_container.catalog_service.find_by_id(payload.item_id)
        if item is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="item not found"
            )
        drop = DropEvent(
            item_id=payload.item_id,
            partition_id=payload.partition_id,
            position=payload.position.to_domain(),
        )
        try:
            outcome = await state_container.placement_state_service.drop(
                state_container.box, item, drop
            )
        except Exception:
            logger.exception(
                "Failed to place item", extra={"item_id": payload.item_id}
            )
            raise
        if outcome.error == PARTITION_NOT_FOUND:
            response.status_code = status.HTTP_404_NOT_FOUND
        elif not outcome.success:
            response.status_code = status.HTTP_409_CONFLICT
        else:
            response.status_code = status.HTTP_201_CREATED
        return PlacementOutcomeModel.from_domain(outcome)

    @app.delete("/placements/{placed_item_id}")
    async def remove_placement(placed_item_id: str, request: Request) -> dict[str, str]:
        """Remove a single placement."""
        state_container: AppContainer = request.app.state.container
        removed = await state_container.placement_state_service.remove(placed_item_id)
        if not removed:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "ok"}

    @app.delete("/placements")
    async def clear_placements(request: Request) -> dict[str, str]:
        """Remove every placement."""
        state_container: AppContainer = request.app.state.container
        await state_container.placement_state_service.clear()
        return {"status": "ok"}

    return app
