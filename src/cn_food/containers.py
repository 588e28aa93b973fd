"""Dependency container wiring for the application."""

from dataclasses import dataclass

from cn_food.adapters.json_food_loader import JsonFoodLoader
from cn_food.api.tools import ToolRegistry, build_registry
from cn_food.config import Settings
from cn_food.domain.foods import FoodDataset
from cn_food.services.foods import FoodQueryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dataset: FoodDataset
    query_service: FoodQueryService
    tool_registry: ToolRegistry


def build_container(
    settings: Settings | None = None, dataset: FoodDataset | None = None
) -> AppContainer:
    """Create the default dependency container.

    Loads the dataset from ``settings.data_path`` unless one is given;
    a load failure propagates and the process should not start.
    """
    resolved_settings = settings or Settings()
    if dataset is None:
        dataset = JsonFoodLoader(resolved_settings.data_path).load()
    query_service = FoodQueryService(
        dataset=dataset,
        search_limit=resolved_settings.search_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        dataset=dataset,
        query_service=query_service,
        tool_registry=build_registry(query_service),
    )
