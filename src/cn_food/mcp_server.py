"""MCP stdio server exposing the food operations."""

import logging
import sys
from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from cn_food.app_logging import configure_logging
from cn_food.config import Settings
from cn_food.containers import AppContainer, build_container
from cn_food.domain.nutrients import Nutrient
from cn_food.errors import DatasetLoadError

_logger = logging.getLogger(__name__)


def create_server(container: AppContainer) -> FastMCP:
    """Register every operation of the container's registry as an MCP tool."""
    registry = container.tool_registry
    server = FastMCP(container.settings.server_name)

    def describe(name: str) -> str:
        return registry.get(name).description

    @server.tool(name="list_nutrients", description=describe("list_nutrients"))
    def list_nutrients() -> str:
        return registry.invoke("list_nutrients").text

    @server.tool(name="search_food", description=describe("search_food"))
    def search_food(
        query: Annotated[
            str, Field(min_length=1, description="食物名称关键词，如「鸡蛋」「牛肉」「米饭」")
        ],
    ) -> str:
        return registry.invoke("search_food", {"query": query}).text

    @server.tool(name="get_nutrition", description=describe("get_nutrition"))
    def get_nutrition(
        food_id: Annotated[int, Field(gt=0, description="食物ID")],
    ) -> str:
        return registry.invoke("get_nutrition", {"food_id": food_id}).text

    @server.tool(name="compare_foods", description=describe("compare_foods"))
    def compare_foods(
        food_ids: Annotated[
            list[Annotated[int, Field(gt=0)]],
            Field(min_length=2, max_length=5, description="食物ID数组"),
        ],
    ) -> str:
        return registry.invoke("compare_foods", {"food_ids": food_ids}).text

    @server.tool(name="filter_by_nutrient", description=describe("filter_by_nutrient"))
    def filter_by_nutrient(  # noqa: PLR0913
        nutrient: Annotated[Nutrient, Field(description="营养素字段名")],
        min: Annotated[  # noqa: A002
            float | None, Field(description="最小值（含）")
        ] = None,
        max: Annotated[  # noqa: A002
            float | None, Field(description="最大值（含）")
        ] = None,
        limit: Annotated[
            int, Field(ge=1, le=50, description="返回数量上限，默认20")
        ] = 20,
        sort: Annotated[
            Literal["asc", "desc"], Field(description="排序方向，默认降序")
        ] = "desc",
    ) -> str:
        arguments: dict[str, object] = {
            "nutrient": nutrient,
            "limit": limit,
            "sort": sort,
        }
        if min is not None:
            arguments["min"] = min
        if max is not None:
            arguments["max"] = max
        return registry.invoke("filter_by_nutrient", arguments).text

    return server


def main() -> None:
    """Load the dataset and serve requests over stdio."""
    settings = Settings()
    configure_logging(settings.log_level)
    try:
        container = build_container(settings)
    except DatasetLoadError:
        _logger.exception("Failed to start MCP server")
        sys.exit(1)
    create_server(container).run()


if __name__ == "__main__":
    main()
