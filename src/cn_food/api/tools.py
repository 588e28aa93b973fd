"""Operation registry: declarations, validation and dispatch."""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from cn_food.api.tool_models import (
    CompareFoodsArguments,
    FilterByNutrientArguments,
    GetNutritionArguments,
    ListNutrientsArguments,
    SearchFoodArguments,
)
from cn_food.errors import InvalidArgumentsError, UnknownOperationError
from cn_food.services.foods import FoodQueryService

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Response envelope carrying the JSON text of a result."""

    payload: dict[str, object]

    @property
    def text(self) -> str:
        return json.dumps(self.payload, ensure_ascii=False, indent=2)

    def to_dict(self) -> dict[str, object]:
        return {"content": [{"type": "text", "text": self.text}]}


@dataclass(frozen=True)
class ToolSpec:
    """Declaration of one callable operation."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any], dict[str, object]]

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema(),
        }


@dataclass
class ToolRegistry:
    """Validates requests and dispatches them to the query service."""

    tools: dict[str, ToolSpec] = field(default_factory=dict)

    def register(self, spec: ToolSpec) -> None:
        self.tools[spec.name] = spec

    def list_tools(self) -> list[ToolSpec]:
        return list(self.tools.values())

    def get(self, name: str) -> ToolSpec:
        spec = self.tools.get(name)
        if spec is None:
            _logger.info("Rejected unknown operation %r", name)
            raise UnknownOperationError(name)
        return spec

    def invoke(
        self, name: str, arguments: Mapping[str, object] | None = None
    ) -> ToolResult:
        """Validate arguments and run the named operation."""
        spec = self.get(name)
        try:
            parsed = spec.input_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            _logger.info("Rejected %s arguments: %s", name, exc.error_count())
            raise InvalidArgumentsError(
                name,
                exc.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            ) from exc
        _logger.debug("Invoking %s", name)
        return ToolResult(payload=spec.handler(parsed))


def build_registry(service: FoodQueryService) -> ToolRegistry:
    """Declare the five food operations against a query service."""

    def list_nutrients(_: ListNutrientsArguments) -> dict[str, object]:
        return service.list_nutrients().to_dict()

    def search_food(args: SearchFoodArguments) -> dict[str, object]:
        return service.search(args.query).to_dict()

    def get_nutrition(args: GetNutritionArguments) -> dict[str, object]:
        return service.get_nutrition(args.food_id).to_dict()

    def compare_foods(args: CompareFoodsArguments) -> dict[str, object]:
        return service.compare(args.food_ids).to_dict()

    def filter_by_nutrient(args: FilterByNutrientArguments) -> dict[str, object]:
        return service.filter_by_nutrient(
            args.nutrient,
            minimum=args.minimum,
            maximum=args.maximum,
            limit=args.limit,
            sort=args.sort,
        ).to_dict()

    registry = ToolRegistry()
    registry.register(
        ToolSpec(
            name="list_nutrients",
            description="列出所有可查询的营养素字段名、中英文名称和单位",
            input_model=ListNutrientsArguments,
            handler=list_nutrients,
        )
    )
    registry.register(
        ToolSpec(
            name="search_food",
            description="按名称搜索中国食物，返回匹配的食物列表（含ID、名称、主要营养素摘要）",
            input_model=SearchFoodArguments,
            handler=search_food,
        )
    )
    registry.register(
        ToolSpec(
            name="get_nutrition",
            description="获取某个食物的完整营养成分（每100g），需提供食物ID（通过 search_food 获取）",
            input_model=GetNutritionArguments,
            handler=get_nutrition,
        )
    )
    registry.register(
        ToolSpec(
            name="compare_foods",
            description="对比多个食物的营养成分（每100g），提供2-5个食物ID",
            input_model=CompareFoodsArguments,
            handler=compare_foods,
        )
    )
    registry.register(
        ToolSpec(
            name="filter_by_nutrient",
            description="按营养素范围筛选食物，如查找高蛋白、低脂肪的食物",
            input_model=FilterByNutrientArguments,
            handler=filter_by_nutrient,
        )
    )
    return registry
