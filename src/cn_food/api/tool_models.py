"""Pydantic models for operation arguments."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from cn_food.domain.nutrients import Nutrient

FoodId = Annotated[int, Field(gt=0, strict=True)]


class ToolArguments(BaseModel):
    """Base for operation arguments; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class ListNutrientsArguments(ToolArguments):
    """``list_nutrients`` takes no arguments."""


class SearchFoodArguments(ToolArguments):
    query: str = Field(
        min_length=1,
        strict=True,
        description="食物名称关键词，如「鸡蛋」「牛肉」「米饭」",
    )


class GetNutritionArguments(ToolArguments):
    food_id: int = Field(gt=0, strict=True, description="食物ID")


class CompareFoodsArguments(ToolArguments):
    food_ids: list[FoodId] = Field(
        min_length=2, max_length=5, description="食物ID数组"
    )


class FilterByNutrientArguments(ToolArguments):
    nutrient: Nutrient = Field(description="营养素字段名")
    minimum: float | None = Field(
        default=None,
        alias="min",
        strict=True,
        allow_inf_nan=False,
        description="最小值（含）",
    )
    maximum: float | None = Field(
        default=None,
        alias="max",
        strict=True,
        allow_inf_nan=False,
        description="最大值（含）",
    )
    limit: int = Field(
        default=20, ge=1, le=50, strict=True, description="返回数量上限，默认20"
    )
    sort: Literal["asc", "desc"] = Field(
        default="desc", description="排序方向，默认降序"
    )
