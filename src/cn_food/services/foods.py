"""Query service over the in-memory food dataset."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Literal

from cn_food.domain.foods import FoodDataset, FoodRecord, FoodSummary
from cn_food.domain.nutrients import NUTRIENT_CATALOG, Nutrient, NutrientDescriptor

SortOrder = Literal["asc", "desc"]

PER_100G_UNIT = 100

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NutrientListing:
    """All queryable nutrients, with amounts expressed per 100 g."""

    nutrients: tuple[NutrientDescriptor, ...]
    per_100g: bool = True

    def to_dict(self) -> dict[str, object]:
        return {
            "per_100g": self.per_100g,
            "nutrients": [descriptor.to_dict() for descriptor in self.nutrients],
        }


@dataclass(frozen=True)
class SearchResult:
    foods: list[FoodSummary]

    @property
    def count(self) -> int:
        return len(self.foods)

    def to_dict(self) -> dict[str, object]:
        return {
            "count": self.count,
            "foods": [
                {
                    "id": food.id,
                    "name": food.name,
                    "energy_kcal": food.energy_kcal,
                    "protein_g": food.protein_g,
                    "fat_g": food.fat_g,
                    "carbohydrate_g": food.carbohydrate_g,
                }
                for food in self.foods
            ],
        }


@dataclass(frozen=True)
class NutritionResult:
    """Full profile of one food, or the id that could not be found."""

    food_id: int
    food: FoodRecord | None

    def to_dict(self) -> dict[str, object]:
        if self.food is None:
            return {"error": f"未找到 ID 为 {self.food_id} 的食物"}
        return {**self.food.to_dict(), "unit": PER_100G_UNIT}


@dataclass(frozen=True)
class ComparisonResult:
    foods: list[FoodRecord]
    min_foods: int = 2

    @property
    def is_sufficient(self) -> bool:
        return len(self.foods) >= self.min_foods

    def to_dict(self) -> dict[str, object]:
        if not self.is_sufficient:
            return {"error": f"至少需要找到{self.min_foods}个有效食物进行对比"}
        return {
            "unit": PER_100G_UNIT,
            "foods": [food.to_dict() for food in self.foods],
        }


@dataclass(frozen=True)
class RankedFood:
    id: int
    name: str
    value: float


@dataclass(frozen=True)
class FilterResult:
    nutrient: Nutrient
    foods: list[RankedFood]

    @property
    def count(self) -> int:
        return len(self.foods)

    def to_dict(self) -> dict[str, object]:
        return {
            "nutrient": self.nutrient.value,
            "count": self.count,
            "foods": [
                {"id": food.id, "name": food.name, self.nutrient.value: food.value}
                for food in self.foods
            ],
        }


@dataclass
class FoodQueryService:
    """Read-only queries over a loaded dataset.

    The dataset and catalog are never mutated, so one instance can serve
    concurrent requests without locking.
    """

    dataset: FoodDataset
    catalog: tuple[NutrientDescriptor, ...] = NUTRIENT_CATALOG
    search_limit: int = 20
    compare_min_ids: int = 2

    def list_nutrients(self) -> NutrientListing:
        """Return every nutrient descriptor in catalog order."""
        return NutrientListing(nutrients=self.catalog)

    def search(self, query: str) -> SearchResult:
        """Case-insensitive substring match on food names, in dataset order."""
        needle = query.lower()
        found = (
            FoodSummary.from_record(record)
            for record in self.dataset
            if needle in record.name.lower()
        )
        matches = list(islice(found, max(self.search_limit, 0)))
        _logger.debug("Search query=%r results=%s", query, len(matches))
        return SearchResult(foods=matches)

    def get_nutrition(self, food_id: int) -> NutritionResult:
        """Look up a single food by id."""
        return NutritionResult(food_id=food_id, food=self.dataset.get(food_id))

    def compare(self, food_ids: Sequence[int]) -> ComparisonResult:
        """Resolve ids in request order; unknown ids are dropped, repeats kept."""
        resolved = (self.dataset.get(food_id) for food_id in food_ids)
        foods = [record for record in resolved if record is not None]
        return ComparisonResult(foods=foods, min_foods=self.compare_min_ids)

    def filter_by_nutrient(
        self,
        nutrient: Nutrient,
        *,
        minimum: float | None = None,
        maximum: float | None = None,
        limit: int = 20,
        sort: SortOrder = "desc",
    ) -> FilterResult:
        """Rank foods by one nutrient within inclusive bounds.

        Foods without a value for the nutrient never match. Ties keep
        dataset order in both directions.
        """
        candidates: list[RankedFood] = []
        for record in self.dataset:
            value = record.value(nutrient)
            if value is None:
                continue
            if minimum is not None and value < minimum:
                continue
            if maximum is not None and value > maximum:
                continue
            candidates.append(RankedFood(id=record.id, name=record.name, value=value))

        if sort == "desc":
            # Negating the key keeps the sort stable for equal values.
            candidates.sort(key=lambda food: -food.value)
        else:
            candidates.sort(key=lambda food: food.value)
        return FilterResult(nutrient=nutrient, foods=candidates[:limit])
