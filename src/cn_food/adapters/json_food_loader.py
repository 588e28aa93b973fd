"""Loader for the converted food dataset JSON file."""

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path

from cn_food.domain.foods import FoodDataset, FoodRecord
from cn_food.domain.nutrients import Nutrient
from cn_food.errors import DatasetLoadError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonFoodLoader:
    """Reads ``foods.json`` into an immutable dataset."""

    path: Path

    def load(self) -> FoodDataset:
        """Load and validate every record, failing on the first bad one."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DatasetLoadError(f"Cannot read dataset {self.path}: {exc}") from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DatasetLoadError(f"Dataset {self.path} is not valid JSON") from exc
        if not isinstance(payload, list):
            raise DatasetLoadError(f"Dataset {self.path} must be a JSON array")

        records = [
            parse_record(item, expected_id=index)
            for index, item in enumerate(payload, start=1)
        ]
        _logger.info("Loaded %s foods from %s", len(records), self.path)
        return FoodDataset.from_records(records)


def parse_record(item: object, expected_id: int) -> FoodRecord:
    """Build a record from one JSON object, checking the dense id sequence."""
    if not isinstance(item, dict):
        raise DatasetLoadError(f"Entry {expected_id} is not an object")
    food_id = item.get("id")
    if type(food_id) is not int or food_id != expected_id:
        raise DatasetLoadError(
            f"Entry {expected_id} has id {food_id!r}; ids must be 1..N in order"
        )
    name = item.get("name")
    if not isinstance(name, str) or not name:
        raise DatasetLoadError(f"Food {food_id} has no name")

    values: dict[str, float | None] = {}
    for nutrient in Nutrient:
        if nutrient.value not in item:
            raise DatasetLoadError(f"Food {food_id} is missing {nutrient.value}")
        values[nutrient.value] = _parse_amount(food_id, nutrient, item[nutrient.value])
    return FoodRecord(id=food_id, name=name, **values)


def _parse_amount(food_id: int, nutrient: Nutrient, value: object) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise DatasetLoadError(
            f"Food {food_id} has non-numeric {nutrient.value}: {value!r}"
        )
    if not math.isfinite(value):
        raise DatasetLoadError(f"Food {food_id} has non-finite {nutrient.value}")
    return value
