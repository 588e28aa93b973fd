"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from cn_food.config import Settings
from cn_food.containers import AppContainer, build_container
from cn_food.domain.foods import FoodDataset, FoodRecord
from cn_food.domain.nutrients import Nutrient
from cn_food.services.foods import FoodQueryService


def make_food(food_id: int, name: str, **values: float | None) -> FoodRecord:
    """Build a record with every nutrient unset except the given ones."""
    nutrients: dict[str, float | None] = {nutrient.value: None for nutrient in Nutrient}
    nutrients.update(values)
    return FoodRecord(id=food_id, name=name, **nutrients)


def food_json(food_id: int, name: str, **values: float | None) -> dict[str, object]:
    return make_food(food_id, name, **values).to_dict()


SAMPLE_FOODS = [
    make_food(1, "小麦", energy=338, protein=11.9, fat=1.3, carbohydrate=75.2),
    make_food(2, "稻米", energy=347, protein=7.4, fat=0.8, carbohydrate=77.9),
    make_food(3, "牛肉(瘦)", energy=106, protein=20.2, fat=2.3, carbohydrate=1.2),
    make_food(4, "鸡蛋白", energy=60, protein=11.6, fat=0.1, carbohydrate=3.1),
    make_food(5, "Apple", energy=53, protein=0.4, fat=0.2, carbohydrate=13.7),
    make_food(6, "黄瓜", energy=16, protein=0.0, fat=0.2, vitamin_c=9.0),
    make_food(
        7, "鸡蛋", energy=139, protein=13.1, fat=8.8, carbohydrate=2.4, sodium=131.5
    ),
    make_food(8, "APPLE juice", energy=45, protein=0.0, fat=None),
    make_food(9, "盐", sodium=39311.0),
]


@pytest.fixture
def dataset() -> FoodDataset:
    return FoodDataset.from_records(SAMPLE_FOODS)


@pytest.fixture
def query_service(dataset: FoodDataset) -> FoodQueryService:
    return FoodQueryService(dataset=dataset)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "foods.json"
    path.write_text(
        json.dumps([food.to_dict() for food in SAMPLE_FOODS], ensure_ascii=False),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(data_file: Path) -> Settings:
    return Settings(data_path=data_file)


@pytest.fixture
def container(settings: Settings, dataset: FoodDataset) -> AppContainer:
    return build_container(settings, dataset=dataset)
