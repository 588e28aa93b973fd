"""Tests for the operation registry."""

import json

import pytest

from cn_food.api.tools import build_registry
from cn_food.errors import InvalidArgumentsError, UnknownOperationError
from cn_food.services.foods import FoodQueryService


@pytest.fixture
def registry(query_service: FoodQueryService):
    return build_registry(query_service)


def _payload(registry, name: str, arguments: dict | None = None) -> dict:
    return json.loads(registry.invoke(name, arguments).text)


def test_registry_declares_five_operations(registry) -> None:
    names = [spec.name for spec in registry.list_tools()]

    assert names == [
        "list_nutrients",
        "search_food",
        "get_nutrition",
        "compare_foods",
        "filter_by_nutrient",
    ]
    for spec in registry.list_tools():
        assert spec.description
        assert spec.input_schema()["type"] == "object"


def test_filter_schema_lists_nutrient_enum(registry) -> None:
    schema = registry.get("filter_by_nutrient").input_schema()

    assert set(schema["properties"]) == {"nutrient", "min", "max", "limit", "sort"}
    assert schema["required"] == ["nutrient"]
    nutrient_enum = schema["$defs"]["Nutrient"]["enum"]
    assert len(nutrient_enum) == 25
    assert "protein" in nutrient_enum


def test_result_envelope_is_text_content(registry) -> None:
    result = registry.invoke("get_nutrition", {"food_id": 7})
    envelope = result.to_dict()

    assert envelope["content"][0]["type"] == "text"
    assert "鸡蛋" in envelope["content"][0]["text"]
    assert json.loads(envelope["content"][0]["text"])["protein"] == 13.1


def test_list_nutrients_is_byte_identical(registry) -> None:
    first = registry.invoke("list_nutrients").text
    second = registry.invoke("list_nutrients", {}).text

    assert first == second


def test_unknown_operation_rejected(registry) -> None:
    with pytest.raises(UnknownOperationError):
        registry.invoke("delete_food", {"food_id": 1})


@pytest.mark.parametrize(
    ("name", "arguments"),
    [
        ("search_food", {"query": ""}),
        ("search_food", {}),
        ("get_nutrition", {"food_id": 0}),
        ("get_nutrition", {"food_id": -3}),
        ("get_nutrition", {"food_id": "7"}),
        ("get_nutrition", {"food_id": 7.5}),
        ("get_nutrition", {"food_id": True}),
        ("compare_foods", {"food_ids": [1]}),
        ("compare_foods", {"food_ids": [1, 2, 3, 4, 5, 6]}),
        ("compare_foods", {"food_ids": [1, 0]}),
        ("filter_by_nutrient", {"nutrient": "sugar"}),
        ("filter_by_nutrient", {"nutrient": "protein", "limit": 0}),
        ("filter_by_nutrient", {"nutrient": "protein", "limit": 51}),
        ("filter_by_nutrient", {"nutrient": "protein", "sort": "random"}),
        ("filter_by_nutrient", {"nutrient": "protein", "min": "13"}),
        ("filter_by_nutrient", {"nutrient": "protein", "max": True}),
        ("list_nutrients", {"verbose": True}),
    ],
)
def test_invalid_arguments_rejected(registry, name: str, arguments: dict) -> None:
    with pytest.raises(InvalidArgumentsError) as exc_info:
        registry.invoke(name, arguments)

    assert exc_info.value.errors


def test_get_nutrition_not_found_is_a_result(registry) -> None:
    payload = _payload(registry, "get_nutrition", {"food_id": 999999})

    assert payload == {"error": "未找到 ID 为 999999 的食物"}


def test_compare_insufficient_is_a_result(registry) -> None:
    payload = _payload(registry, "compare_foods", {"food_ids": [1, 404]})

    assert payload == {"error": "至少需要找到2个有效食物进行对比"}


def test_filter_defaults(registry) -> None:
    payload = _payload(registry, "filter_by_nutrient", {"nutrient": "protein"})

    assert payload["nutrient"] == "protein"
    assert payload["count"] == 8
    assert payload["foods"][0] == {"id": 3, "name": "牛肉(瘦)", "protein": 20.2}


def test_filter_bounds_use_min_and_max_keys(registry) -> None:
    payload = _payload(
        registry,
        "filter_by_nutrient",
        {"nutrient": "protein", "min": 13, "max": 14, "sort": "asc", "limit": 5},
    )

    assert [food["id"] for food in payload["foods"]] == [7]


def test_search_food_operation(registry) -> None:
    payload = _payload(registry, "search_food", {"query": "Apple"})

    assert payload["count"] == 2
    assert [food["id"] for food in payload["foods"]] == [5, 8]
