"""Tests for the MCP stdio server wiring."""

import asyncio
import json
from pathlib import Path

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from cn_food import mcp_server
from cn_food.mcp_server import create_server


def test_server_registers_every_operation(container) -> None:
    server = create_server(container)

    tools = asyncio.run(server.list_tools())

    assert {tool.name for tool in tools} == {
        spec.name for spec in container.tool_registry.list_tools()
    }
    by_name = {tool.name: tool for tool in tools}
    assert by_name["compare_foods"].description == (
        container.tool_registry.get("compare_foods").description
    )
    filter_properties = by_name["filter_by_nutrient"].inputSchema["properties"]
    assert {"nutrient", "min", "max", "limit", "sort"} <= set(filter_properties)


def test_main_exits_when_dataset_is_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CN_FOOD_DATA_PATH", str(tmp_path / "missing.json"))

    with pytest.raises(SystemExit) as exc_info:
        mcp_server.main()

    assert exc_info.value.code == 1


def _call(server, name: str, arguments: dict) -> dict:
    result = asyncio.run(server.call_tool(name, arguments))
    # Newer releases return (content, structured_content).
    content = result[0] if isinstance(result, tuple) else result
    return json.loads(content[0].text)


def test_filter_tool_passes_bounds_through(container) -> None:
    server = create_server(container)

    payload = _call(
        server,
        "filter_by_nutrient",
        {"nutrient": "protein", "min": 13, "max": 14, "sort": "asc"},
    )

    assert payload == {
        "nutrient": "protein",
        "count": 1,
        "foods": [{"id": 7, "name": "鸡蛋", "protein": 13.1}],
    }


def test_filter_tool_without_bounds_uses_defaults(container) -> None:
    server = create_server(container)

    payload = _call(server, "filter_by_nutrient", {"nutrient": "sodium"})

    assert [food["id"] for food in payload["foods"]] == [9, 7]


def test_get_nutrition_tool_not_found(container) -> None:
    server = create_server(container)

    payload = _call(server, "get_nutrition", {"food_id": 999999})

    assert payload == {"error": "未找到 ID 为 999999 的食物"}


def test_search_tool_returns_summaries(container) -> None:
    server = create_server(container)

    payload = _call(server, "search_food", {"query": "鸡蛋"})

    assert [food["id"] for food in payload["foods"]] == [4, 7]


@pytest.mark.parametrize(
    ("name", "arguments"),
    [
        ("compare_foods", {"food_ids": [1]}),
        ("filter_by_nutrient", {"nutrient": "sugar"}),
        ("get_nutrition", {"food_id": 0}),
    ],
)
def test_invalid_tool_call_is_a_tool_error(
    container, name: str, arguments: dict
) -> None:
    server = create_server(container)

    with pytest.raises(ToolError):
        asyncio.run(server.call_tool(name, arguments))
