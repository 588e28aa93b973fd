"""Convert the food composition CSV export into ``foods.json``.

The first row of the export is a (multi-line) header and is skipped.
Columns are positional: the food name followed by every nutrient in
catalog order.
"""

import argparse
import csv
import json
import logging
import math
import re
from collections.abc import Iterable
from pathlib import Path

from cn_food.app_logging import configure_logging
from cn_food.domain.nutrients import Nutrient

COLUMNS: tuple[str, ...] = ("name", *(nutrient.value for nutrient in Nutrient))

_CLASSIFICATION_CODE = re.compile(r",\s*[A-Z]\d+.*$")
_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

_logger = logging.getLogger(__name__)


def clean_name(raw: str) -> str:
    """Strip a trailing classification code such as ``,A01004``."""
    return _CLASSIFICATION_CODE.sub("", raw.strip()).strip()


def parse_amount(raw: str) -> float | None:
    """Parse the leading decimal of a cell; blanks and dashes become ``None``."""
    match = _LEADING_NUMBER.match(raw.strip())
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def convert_rows(rows: Iterable[list[str]]) -> list[dict[str, object]]:
    """Turn data rows (header already removed) into food dicts with ids.

    Rows whose name is empty after cleaning are skipped so ids stay dense.
    """
    foods: list[dict[str, object]] = []
    for line, row in enumerate(rows, start=1):
        name = clean_name(row[0] if row else "")
        if not name:
            _logger.warning("Skipping data row %s: empty food name", line)
            continue
        food: dict[str, object] = {"id": len(foods) + 1, "name": name}
        for column, key in enumerate(COLUMNS[1:], start=1):
            food[key] = parse_amount(row[column] if column < len(row) else "")
        foods.append(food)
    return foods


def read_rows(csv_path: Path) -> list[list[str]]:
    """Read non-empty CSV rows, dropping a UTF-8 BOM and the header row."""
    with csv_path.open(encoding="utf-8-sig", newline="") as handle:
        rows = [row for row in csv.reader(handle) if any(cell.strip() for cell in row)]
    return rows[1:]


def convert(csv_path: Path, out_path: Path) -> list[dict[str, object]]:
    """Convert ``csv_path`` and write compact JSON to ``out_path``."""
    foods = convert_rows(read_rows(csv_path))
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps(foods, ensure_ascii=False, separators=(",", ":")),
        encoding="utf-8",
    )
    _logger.info("Converted %s food items -> %s", len(foods), out_path)
    sample = next((food for food in foods if food["name"] == "鸡蛋"), None)
    if sample is not None:
        _logger.info("Spot check (鸡蛋): %s", json.dumps(sample, ensure_ascii=False))
    return foods


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Convert the food composition CSV into foods.json"
    )
    parser.add_argument("csv_path", type=Path, help="Source CSV export")
    parser.add_argument("out_path", type=Path, help="Destination JSON file")
    args = parser.parse_args(argv)

    configure_logging()
    convert(args.csv_path, args.out_path)


if __name__ == "__main__":
    main()
