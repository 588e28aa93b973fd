"""Food domain models."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from cn_food.domain.nutrients import Nutrient


@dataclass(frozen=True)
class FoodRecord:
    """A food item with its nutrient values per 100 g.

    ``None`` means the value is not available for this food, which is
    distinct from a measured zero.
    """

    id: int
    name: str
    energy: float | None
    protein: float | None
    carbohydrate: float | None
    fat: float | None
    water: float | None
    fiber: float | None
    ash: float | None
    vitamin_a: float | None
    carotene: float | None
    retinol_equivalent: float | None
    vitamin_b1: float | None
    vitamin_b2: float | None
    niacin: float | None
    vitamin_c: float | None
    vitamin_e: float | None
    potassium: float | None
    sodium: float | None
    calcium: float | None
    magnesium: float | None
    iron: float | None
    manganese: float | None
    zinc: float | None
    copper: float | None
    phosphorus: float | None
    selenium: float | None

    def value(self, nutrient: Nutrient) -> float | None:
        """Return the stored amount of a nutrient."""
        return getattr(self, nutrient.value)

    def to_dict(self) -> dict[str, object]:
        """Serialize identity and every nutrient field in catalog order."""
        payload: dict[str, object] = {"id": self.id, "name": self.name}
        for nutrient in Nutrient:
            payload[nutrient.value] = self.value(nutrient)
        return payload


@dataclass(frozen=True)
class FoodSummary:
    """Compact view of a food used in search results."""

    id: int
    name: str
    energy_kcal: float | None
    protein_g: float | None
    fat_g: float | None
    carbohydrate_g: float | None

    @classmethod
    def from_record(cls, record: FoodRecord) -> "FoodSummary":
        return cls(
            id=record.id,
            name=record.name,
            energy_kcal=record.energy,
            protein_g=record.protein,
            fat_g=record.fat,
            carbohydrate_g=record.carbohydrate,
        )


@dataclass(frozen=True)
class FoodDataset:
    """Read-only, id-indexed collection of foods in load order."""

    records: tuple[FoodRecord, ...]
    _by_id: dict[int, FoodRecord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_by_id", {record.id: record for record in self.records}
        )

    @classmethod
    def from_records(cls, records: Iterable[FoodRecord]) -> "FoodDataset":
        return cls(records=tuple(records))

    def get(self, food_id: int) -> FoodRecord | None:
        """Return the food with the given id, if present."""
        return self._by_id.get(food_id)

    def __iter__(self) -> Iterator[FoodRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> FoodRecord:
        return self.records[index]

