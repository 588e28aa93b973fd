"""Nutrient identifiers and their display metadata."""

from dataclasses import dataclass
from enum import StrEnum


class Nutrient(StrEnum):
    """Closed set of nutrient fields stored for every food (per 100 g)."""

    ENERGY = "energy"
    PROTEIN = "protein"
    CARBOHYDRATE = "carbohydrate"
    FAT = "fat"
    WATER = "water"
    FIBER = "fiber"
    ASH = "ash"
    VITAMIN_A = "vitamin_a"
    CAROTENE = "carotene"
    RETINOL_EQUIVALENT = "retinol_equivalent"
    VITAMIN_B1 = "vitamin_b1"
    VITAMIN_B2 = "vitamin_b2"
    NIACIN = "niacin"
    VITAMIN_C = "vitamin_c"
    VITAMIN_E = "vitamin_e"
    POTASSIUM = "potassium"
    SODIUM = "sodium"
    CALCIUM = "calcium"
    MAGNESIUM = "magnesium"
    IRON = "iron"
    MANGANESE = "manganese"
    ZINC = "zinc"
    COPPER = "copper"
    PHOSPHORUS = "phosphorus"
    SELENIUM = "selenium"


@dataclass(frozen=True)
class NutrientDescriptor:
    """Display names and unit for a single nutrient field."""

    field: Nutrient
    name_cn: str
    name_en: str
    unit: str

    def to_dict(self) -> dict[str, str]:
        """Serialize the descriptor for API responses."""
        return {
            "field": self.field.value,
            "name_cn": self.name_cn,
            "name_en": self.name_en,
            "unit": self.unit,
        }


NUTRIENT_CATALOG: tuple[NutrientDescriptor, ...] = (
    NutrientDescriptor(Nutrient.ENERGY, "能量", "Energy", "kcal"),
    NutrientDescriptor(Nutrient.PROTEIN, "蛋白质", "Protein", "g"),
    NutrientDescriptor(Nutrient.CARBOHYDRATE, "糖类", "Carbohydrate", "g"),
    NutrientDescriptor(Nutrient.FAT, "脂肪", "Fat", "g"),
    NutrientDescriptor(Nutrient.WATER, "水分", "Water", "g"),
    NutrientDescriptor(Nutrient.FIBER, "纤维", "Fiber", "g"),
    NutrientDescriptor(Nutrient.ASH, "灰份", "Ash", "g"),
    NutrientDescriptor(Nutrient.VITAMIN_A, "维生素A", "Vitamin A", "μg"),
    NutrientDescriptor(Nutrient.CAROTENE, "胡萝卜素", "Carotene", "μg"),
    NutrientDescriptor(
        Nutrient.RETINOL_EQUIVALENT, "视黄醇当量", "Retinol Equivalent", "μg"
    ),
    NutrientDescriptor(Nutrient.VITAMIN_B1, "维生素B1", "Vitamin B1", "mg"),
    NutrientDescriptor(Nutrient.VITAMIN_B2, "维生素B2", "Vitamin B2", "mg"),
    NutrientDescriptor(Nutrient.NIACIN, "烟酸", "Niacin", "mg"),
    NutrientDescriptor(Nutrient.VITAMIN_C, "维生素C", "Vitamin C", "mg"),
    NutrientDescriptor(Nutrient.VITAMIN_E, "维生素E", "Vitamin E", "mg"),
    NutrientDescriptor(Nutrient.POTASSIUM, "钾", "Potassium", "mg"),
    NutrientDescriptor(Nutrient.SODIUM, "钠", "Sodium", "mg"),
    NutrientDescriptor(Nutrient.CALCIUM, "钙", "Calcium", "mg"),
    NutrientDescriptor(Nutrient.MAGNESIUM, "镁", "Magnesium", "mg"),
    NutrientDescriptor(Nutrient.IRON, "铁", "Iron", "mg"),
    NutrientDescriptor(Nutrient.MANGANESE, "锰", "Manganese", "mg"),
    NutrientDescriptor(Nutrient.ZINC, "锌", "Zinc", "mg"),
    NutrientDescriptor(Nutrient.COPPER, "铜", "Copper", "mg"),
    NutrientDescriptor(Nutrient.PHOSPHORUS, "磷", "Phosphorus", "mg"),
    NutrientDescriptor(Nutrient.SELENIUM, "硒", "Selenium", "μg"),
)
