"""Ingredient domain entity: name, unit of measure, estimated price per unit."""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from mealplan.utilities.decimals import D, decimal_str


class Ingredient:
    def __init__(self, id: Optional[int] = None, name: str = "", unit: str = "",
                 estimated_price_per_unit: Decimal = Decimal(0),
                 created_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        self.unit = unit
        self.estimated_price_per_unit = D(estimated_price_per_unit)
        self.created_at = created_at

    def __str__(self) -> str:
        return f"{self.name} - {self.estimated_price_per_unit}/{self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a stored row. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        created = d.get("created_at")
        if created and not isinstance(created, datetime):
            created = datetime.fromisoformat(created)
        return Ingredient(
            id=d.get("id"),
            name=d.get("name", ""),
            unit=d.get("unit", ""),
            estimated_price_per_unit=d.get("estimated_price_per_unit", "0"),
            created_at=created,
        )

    def to_dict(self):
        '''Converts the Ingredient to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "unit": self.unit,
            "estimated_price_per_unit": decimal_str(self.estimated_price_per_unit),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
