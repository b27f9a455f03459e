"""
models/vehicle.py
-----------------
Domain model for vehicles available for sale.
"""

from dataclasses import dataclass


@dataclass
class Vehicle:
    """
    Represents a car in the dealership's stock.

    Attributes:
        brand: Manufacturer (e.g., 'Fiat').
        model: Model name (e.g., 'Uno').
        year: Model year.
        color: Body colour.
        id: Database primary key (0 until persisted).
    """
    brand: str
    model: str
    year: int
    color: str
    id: int = 0

    def to_dict(self) -> dict:
        return {
            "idCarro": self.id,
            "marca": self.brand,
            "modelo": self.model,
            "ano": self.year,
            "cor": self.color,
        }

    def __str__(self) -> str:
        return f"#{self.id} {self.brand} {self.model} {self.year}"
