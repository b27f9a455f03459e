"""
repositories/vehicle_repo.py
----------------------------
Data access layer for vehicles.
All SQL queries related to the `carro` table live here.
"""

from typing import Optional

from db.connection import Database
from models.vehicle import Vehicle
from utils.logger import get_logger

logger = get_logger(__name__)


class VehicleRepository:
    """Repository for CRUD operations on the carro table."""

    def __init__(self, database: Database):
        self.db = database

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> Optional[list[Vehicle]]:
        """Fetch every vehicle, or None if the query failed."""
        try:
            result = self.db.execute("SELECT * FROM carro;")
            return [self._row_to_vehicle(r) for r in result.rows]
        except Exception as e:
            logger.error(f"Failed to list vehicles: {e}")
            return None

    # ── CREATE ────────────────────────────────────────────

    def create(self, vehicle: Vehicle) -> bool:
        """Insert a new vehicle and fill in its id. Returns True on success."""
        sql = """
            INSERT INTO carro (marca, modelo, ano, cor)
            VALUES (%s, %s, %s, %s)
            RETURNING id_carro;
        """
        try:
            result = self.db.execute(
                sql, (vehicle.brand, vehicle.model, vehicle.year, vehicle.color)
            )
            if result.rowcount != 0:
                vehicle.id = result.rows[0]["id_carro"]
                logger.info(f"Added vehicle #{vehicle.id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to add vehicle: {e}")
            return False

    # ── UPDATE ────────────────────────────────────────────

    def update(self, vehicle: Vehicle) -> bool:
        """Rewrite every field of an existing vehicle. Returns True if a row changed."""
        sql = """
            UPDATE carro
            SET marca = %s, modelo = %s, ano = %s, cor = %s
            WHERE id_carro = %s;
        """
        try:
            result = self.db.execute(
                sql, (vehicle.brand, vehicle.model, vehicle.year, vehicle.color, vehicle.id)
            )
            if result.rowcount != 0:
                logger.info(f"Updated vehicle #{vehicle.id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to update vehicle #{vehicle.id}: {e}")
            return False

    # ── DELETE ────────────────────────────────────────────

    def remove(self, vehicle_id: int) -> bool:
        """Delete a vehicle by ID. Returns True if a row was deleted."""
        try:
            result = self.db.execute("DELETE FROM carro WHERE id_carro = %s;", (vehicle_id,))
            if result.rowcount != 0:
                logger.info(f"Deleted vehicle #{vehicle_id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to delete vehicle #{vehicle_id}: {e}")
            return False

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_vehicle(row: dict) -> Vehicle:
        return Vehicle(
            id=row["id_carro"],
            brand=row["marca"],
            model=row["modelo"],
            year=row["ano"],
            color=row["cor"],
        )
