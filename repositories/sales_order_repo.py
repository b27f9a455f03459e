"""
repositories/sales_order_repo.py
--------------------------------
Data access layer for sales orders.
All SQL queries related to the `pedido_venda` table live here.
Client and vehicle references are not checked here; the foreign keys in the
schema reject unknown ids and that surfaces as a failed write.
"""

from decimal import Decimal
from typing import Optional

from db.connection import Database
from models.sales_order import SalesOrder
from utils.logger import get_logger

logger = get_logger(__name__)


class SalesOrderRepository:
    """Repository for CRUD operations on the pedido_venda table."""

    def __init__(self, database: Database):
        self.db = database

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> Optional[list[SalesOrder]]:
        """
        Fetch every sales order in database order.

        Returns:
            List of SalesOrder objects, or None if the query failed.
        """
        try:
            result = self.db.execute("SELECT * FROM pedido_venda;")
            return [self._row_to_order(r) for r in result.rows]
        except Exception as e:
            logger.error(f"Failed to list sales orders: {e}")
            return None

    # ── CREATE ────────────────────────────────────────────

    def create(self, order: SalesOrder) -> bool:
        """
        Insert a new sales order.

        Args:
            order: The SalesOrder to persist. Its `id` is filled in on success.

        Returns:
            True if a row was inserted, False otherwise.
        """
        sql = """
            INSERT INTO pedido_venda (id_cliente, id_carro, data_pedido, valor_pedido)
            VALUES (%s, %s, %s, %s)
            RETURNING id_pedido;
        """
        try:
            result = self.db.execute(sql, (
                order.client_id, order.vehicle_id, order.order_date, order.amount,
            ))
            if result.rowcount != 0:
                order.id = result.rows[0]["id_pedido"]
                logger.info(f"Added sales order #{order.id} for client {order.client_id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to add sales order: {e}")
            return False

    # ── UPDATE ────────────────────────────────────────────

    def update(self, order: SalesOrder) -> bool:
        """
        Rewrite every field of an existing sales order.

        Returns:
            True if a row was updated, False otherwise.
        """
        sql = """
            UPDATE pedido_venda
            SET id_cliente = %s, id_carro = %s, data_pedido = %s, valor_pedido = %s
            WHERE id_pedido = %s;
        """
        try:
            result = self.db.execute(sql, (
                order.client_id, order.vehicle_id, order.order_date, order.amount,
                order.id,
            ))
            if result.rowcount != 0:
                logger.info(f"Updated sales order #{order.id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to update sales order #{order.id}: {e}")
            return False

    # ── DELETE ────────────────────────────────────────────

    def remove(self, order_id: int) -> bool:
        """
        Delete a sales order by ID.

        Returns:
            True if a row was deleted, False otherwise.
        """
        try:
            result = self.db.execute("DELETE FROM pedido_venda WHERE id_pedido = %s;", (order_id,))
            if result.rowcount != 0:
                logger.info(f"Deleted sales order #{order_id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to delete sales order #{order_id}: {e}")
            return False

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_order(row: dict) -> SalesOrder:
        """Convert a database row to a SalesOrder domain object."""
        return SalesOrder(
            id=row["id_pedido"],
            client_id=row["id_cliente"],
            vehicle_id=row["id_carro"],
            order_date=row["data_pedido"],
            amount=Decimal(row["valor_pedido"]),
        )
