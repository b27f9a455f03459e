"""
repositories/client_repo.py
---------------------------
Data access layer for clients.
All SQL queries related to the `cliente` table live here.
"""

from typing import Optional

from db.connection import Database
from models.client import Client
from utils.logger import get_logger

logger = get_logger(__name__)


class ClientRepository:
    """Repository for CRUD operations on the cliente table."""

    def __init__(self, database: Database):
        self.db = database

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> Optional[list[Client]]:
        """
        Fetch every client in database order.

        Returns:
            List of Client objects, or None if the query failed.
        """
        try:
            result = self.db.execute("SELECT * FROM cliente;")
            return [self._row_to_client(r) for r in result.rows]
        except Exception as e:
            logger.error(f"Failed to list clients: {e}")
            return None

    # ── CREATE ────────────────────────────────────────────

    def create(self, client: Client) -> bool:
        """
        Insert a new client.

        Args:
            client: The Client to persist. Its `id` is filled in on success.

        Returns:
            True if a row was inserted, False otherwise.
        """
        sql = """
            INSERT INTO cliente (nome, cpf, telefone)
            VALUES (%s, %s, %s)
            RETURNING id_cliente;
        """
        try:
            result = self.db.execute(sql, (client.name, client.cpf, client.phone))
            if result.rowcount != 0:
                client.id = result.rows[0]["id_cliente"]
                logger.info(f"Added client #{client.id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to add client: {e}")
            return False

    # ── UPDATE ────────────────────────────────────────────

    def update(self, client: Client) -> bool:
        """
        Rewrite every field of an existing client.

        Args:
            client: Client with updated fields (must have id set).

        Returns:
            True if a row was updated, False otherwise.
        """
        sql = """
            UPDATE cliente
            SET nome = %s, cpf = %s, telefone = %s
            WHERE id_cliente = %s;
        """
        try:
            result = self.db.execute(sql, (client.name, client.cpf, client.phone, client.id))
            if result.rowcount != 0:
                logger.info(f"Updated client #{client.id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to update client #{client.id}: {e}")
            return False

    # ── DELETE ────────────────────────────────────────────

    def remove(self, client_id: int) -> bool:
        """
        Delete a client by ID.

        Returns:
            True if a row was deleted, False otherwise.
        """
        try:
            result = self.db.execute("DELETE FROM cliente WHERE id_cliente = %s;", (client_id,))
            if result.rowcount != 0:
                logger.info(f"Deleted client #{client_id}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to delete client #{client_id}: {e}")
            return False

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_client(row: dict) -> Client:
        """Convert a database row to a Client domain object."""
        return Client(
            id=row["id_cliente"],
            name=row["nome"],
            cpf=row["cpf"],
            phone=row["telefone"],
        )
