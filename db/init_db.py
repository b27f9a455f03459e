"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import sys

from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Clients
CREATE TABLE IF NOT EXISTS cliente (
    id_cliente      SERIAL PRIMARY KEY,
    nome            VARCHAR(100) NOT NULL,
    cpf             VARCHAR(20) NOT NULL,
    telefone        VARCHAR(20)
);

-- Vehicles offered for sale
CREATE TABLE IF NOT EXISTS carro (
    id_carro        SERIAL PRIMARY KEY,
    marca           VARCHAR(50) NOT NULL,
    modelo          VARCHAR(50) NOT NULL,
    ano             INT,
    cor             VARCHAR(20)
);

-- Sales orders: one client buying one vehicle
CREATE TABLE IF NOT EXISTS pedido_venda (
    id_pedido       SERIAL PRIMARY KEY,
    id_cliente      INT NOT NULL REFERENCES cliente(id_cliente),
    id_carro        INT NOT NULL REFERENCES carro(id_carro),
    data_pedido     DATE NOT NULL,
    valor_pedido    NUMERIC(10,2) NOT NULL
);
"""


def create_tables(database: Database) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        database.execute(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from config import DATABASE_URL

    db = Database(DATABASE_URL)
    if not db.connect():
        sys.exit(1)
    try:
        create_tables(db)
    finally:
        db.close()
