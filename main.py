"""
main.py
-------
Entry point for the dealership API server.

Responsibilities:
    - Build the database gateway and verify connectivity.
    - Create the FastAPI application with every route registered.
    - Serve it with uvicorn, or abort startup if the database is unreachable.
"""

import sys

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN, SERVER_HOST, SERVER_PORT
from db.connection import Database
from handlers.common import invalid_request_handler
from routes import build_router
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(database: Database) -> FastAPI:
    """
    Build the application around an already-constructed Database.

    Args:
        database: The shared gateway every repository will use.
    """
    app = FastAPI(title="Concessionária API")
    app.state.database = database
    app.include_router(build_router())
    app.add_exception_handler(RequestValidationError, invalid_request_handler)
    return app


def main() -> None:
    """Check the database, then start serving."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Checking database connection...")
    database = Database(DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX)
    if not database.connect():
        logger.error("Erro ao estabelecer conexão com banco de dados!")
        sys.exit(1)

    # ── 2. Build and serve the API ────────────────────────
    app = create_app(database)
    logger.info(f"Endereço do servidor: http://localhost:{SERVER_PORT}")
    try:
        uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
    finally:
        # ── 3. Cleanup on shutdown ────────────────────────
        database.close()
        logger.info("Server stopped.")


if __name__ == "__main__":
    main()
