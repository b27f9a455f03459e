"""
handlers/deps.py
----------------
FastAPI dependencies that hand each request a repository bound to the
Database stored on the application at startup.
"""

from fastapi import Depends, Request

from db.connection import Database
from repositories.client_repo import ClientRepository
from repositories.sales_order_repo import SalesOrderRepository
from repositories.vehicle_repo import VehicleRepository


def get_database(request: Request) -> Database:
    """Get the shared database gateway."""
    return request.app.state.database


def get_client_repo(database: Database = Depends(get_database)) -> ClientRepository:
    return ClientRepository(database)


def get_vehicle_repo(database: Database = Depends(get_database)) -> VehicleRepository:
    return VehicleRepository(database)


def get_sales_order_repo(database: Database = Depends(get_database)) -> SalesOrderRepository:
    return SalesOrderRepository(database)
