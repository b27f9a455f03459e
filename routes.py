"""
routes.py
---------
Static table of (method, path) -> handler for the whole API.
"""

from fastapi import APIRouter

from handlers import client_handler, sales_order_handler, start_handler, vehicle_handler

ROUTES = [
    ("GET", "/", start_handler.welcome),

    # ── Clients ───────────────────────────────────────────
    ("GET", "/lista/clientes", client_handler.list_clients),
    ("POST", "/novo/clientes", client_handler.create_client),
    ("PUT", "/atualizar/clientes/{client_id}", client_handler.update_client),
    ("DELETE", "/remover/clientes/{client_id}", client_handler.remove_client),

    # ── Vehicles ──────────────────────────────────────────
    ("GET", "/lista/carros", vehicle_handler.list_vehicles),
    ("POST", "/novo/carros", vehicle_handler.create_vehicle),
    ("PUT", "/atualizar/carros/{vehicle_id}", vehicle_handler.update_vehicle),
    ("DELETE", "/remover/carros/{vehicle_id}", vehicle_handler.remove_vehicle),

    # ── Sales orders ──────────────────────────────────────
    ("GET", "/lista/pedidos", sales_order_handler.list_orders),
    ("POST", "/novo/pedidos", sales_order_handler.create_order),
    ("PUT", "/atualizar/pedidos/{order_id}", sales_order_handler.update_order),
    ("DELETE", "/remover/pedidos/{order_id}", sales_order_handler.remove_order),
]


def build_router() -> APIRouter:
    """Register every entry of ROUTES on a fresh APIRouter."""
    router = APIRouter()
    for method, path, endpoint in ROUTES:
        router.add_api_route(path, endpoint, methods=[method])
    return router
