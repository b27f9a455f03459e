"""
models/sales_order.py
---------------------
Domain model for sales orders (a client buying a vehicle).
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class SalesOrder:
    """
    Represents a single sales order.

    Attributes:
        client_id: Reference to the buying client.
        vehicle_id: Reference to the vehicle sold.
        order_date: Date the order was placed.
        amount: Order value.
        id: Database primary key (0 until persisted).
    """
    client_id: int
    vehicle_id: int
    order_date: date
    amount: Decimal
    id: int = 0

    def to_dict(self) -> dict:
        return {
            "idPedidoVenda": self.id,
            "idCliente": self.client_id,
            "idCarro": self.vehicle_id,
            "dataPedido": self.order_date.isoformat(),
            "valorPedido": float(self.amount),
        }

    def __str__(self) -> str:
        return f"#{self.id} client {self.client_id} / car {self.vehicle_id}: {self.amount:.2f} on {self.order_date}"
