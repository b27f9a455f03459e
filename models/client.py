"""
models/client.py
----------------
Domain model for dealership clients.
"""

from dataclasses import dataclass


@dataclass
class Client:
    """
    Represents a client of the dealership.

    Attributes:
        name: Full name.
        cpf: National tax ID (CPF), stored as text.
        phone: Contact phone, stored as text.
        id: Database primary key (0 until persisted).
    """
    name: str
    cpf: str
    phone: str
    id: int = 0

    def to_dict(self) -> dict:
        return {
            "idCliente": self.id,
            "nome": self.name,
            "cpf": self.cpf,
            "telefone": self.phone,
        }

    def __str__(self) -> str:
        return f"#{self.id} {self.name} (CPF {self.cpf})"
