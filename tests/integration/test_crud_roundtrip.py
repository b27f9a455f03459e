"""
Round trips against a real PostgreSQL.
Set TEST_DATABASE_URL to a disposable database to run them; its tables are truncated.
"""

import os
import uuid

import pytest
from fastapi.testclient import TestClient

from db.connection import Database
from db.init_db import create_tables
from main import create_app

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set")


@pytest.fixture(scope="module")
def database():
    db = Database(TEST_DATABASE_URL)
    if not db.connect():
        pytest.skip("test database unreachable")
    create_tables(db)
    db.execute("TRUNCATE pedido_venda, carro, cliente RESTART IDENTITY CASCADE;")
    yield db
    db.close()


@pytest.fixture
def api(database):
    return TestClient(create_app(database))


def _find(listing, key, value):
    return next((item for item in listing if item[key] == value), None)


def _new_client(api):
    cpf = uuid.uuid4().hex[:11]
    body = {"nome": "Ana", "cpf": cpf, "telefone": "999"}
    assert api.post("/novo/clientes", json=body).status_code == 200
    return _find(api.get("/lista/clientes").json(), "cpf", cpf)


def test_create_then_list_client(api):
    created = _new_client(api)

    assert created is not None
    assert created["nome"] == "Ana"
    assert created["telefone"] == "999"
    assert isinstance(created["idCliente"], int) and created["idCliente"] > 0


def test_update_keeps_identifier(api):
    created = _new_client(api)
    body = {"nome": "Ana Paula", "cpf": created["cpf"], "telefone": "555"}

    response = api.put(f"/atualizar/clientes/{created['idCliente']}", json=body)

    assert response.status_code == 200
    after = _find(api.get("/lista/clientes").json(), "idCliente", created["idCliente"])
    assert after == {"idCliente": created["idCliente"], **body}


def test_delete_then_absent(api):
    created = _new_client(api)

    assert api.delete(f"/remover/clientes/{created['idCliente']}").status_code == 200
    assert _find(api.get("/lista/clientes").json(), "idCliente", created["idCliente"]) is None

    again = api.delete(f"/remover/clientes/{created['idCliente']}")
    assert again.status_code == 400


def test_update_absent_client_is_400(api):
    response = api.put("/atualizar/clientes/987654", json={"nome": "x", "cpf": "y", "telefone": "z"})

    assert response.status_code == 400


def test_sales_order_round_trip(api):
    client = _new_client(api)
    car = {"marca": "Fiat", "modelo": "Uno", "ano": 2010, "cor": uuid.uuid4().hex[:8]}
    assert api.post("/novo/carros", json=car).status_code == 200
    vehicle = _find(api.get("/lista/carros").json(), "cor", car["cor"])

    order = {
        "idCliente": client["idCliente"],
        "idCarro": vehicle["idCarro"],
        "dataPedido": "2024-05-01",
        "valorPedido": 32500.5,
    }
    assert api.post("/novo/pedidos", json=order).status_code == 200

    listed = [
        o for o in api.get("/lista/pedidos").json()
        if o["idCliente"] == client["idCliente"]
    ]
    assert len(listed) == 1
    assert {k: listed[0][k] for k in order} == order


def test_sales_order_with_unknown_client_is_400(api):
    order = {"idCliente": 987654, "idCarro": 987654, "dataPedido": "2024-05-01", "valorPedido": 1}

    response = api.post("/novo/pedidos", json=order)

    assert response.status_code == 400


def _new_vehicle(api):
    car = {"marca": "Fiat", "modelo": "Uno", "ano": 2010, "cor": uuid.uuid4().hex[:8]}
    assert api.post("/novo/carros", json=car).status_code == 200
    return _find(api.get("/lista/carros").json(), "cor", car["cor"])


def test_vehicle_update_keeps_identifier(api):
    created = _new_vehicle(api)
    body = {"marca": "Fiat", "modelo": "Palio", "ano": 2012, "cor": uuid.uuid4().hex[:8]}

    response = api.put(f"/atualizar/carros/{created['idCarro']}", json=body)

    assert response.status_code == 200
    after = _find(api.get("/lista/carros").json(), "idCarro", created["idCarro"])
    assert after == {"idCarro": created["idCarro"], **body}


def test_sales_order_update_keeps_identifier(api):
    client = _new_client(api)
    first_car = _new_vehicle(api)
    second_car = _new_vehicle(api)
    order = {
        "idCliente": client["idCliente"],
        "idCarro": first_car["idCarro"],
        "dataPedido": "2024-05-01",
        "valorPedido": 32500.5,
    }
    assert api.post("/novo/pedidos", json=order).status_code == 200
    created = _find(api.get("/lista/pedidos").json(), "idCliente", client["idCliente"])

    changed = {**order, "idCarro": second_car["idCarro"], "dataPedido": "2024-06-15", "valorPedido": 41000}
    response = api.put(f"/atualizar/pedidos/{created['idPedidoVenda']}", json=changed)

    assert response.status_code == 200
    after = _find(api.get("/lista/pedidos").json(), "idPedidoVenda", created["idPedidoVenda"])
    assert after == {"idPedidoVenda": created["idPedidoVenda"], **changed}
