"""
handlers/sales_order_handler.py
-------------------------------
HTTP handlers for the sales order resource.
Delegates all persistence to SalesOrderRepository.
"""

from fastapi import Body, Depends
from fastapi.responses import JSONResponse

from handlers.common import invalid_id, parse_amount, parse_date, parse_id, parse_int, reply
from handlers.deps import get_sales_order_repo
from models.sales_order import SalesOrder
from repositories.sales_order_repo import SalesOrderRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def _order_from_body(body: dict, order_id: int = 0) -> SalesOrder:
    """
    Build a SalesOrder from `{idCliente, idCarro, dataPedido, valorPedido}`.

    Raises:
        KeyError: A field is missing.
        ValueError / ArithmeticError: A field cannot be converted, or the amount is not finite.
    """
    return SalesOrder(
        client_id=parse_int(body["idCliente"]),
        vehicle_id=parse_int(body["idCarro"]),
        order_date=parse_date(body["dataPedido"]),
        amount=parse_amount(body["valorPedido"]),
        id=order_id,
    )


def list_orders(repo: SalesOrderRepository = Depends(get_sales_order_repo)) -> JSONResponse:
    """GET /lista/pedidos - every sales order as a JSON array."""
    try:
        orders = repo.list_all()
        if orders is not None:
            logger.debug(f"Listing {len(orders)} sales orders")
            return JSONResponse(status_code=200, content=[o.to_dict() for o in orders])
    except Exception as e:
        logger.error(f"Erro ao serializar listagem de pedidos. {e!r}")
    logger.error("Erro ao acessar listagem de pedidos")
    return reply(400, "Não foi possível acessar a listagem de pedidos de venda")


def create_order(
    body: dict = Body(...),
    repo: SalesOrderRepository = Depends(get_sales_order_repo),
) -> JSONResponse:
    """POST /novo/pedidos"""
    try:
        if repo.create(_order_from_body(body)):
            return reply(200, "Pedido de venda cadastrado com sucesso!")
        return reply(400, "Erro ao cadastrar o pedido. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao cadastrar um pedido de venda. {e!r}")
        return reply(400, "Não foi possível cadastrar o pedido. Entre em contato com o administrador do sistema.")


def remove_order(
    order_id: str,
    repo: SalesOrderRepository = Depends(get_sales_order_repo),
) -> JSONResponse:
    """DELETE /remover/pedidos/{order_id}"""
    parsed_id = parse_id(order_id)
    if parsed_id is None:
        return invalid_id(order_id)
    try:
        if repo.remove(parsed_id):
            return reply(200, "Pedido removido com sucesso!")
        return reply(400, "Erro ao remover o pedido. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao remover um pedido. {e!r}")
        return reply(400, "Não foi possível remover o pedido. Entre em contato com o administrador do sistema.")


def update_order(
    order_id: str,
    body: dict = Body(...),
    repo: SalesOrderRepository = Depends(get_sales_order_repo),
) -> JSONResponse:
    """PUT /atualizar/pedidos/{order_id} - every field is rewritten."""
    parsed_id = parse_id(order_id)
    if parsed_id is None:
        return invalid_id(order_id)
    try:
        if repo.update(_order_from_body(body, parsed_id)):
            return reply(200, "Pedido atualizado com sucesso!")
        return reply(400, "Erro ao atualizar o pedido. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao atualizar um pedido. {e!r}")
        return reply(400, "Não foi possível atualizar o pedido. Entre em contato com o administrador do sistema.")
