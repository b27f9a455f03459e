"""
handlers/client_handler.py
--------------------------
HTTP handlers for the client resource.
Delegates all persistence to ClientRepository and maps its result to a status code.
"""

from fastapi import Body, Depends
from fastapi.responses import JSONResponse

from handlers.common import invalid_id, parse_id, reply
from handlers.deps import get_client_repo
from models.client import Client
from repositories.client_repo import ClientRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def list_clients(repo: ClientRepository = Depends(get_client_repo)) -> JSONResponse:
    """GET /lista/clientes - every client as a JSON array."""
    try:
        clients = repo.list_all()
        if clients is not None:
            logger.debug(f"Listing {len(clients)} clients")
            return JSONResponse(status_code=200, content=[c.to_dict() for c in clients])
    except Exception as e:
        logger.error(f"Erro ao serializar listagem de clientes. {e!r}")
    logger.error("Erro ao acessar listagem de clientes")
    return reply(400, "Não foi possível acessar a listagem de clientes")


def create_client(
    body: dict = Body(...),
    repo: ClientRepository = Depends(get_client_repo),
) -> JSONResponse:
    """POST /novo/clientes - body `{nome, cpf, telefone}`."""
    try:
        client = Client(name=body["nome"], cpf=body["cpf"], phone=body["telefone"])
        if repo.create(client):
            return reply(200, "Cliente cadastrado com sucesso!")
        return reply(400, "Erro ao cadastrar o cliente. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao cadastrar um cliente. {e!r}")
        return reply(400, "Não foi possível cadastrar o cliente. Entre em contato com o administrador do sistema.")


def remove_client(
    client_id: str,
    repo: ClientRepository = Depends(get_client_repo),
) -> JSONResponse:
    """DELETE /remover/clientes/{client_id}"""
    parsed_id = parse_id(client_id)
    if parsed_id is None:
        return invalid_id(client_id)
    try:
        if repo.remove(parsed_id):
            return reply(200, "Cliente removido com sucesso!")
        return reply(400, "Erro ao remover o cliente. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao remover um cliente. {e!r}")
        return reply(400, "Não foi possível remover o cliente. Entre em contato com o administrador do sistema.")


def update_client(
    client_id: str,
    body: dict = Body(...),
    repo: ClientRepository = Depends(get_client_repo),
) -> JSONResponse:
    """PUT /atualizar/clientes/{client_id} - every field is rewritten."""
    parsed_id = parse_id(client_id)
    if parsed_id is None:
        return invalid_id(client_id)
    try:
        client = Client(name=body["nome"], cpf=body["cpf"], phone=body["telefone"], id=parsed_id)
        if repo.update(client):
            return reply(200, "Cliente atualizado com sucesso!")
        return reply(400, "Erro ao atualizar o cliente. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao atualizar um cliente. {e!r}")
        return reply(400, "Não foi possível atualizar o cliente. Entre em contato com o administrador do sistema.")
