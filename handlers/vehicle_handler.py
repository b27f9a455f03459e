"""
handlers/vehicle_handler.py
---------------------------
HTTP handlers for the vehicle resource.
"""

from fastapi import Body, Depends
from fastapi.responses import JSONResponse

from handlers.common import invalid_id, parse_id, parse_int, reply
from handlers.deps import get_vehicle_repo
from models.vehicle import Vehicle
from repositories.vehicle_repo import VehicleRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def _vehicle_from_body(body: dict, vehicle_id: int = 0) -> Vehicle:
    return Vehicle(
        brand=body["marca"],
        model=body["modelo"],
        year=parse_int(body["ano"]),
        color=body["cor"],
        id=vehicle_id,
    )


def list_vehicles(repo: VehicleRepository = Depends(get_vehicle_repo)) -> JSONResponse:
    """GET /lista/carros"""
    try:
        vehicles = repo.list_all()
        if vehicles is not None:
            logger.debug(f"Listing {len(vehicles)} vehicles")
            return JSONResponse(status_code=200, content=[v.to_dict() for v in vehicles])
    except Exception as e:
        logger.error(f"Erro ao serializar listagem de carros. {e!r}")
    logger.error("Erro ao acessar listagem de carros")
    return reply(400, "Não foi possível acessar a listagem de carros")


def create_vehicle(
    body: dict = Body(...),
    repo: VehicleRepository = Depends(get_vehicle_repo),
) -> JSONResponse:
    """POST /novo/carros - body `{marca, modelo, ano, cor}`."""
    try:
        if repo.create(_vehicle_from_body(body)):
            return reply(200, "Carro cadastrado com sucesso!")
        return reply(400, "Erro ao cadastrar o carro. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao cadastrar um carro. {e!r}")
        return reply(400, "Não foi possível cadastrar o carro. Entre em contato com o administrador do sistema.")


def remove_vehicle(
    vehicle_id: str,
    repo: VehicleRepository = Depends(get_vehicle_repo),
) -> JSONResponse:
    """DELETE /remover/carros/{vehicle_id}"""
    parsed_id = parse_id(vehicle_id)
    if parsed_id is None:
        return invalid_id(vehicle_id)
    try:
        if repo.remove(parsed_id):
            return reply(200, "Carro removido com sucesso!")
        return reply(400, "Erro ao remover o carro. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao remover um carro. {e!r}")
        return reply(400, "Não foi possível remover o carro. Entre em contato com o administrador do sistema.")


def update_vehicle(
    vehicle_id: str,
    body: dict = Body(...),
    repo: VehicleRepository = Depends(get_vehicle_repo),
) -> JSONResponse:
    """PUT /atualizar/carros/{vehicle_id}"""
    parsed_id = parse_id(vehicle_id)
    if parsed_id is None:
        return invalid_id(vehicle_id)
    try:
        if repo.update(_vehicle_from_body(body, parsed_id)):
            return reply(200, "Carro atualizado com sucesso!")
        return reply(400, "Erro ao atualizar o carro. Entre em contato com o administrador do sistema.")
    except Exception as e:
        logger.error(f"Erro ao atualizar um carro. {e!r}")
        return reply(400, "Não foi possível atualizar o carro. Entre em contato com o administrador do sistema.")
