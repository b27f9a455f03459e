"""
handlers/common.py
------------------
Helpers shared by every resource handler: the `{"mensagem": ...}` reply,
path-id and date parsing, and the 400 reply for malformed request bodies.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from utils.logger import get_logger

logger = get_logger(__name__)

INVALID_REQUEST_MESSAGE = "Requisição inválida. Verifique os dados enviados."


def reply(status_code: int, mensagem: str) -> JSONResponse:
    """Build the JSON message body every non-list endpoint answers with."""
    return JSONResponse(status_code=status_code, content={"mensagem": mensagem})


def invalid_id(raw: str) -> JSONResponse:
    logger.warning(f"Rejected non-numeric identifier: {raw!r}")
    return reply(400, f"Identificador inválido: {raw}")


def parse_id(raw: str) -> Optional[int]:
    """
    Parse a path identifier.

    Returns:
        The integer id, or None if `raw` is not an integer.
    """
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def parse_int(value) -> int:
    """
    Read an integer body field, refusing to truncate fractional numbers.

    Raises:
        ValueError: If the value is not a whole number.
    """
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"not a whole number: {value}")
    return int(value)


def parse_amount(value) -> Decimal:
    """
    Read a money field as a Decimal.

    Raises:
        ValueError: If the value is NaN or infinite.
        decimal.InvalidOperation: If the value is not a number at all.
    """
    amount = Decimal(str(value))
    if not amount.is_finite():
        raise ValueError(f"amount must be finite: {value}")
    return amount


def parse_date(value) -> date:
    """
    Read an order date sent by a client.
    Accepts a plain ISO date or a full ISO timestamp (only the date part is kept).

    Raises:
        ValueError: If the value is not an ISO date.
    """
    return date.fromisoformat(str(value)[:10])


async def invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies with 400 instead of FastAPI's default 422."""
    logger.warning(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
    return reply(400, INVALID_REQUEST_MESSAGE)
