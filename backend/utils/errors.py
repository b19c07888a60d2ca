# backend/utils/errors.py
import logging
from typing import Any, Union

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class EntityNotFoundError(Exception):
    """Raised when a get/update/delete targets an identifier that does not exist."""

    def __init__(self, entity: Union[type, str], id: Any):
        self.entity_name = entity if isinstance(entity, str) else entity.__name__
        self.id = id
        super().__init__(f"{self.entity_name} with id {id} not found")


def generic_message(message: str) -> dict:
    return {"message": message}


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"type": type(exc).__name__, "message": str(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Last resort at the boundary: report the failure instead of an empty 500
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"type": type(exc).__name__, "message": str(exc)},
    )
