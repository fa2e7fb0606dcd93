import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from docvault.infrastructure.storage.base import StorageError

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации запроса -> 400"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation error", "detail": jsonable_encoder(exc.errors())},
    )


async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.url.path}: {exc} {exc.detail}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Storage error", "error": exc.detail or str(exc)},
    )


async def database_unavailable_handler(request: Request, exc: Exception):
    """БД недоступна -> 503 без повторных попыток"""
    logger.error(f"Database unavailable on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "Database unavailable"},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error", "detail": str(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"{type(exc).__name__} on {request.url.path} (500): {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(OperationalError, database_unavailable_handler)
    # ошибки соединения драйвера (отказ, DNS) не оборачиваются SQLAlchemy
    app.add_exception_handler(OSError, database_unavailable_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
