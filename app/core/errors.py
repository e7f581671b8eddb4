# core/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class RequirementsError(Exception):
    """Base de los errores de dominio; cada uno sabe con qué código HTTP responder."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RequirementsError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(RequirementsError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(RequirementsError):
    # Un nombre duplicado se sirve como fallo genérico (500), igual que cualquier otro error del store
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UploadError(RequirementsError):
    """Fallo al subir un fichero concreto; el uploader lo captura y sigue con el resto."""


def requirements_error_handler(request: Request, exc: RequirementsError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", ""))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request: " + "; ".join(problems)},
    )


def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequirementsError, requirements_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
