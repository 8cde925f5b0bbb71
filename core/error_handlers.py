import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import EmployeeServiceError

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str, status_code: int, details: list | None = None) -> dict:
    body = {"code": code, "message": message, "status": status_code}
    if details is not None:
        body["details"] = details
    return {"error": body}


def register_error_handlers(app: FastAPI) -> None:
    """Map raised errors to JSON responses; success bodies never pass through here."""

    # EmployeeNotFound -> 404, EmailAlreadyExists -> 409
    @app.exception_handler(EmployeeServiceError)
    async def employee_error(request: Request, exc: EmployeeServiceError):
        logger.warning("%s %s: %s", request.method, request.url.path, exc.message,
                       extra={"error_code": exc.code, "path": request.url.path})
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    # bad body or path parameter
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        details = [
            {"field": ".".join(str(loc) for loc in e["loc"]), "message": e["msg"], "type": e["type"]}
            for e in exc.errors()
        ]
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, details)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("VALIDATION_ERROR", "Invalid employee request", status.HTTP_400_BAD_REQUEST, details),
        )

    # store faults and anything else, message stays generic
    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred", status.HTTP_500_INTERNAL_SERVER_ERROR),
        )
