import logging
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from tourpro.exceptions import ServiceError

logger = logging.getLogger(__name__)


def _error_body(message: str) -> dict:
    return {"success": False, "message": message}


def _validation_message(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        text = error.get("msg", "Invalid value")
        messages.append(f"{field}: {text}" if field else text)
    return ". ".join(messages) or "Invalid request"


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(content=_error_body(exc.message), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            content=_error_body(str(exc.detail)),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(content=_error_body(_validation_message(exc)), status_code=400)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(content=_error_body(str(exc) or "Internal Server Error"), status_code=500)
