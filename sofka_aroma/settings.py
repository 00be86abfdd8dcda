import logging
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sofka_aroma.errors import MethodNotAllowed, ValidatorError

# Project-wide response settings
CONTENT_TYPE = "application/json; charset=utf-8"
CACHE_CONTROL = "no-store"
ALLOWED_ORIGIN = "*"
ALLOWED_METHODS = ["POST", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]

RESPONSE_HEADERS = {
    "Content-Type": CONTENT_TYPE,
    "Cache-Control": CACHE_CONTROL,
    "Access-Control-Allow-Origin": ALLOWED_ORIGIN,
    "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
    "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
}


async def validator_error_handler(request: Request, exc: ValidatorError):
    logging.warning(f"{exc.status_code}: {exc.message} ({request.method} {request.url.path})")
    return JSONResponse(
        content={"error": exc.message},
        status_code=exc.status_code,
        headers=RESPONSE_HEADERS,
    )


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # Verbs the route does not list are rejected by the router itself
    if exc.status_code == 405:
        return await validator_error_handler(request, MethodNotAllowed())
    return await http_exception_handler(request, exc)


def configure_app(app: FastAPI):
    """
    Apply exception handlers and project-wide settings to the FastAPI app.
    """
    app.add_exception_handler(ValidatorError, validator_error_handler)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
