"""API route for validating aroma guesses.

Exposes a single endpoint used by the candle landing page: the visitor scans
a QR code carrying a catalog id (and optionally its signature), types the
scent they smell, and gets a discount code back when the guess is right.
"""

import json
import logging
import traceback
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from sofka_aroma.catalog.catalog import CatalogManager
from sofka_aroma.errors import MethodNotAllowed, ValidatorError
from sofka_aroma.settings import RESPONSE_HEADERS
from sofka_aroma.utils import parse_validation_request, validate_guess


# Every verb is routed here so wrong methods get the JSON 405 body
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

api_router = APIRouter(prefix="/api")


def get_catalog(request: Request) -> CatalogManager:
    return request.app.state.catalog


def get_secret(request: Request) -> str:
    return request.app.state.secret


@api_router.api_route("/validate", methods=ALL_METHODS)
async def validate_endpoint(
        request: Request,
        catalog: CatalogManager = Depends(get_catalog),
        secret: str = Depends(get_secret)):
    """Validate a guess from the request body against the catalog.

    Expects a JSON payload like: {"id": "...", "guess": "...", "sig": "..."}
    Returns 200 with {"ok": true, ...} or {"ok": false}, 400/401/404 for
    rejected requests, or 500 on unexpected errors.
    """
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=RESPONSE_HEADERS)
    if request.method != "POST":
        raise MethodNotAllowed()

    try:
        raw = await request.body()
        data = json.loads(raw or b"{}")
        payload = parse_validation_request(data)
        # first call reads the catalog file, so keep it off the event loop
        result = await run_in_threadpool(validate_guess, payload, catalog, secret)
        return JSONResponse(result.to_body(), status_code=200, headers=RESPONSE_HEADERS)
    except ValidatorError:
        raise
    except Exception as e:
        logging.error(f"Error in validate_endpoint: {str(e)}")
        logging.error(traceback.format_exc())
        return JSONResponse(
            {"error": "Internal error", "detail": str(e)},
            status_code=500,
            headers=RESPONSE_HEADERS,
        )


validate_router = api_router
