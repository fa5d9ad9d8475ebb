"""Entrypoint of the token generator API exposing the FastAPI `app` to be served by an application server such as uvicorn."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from suitokengen import __version__
from suitokengen.api.models import ErrorResponse
from suitokengen.api.token_routes import api as token_api
from suitokengen.application.services.exceptions import (
    GitCloneError,
    SourceAcquisitionError,
    TamperedError,
    TokenGenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

description = """
Generate Sui coin packages (Move module, unit tests and Move.toml) and verify
that existing coin contracts match the canonical template.
"""

app = FastAPI(
    title="Sui Token Generator API",
    version=__version__,
    description=description,
    openapi_tags=[{"name": "token", "description": "Create and verify coin contracts"}],
)

app.add_middleware(GZipMiddleware)

feature_apis = [
    token_api,
]

for feature_api in feature_apis:
    app.include_router(feature_api)


def status_code_for(error: TokenGenError) -> int:
    """HTTP status for an error kind."""
    if isinstance(error, TamperedError):
        return 409
    if isinstance(error, GitCloneError):
        return 502
    if isinstance(error, (ValidationError, SourceAcquisitionError)):
        return 400
    # Template and filesystem faults are server-side
    return 500


@app.exception_handler(TokenGenError)
async def token_gen_error_handler(request: Request, exc: TokenGenError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s failed: %s", request.url.path, exc, exc_info=exc)
    else:
        logger.info("%s rejected: %s: %s", request.url.path, exc.kind, exc.message)
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    body = ErrorResponse(
        error=ValidationError.kind,
        message=first.get("msg", "Invalid request body"),
        field=".".join(location) or None,
    )
    return JSONResponse(status_code=422, content=body.model_dump())
