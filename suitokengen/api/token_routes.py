import logging
from functools import lru_cache

from fastapi import APIRouter, Depends

from suitokengen import __version__
from suitokengen.api.models import (
    ApiResponse,
    CreateTokenRequest,
    GeneratedTokenData,
    VerifyContentRequest,
    VerifyUrlRequest,
)
from suitokengen.domain.models import SourceLocation
from suitokengen.infrastructure.services.setup import Services, setup_services

api = APIRouter(tags=["token"])

logger = logging.getLogger(__name__)


@lru_cache()
def get_services() -> Services:
    """Services shared by every request; they hold no per-request state."""
    return setup_services()


@api.post("/create", response_model=ApiResponse)
def create_token(payload: CreateTokenRequest, services: Services = Depends(get_services)):
    generated = services.token_generator.create(
        decimals=payload.decimals,
        name=payload.name,
        symbol=payload.symbol,
        description=payload.description,
        is_frozen=payload.is_frozen,
        environment=payload.environment,
    )
    return ApiResponse(
        message="Creation successful",
        data=GeneratedTokenData(**generated.to_dict()),
    )


@api.post("/verify_url", response_model=ApiResponse)
def verify_url(payload: VerifyUrlRequest, services: Services = Depends(get_services)):
    logger.info("Verifying repository %s", payload.url)
    verified = services.verification_service.verify_from_source(
        SourceLocation.remote(payload.url)
    )
    return ApiResponse(
        message="Verified successfully",
        data={"files": [str(path) for path in verified]},
    )


@api.post("/verify_content", response_model=ApiResponse)
def verify_content(
    payload: VerifyContentRequest, services: Services = Depends(get_services)
):
    services.verification_service.verify(payload.content)
    return ApiResponse(message="Verified successfully")


@api.get("/health", response_model=ApiResponse)
def health():
    return ApiResponse(message="ok", data={"status": "ok", "version": __version__})
