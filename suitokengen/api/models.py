"""Request and response bodies of the token generator API."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CreateTokenRequest(BaseModel):
    decimals: int = Field(..., ge=0, le=255)
    name: str
    symbol: str
    description: str = ""
    is_frozen: bool = False
    environment: str = "devnet"


class VerifyUrlRequest(BaseModel):
    url: str


class VerifyContentRequest(BaseModel):
    content: str


class GeneratedTokenData(BaseModel):
    token_content: str
    move_toml: str
    test_token_content: str


class ApiResponse(BaseModel):
    """Envelope for successful responses."""

    success: bool = True
    message: str
    data: Optional[Any] = None


class ErrorResponse(BaseModel):
    """Envelope for failed responses."""

    success: bool = False
    error: str
    message: str
    field: Optional[str] = None
    path: Optional[str] = None
    operation: Optional[str] = None
