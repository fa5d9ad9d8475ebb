"""
Sui Token Generator: generate Sui coin packages from token parameters and verify that existing coin contracts match the canonical template.
"""

__version__ = "0.1.0"

from suitokengen.application.services.token_generator import (
    GeneratedToken,
    TokenGeneratorService,
)
from suitokengen.application.services.verification_service import VerificationService
from suitokengen.domain.models import Environment, TokenParams
from suitokengen.config import Settings, get_settings

__all__ = [
    "GeneratedToken",
    "TokenGeneratorService",
    "VerificationService",
    "Environment",
    "TokenParams",
    "Settings",
    "get_settings",
]
