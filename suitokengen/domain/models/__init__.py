from .token_params import (
    Environment,
    ExtractedParams,
    TokenParams,
    sanitize_name,
    sanitize_repo_name,
)
from .source_location import SourceKind, SourceLocation

__all__ = [
    "Environment",
    "ExtractedParams",
    "TokenParams",
    "sanitize_name",
    "sanitize_repo_name",
    "SourceKind",
    "SourceLocation",
]
