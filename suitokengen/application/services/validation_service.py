"""Domain rules for token parameters."""

import re
from dataclasses import dataclass

from suitokengen.application.services.exceptions import ValidationError
from suitokengen.domain.models import sanitize_name

MIN_DECIMALS = 1
MAX_DECIMALS = 99
MAX_SYMBOL_LENGTH = 6

SYMBOL_PATTERN = re.compile(r"[A-Za-z0-9]+")
# Words of letters, digits, commas and periods separated by single spaces,
# the only whitespace the parameter extractor reproduces.
TEXT_PATTERN = re.compile(r"[A-Za-z0-9,.]+( [A-Za-z0-9,.]+)*")
# A lone "," first word or a lone "b" last word sits next to a quote as `b",`,
# which the extractor reads as the start of a byte string.
LONE_COMMA_FIRST_WORD = ", "
LONE_B_LAST_WORD = " b"


@dataclass
class ValidationResult:
    """Outcome of checking a single parameter."""

    is_valid: bool
    message: str = ""


def check_decimals(decimals: int) -> ValidationResult:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        return ValidationResult(False, "Decimals must be a whole number")
    if not MIN_DECIMALS <= decimals <= MAX_DECIMALS:
        return ValidationResult(
            False, f"Decimals must be between {MIN_DECIMALS} and {MAX_DECIMALS}"
        )
    return ValidationResult(True)


def check_symbol(symbol: str) -> ValidationResult:
    if not symbol:
        return ValidationResult(False, "Symbol is required")
    if not SYMBOL_PATTERN.fullmatch(symbol):
        return ValidationResult(False, "Symbol can only contain letters and numbers")
    if len(symbol) > MAX_SYMBOL_LENGTH:
        return ValidationResult(
            False, f"Symbol must be at most {MAX_SYMBOL_LENGTH} characters long"
        )
    return ValidationResult(True)


def _check_quote_neighbours(text: str, label: str) -> ValidationResult:
    if text == "," or text.startswith(LONE_COMMA_FIRST_WORD):
        return ValidationResult(False, f"{label} cannot start with a lone comma")
    if text.endswith(LONE_B_LAST_WORD):
        return ValidationResult(False, f"{label} cannot end with the single letter word b")
    return ValidationResult(True)


def check_name(name: str) -> ValidationResult:
    if not name:
        return ValidationResult(False, "Name is required")
    if not TEXT_PATTERN.fullmatch(name):
        return ValidationResult(
            False,
            "Name can only contain letters, numbers, commas, periods and single spaces",
        )
    if name.endswith(","):
        return ValidationResult(False, "Name cannot end with a comma")
    neighbours = _check_quote_neighbours(name, "Name")
    if not neighbours.is_valid:
        return neighbours
    if not sanitize_name(name):
        return ValidationResult(False, "Name must contain at least one letter or number")
    return ValidationResult(True)


def check_description(description: str) -> ValidationResult:
    if description and not TEXT_PATTERN.fullmatch(description):
        return ValidationResult(
            False,
            "Description can only contain letters, numbers, commas, periods and single spaces",
        )
    if description:
        return _check_quote_neighbours(description, "Description")
    return ValidationResult(True)


def validate_token_params(
    decimals: int, name: str, symbol: str, description: str
) -> None:
    """Apply every parameter rule, raising on the first failure.

    Raises:
        ValidationError: Naming the offending field
    """
    checks = (
        ("decimals", check_decimals(decimals)),
        ("symbol", check_symbol(symbol)),
        ("name", check_name(name)),
        ("description", check_description(description)),
    )
    for field, result in checks:
        if not result.is_valid:
            raise ValidationError(field, result.message)
