# File: suitokengen/infrastructure/parsing/parameter_extractor.py

"""Recover token parameters from the `coin::create_currency` call in Move source."""

import logging
from typing import Iterator, List

from suitokengen.domain.models import ExtractedParams
from suitokengen.infrastructure.parsing.content_normalizer import normalize

logger = logging.getLogger(__name__)

WITNESS_MARKER = "witness"
FREEZE_MARKER = "transfer::public_freeze_object"
BYTE_STRING_PREFIX = 'b"'
CALL_TERMINATORS = (");", ")", "option::none(),")
MIN_ARGUMENTS = 4
U8_MAX = 255


def _trim_suffix(text: str, suffix: str) -> str:
    """Remove every trailing repetition of ``suffix``."""
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _trim_prefix(text: str, prefix: str) -> str:
    """Remove every leading repetition of ``prefix``."""
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _strip_byte_string(arg: str) -> str:
    return _trim_suffix(_trim_prefix(arg, BYTE_STRING_PREFIX), '"')


def _parse_decimals(arg: str) -> int:
    try:
        value = int(arg.strip())
    except ValueError:
        return 0
    if not 0 <= value <= U8_MAX:
        return 0
    return value


def collect_call_arguments(tokens: Iterator[str]) -> List[str]:
    """Group the tokens following a witness marker into call arguments.

    A token starting with ``b"`` closes the argument collected so far and
    opens a new one. A token ending the call (``);``, ``)`` or
    ``option::none(),``) closes the last argument and stops the scan. Tokens
    within one argument are re-joined with single spaces.

    Args:
        tokens: Whitespace-separated tokens, positioned just after the marker.
            Consumed up to and including the terminating token.

    Returns:
        The raw arguments, still carrying their ``b"`` prefixes.
    """
    args: List[str] = []
    buffer = ""
    for token in tokens:
        if token.endswith(CALL_TERMINATORS):
            args.append(buffer.rstrip(");"))
            break

        if token.startswith(BYTE_STRING_PREFIX):
            args.append(_trim_prefix(buffer.rstrip(","), ' b"'))
            buffer = ""

        piece = _trim_suffix(token, '",')
        buffer = f"{buffer} {piece}" if buffer else piece
    return args


def extract(move_source: str) -> ExtractedParams:
    """Best-effort extraction of decimals, symbol, name, description and freeze flag.

    The scan only understands the call shape produced by the token template:
    ``coin::create_currency(witness, 6, b"SYM", b"Name", b"Text", option::none(), ctx)``.
    Anything else yields zero values rather than an error.
    """
    decimals = 0
    symbol = ""
    name = ""
    description = ""
    is_frozen = False

    tokens = iter(normalize(move_source).split())
    for token in tokens:
        if WITNESS_MARKER in token:
            args = collect_call_arguments(tokens)
            if len(args) >= MIN_ARGUMENTS:
                decimals = _parse_decimals(args[0])
                symbol = _strip_byte_string(args[1])
                name = _strip_byte_string(args[2])
                description = _strip_byte_string(args[3])
        elif FREEZE_MARKER in token:
            is_frozen = True

    extracted = ExtractedParams(
        decimals=decimals,
        symbol=symbol,
        name=name,
        description=description,
        is_frozen=is_frozen,
    )
    logger.debug("Extracted token parameters: %s", extracted)
    return extracted
