"""
Unit converter - pixel values to rem.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from chuk_mcp_tokens.constants import BASE_FONT_SIZE_PX
from chuk_mcp_tokens.models.token import Token

PIXEL_VALUE = re.compile(r"^\s*(-?(?:\d+(?:\.\d*)?|\.\d+))(?:px)?\s*$")


def format_number(number: float) -> str:
    """Shortest plain decimal form: 1.0 -> '1', 6.25e-05 -> '0.0000625'."""
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def px_to_rem(value: Any, base: int = BASE_FONT_SIZE_PX) -> Any:
    """
    Convert a `<n>px` or bare `<n>` string to `<n / base>rem`.

    Anything else (references, other units, non-string numbers) is returned
    unchanged; a reference is converted where the referenced token lives.
    """
    if not isinstance(value, str) or "{" in value:
        return value

    match = PIXEL_VALUE.match(value)
    if match is None:
        return value

    return f"{format_number(float(match.group(1)) / base)}rem"


def convert_token_units(token: Token) -> Token:
    """Convert a token's value and each mode value from px to rem."""
    updated = token.evolve(value=px_to_rem(token.value))

    modes = token.modes
    if modes:
        updated = updated.with_modes({mode: px_to_rem(value) for mode, value in modes.items()})

    return updated
