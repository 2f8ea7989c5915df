"""
Named emission transforms.

Each transform takes a FlatToken and returns a FlatToken. Transforms only
touch the tokens they apply to and pass everything else through.
"""

from __future__ import annotations

import re
from typing import Any

from chuk_mcp_tokens.constants import TokenType
from chuk_mcp_tokens.emission.dictionary import FlatToken
from chuk_mcp_tokens.emission.naming import kebab_case
from chuk_mcp_tokens.transforms.modes import css_text

_QUOTED = re.compile(r"""^(["']).*\1$""")


def name_kebab(token: FlatToken) -> FlatToken:
    """`name/kebab` - name is the kebab-cased full path."""
    return token.with_name(kebab_case(token.path))


def quote_font_name(font: str) -> str:
    """Quote a font name containing whitespace unless it is quoted already."""
    font = font.strip()
    if not _QUOTED.match(font) and re.search(r"\s", font):
        return f"'{font}'"
    return font


def font_family_css(value: Any) -> Any:
    """Render a font family (or family stack) as a CSS font-family value."""
    if isinstance(value, list):
        return ", ".join(quote_font_name(str(font)) for font in value)
    if isinstance(value, str) and "{" not in value:
        return quote_font_name(value)
    return value


def font_family(token: FlatToken) -> FlatToken:
    """
    `fontFamily/css` - font family stacks as CSS.

    Applies to fontFamily tokens and to the `fontFamily` field of
    typography composites.
    """
    if token.type == TokenType.FONT_FAMILY.value:
        return token.with_value(font_family_css(token.value))

    if token.type == TokenType.TYPOGRAPHY.value and isinstance(token.value, dict):
        if "fontFamily" in token.value:
            value = dict(token.value)
            value["fontFamily"] = font_family_css(value["fontFamily"])
            return token.with_value(value)

    return token


def stringify_shadow(shadow: Any) -> str:
    """
    Flatten one shadow layer to CSS shorthand.

    `[inset ]<x> <y> <blur> [<spread> ]<color>`; offsets and blur default
    to 0, color to black. Strings (e.g. references) pass through.
    """
    if not isinstance(shadow, dict):
        return css_text(shadow)

    def field(name: str, default: Any) -> str:
        value = shadow.get(name)
        return css_text(default if value is None else value)

    inset = "inset " if shadow.get("inset") else ""
    offset_x = field("offsetX", 0)
    offset_y = field("offsetY", 0)
    blur = field("blur", 0)
    spread = shadow.get("spread")
    spread_text = f"{css_text(spread)} " if spread else ""
    color = field("color", "#000000")

    return f"{inset}{offset_x} {offset_y} {blur} {spread_text}{color}"


def shadow(token: FlatToken) -> FlatToken:
    """`custom/shadow` - shadow composites to CSS box-shadow text."""
    if token.type != TokenType.SHADOW.value:
        return token

    value = token.value
    if isinstance(value, list):
        return token.with_value(", ".join(stringify_shadow(layer) for layer in value))
    if isinstance(value, dict):
        return token.with_value(stringify_shadow(value))

    # Already a string (for instance a reference)
    return token
