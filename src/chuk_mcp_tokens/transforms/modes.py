"""
Mode embedder - folds per-mode values into one CSS expression.

A token whose light and dark values differ becomes a single value that
switches on externally set flags, so the generated stylesheet needs no
runtime mode awareness:

- colors:      light-dark(<light>, <dark>)
- other types: var(--is-light, <light>) var(--is-dark, <dark>)
- density:     var(--is-size-base, <b>) var(--is-size-compact, <c>) ...

Only the two known partitions are embedded. Any other mode set is left
alone.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_tokens.constants import (
    DENSITY_FLAGS,
    DENSITY_MODES,
    SCHEME_FLAGS,
    SCHEME_MODES,
    TokenType,
)
from chuk_mcp_tokens.models.token import Token


def css_text(value: Any) -> str:
    """Render a scalar the way it appears inside a CSS expression."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def flag_fallbacks(modes: dict[str, Any], flags: dict[str, str], order: tuple[str, ...]) -> str:
    """`var(--flag, value)` per mode, space separated."""
    return " ".join(f"var({flags[mode]}, {css_text(modes[mode])})" for mode in order)


def embed_scheme(token: Token, modes: dict[str, Any]) -> Token:
    """Embed a Light/Dark mode set."""
    light, dark = modes["Light"], modes["Dark"]
    if light == dark:
        return token

    if token.type == TokenType.COLOR.value:
        value = f"light-dark({css_text(light)}, {css_text(dark)})"
    else:
        value = flag_fallbacks(modes, SCHEME_FLAGS, SCHEME_MODES)

    return token.evolve(value=value)


def embed_density(token: Token, modes: dict[str, Any]) -> Token:
    """Embed a Base/Compact/Comfortable mode set."""
    base, compact, comfortable = (modes[mode] for mode in DENSITY_MODES)
    if base == compact == comfortable:
        return token

    return token.evolve(value=flag_fallbacks(modes, DENSITY_FLAGS, DENSITY_MODES))


def embed_modes(token: Token) -> Token:
    """
    Collapse a token's mode set into its value where modes diverge.

    Args:
        token: Token, with or without modes

    Returns:
        The token, with `value` replaced when an embedding rule applies
    """
    modes = token.modes
    if not modes:
        return token

    keys = set(modes)
    if keys == set(SCHEME_MODES):
        return embed_scheme(token, modes)
    if keys == set(DENSITY_MODES):
        return embed_density(token, modes)

    return token
