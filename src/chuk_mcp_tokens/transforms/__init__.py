"""
Value-level passes applied to individual tokens.

- references: source alias paths -> target namespaces
- modes: per-mode values -> one conditional expression
- units: px -> rem
"""

from chuk_mcp_tokens.transforms.modes import css_text, embed_modes
from chuk_mcp_tokens.transforms.references import (
    REWRITE_RULES,
    find_unrecognized_references,
    is_reference,
    rewrite_references,
    rewrite_token,
    rewrite_value,
)
from chuk_mcp_tokens.transforms.units import convert_token_units, px_to_rem

__all__ = [
    # Modes
    "css_text",
    "embed_modes",
    # References
    "REWRITE_RULES",
    "find_unrecognized_references",
    "is_reference",
    "rewrite_references",
    "rewrite_token",
    "rewrite_value",
    # Units
    "convert_token_units",
    "px_to_rem",
]
