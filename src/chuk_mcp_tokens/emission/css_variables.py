"""
CSS variable backend - one custom property per token.

    /**
     * Do not edit directly, this file was auto-generated.
     */

    @theme {
      --color-gray-900: #111111;
      --background-color-default: light-dark(var(--color-white), var(--color-gray-900));
    }
"""

from __future__ import annotations

import json
from typing import Any

from chuk_mcp_tokens.constants import GENERATED_FILE_HEADER
from chuk_mcp_tokens.emission.dictionary import FlatToken
from chuk_mcp_tokens.emission.naming import reference_to_var
from chuk_mcp_tokens.models.config import PlatformOptions
from chuk_mcp_tokens.transforms.modes import css_text

INDENT = "  "


def css_value(value: Any, output_references: bool) -> str:
    """Render a transformed token value as a declaration value."""
    if isinstance(value, list):
        text = ", ".join(css_text(item) for item in value)
    elif isinstance(value, dict):
        text = json.dumps(value, ensure_ascii=False)
    else:
        text = css_text(value)

    return reference_to_var(text) if output_references else text


def declaration(token: FlatToken, output_references: bool) -> str:
    """`--name: value;` with the description as a trailing comment."""
    line = f"--{token.name}: {css_value(token.value, output_references)};"
    if token.description:
        line += f" /* {token.description.replace('*/', '* /')} */"
    return line


def nest_in_selectors(lines: list[str], selectors: list[str]) -> str:
    """Wrap declaration lines in the selectors, outermost first."""
    body = list(lines)
    for selector in reversed(selectors):
        body = [f"{selector} {{", *(f"{INDENT}{line}" for line in body), "}"]
    return "\n".join(body)


def format_css_variables(tokens: list[FlatToken], options: PlatformOptions) -> str:
    """
    `css/variables` - custom properties inside the configured selectors.

    Args:
        tokens: Transformed tokens (names assigned)
        options: `selector` list and `output_references`

    Returns:
        Stylesheet text
    """
    lines = [declaration(token, options.output_references) for token in tokens]
    return GENERATED_FILE_HEADER + nest_in_selectors(lines, options.selector) + "\n"
