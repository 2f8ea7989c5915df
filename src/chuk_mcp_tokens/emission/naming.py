"""
Name helpers shared by the emitters.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from chuk_mcp_tokens.transforms.references import BRACE_EXPRESSION

# Word boundaries: "HeadingH1" -> Heading, H, 1; "XMLHttp" -> XML, Http
_WORDS = re.compile(r"[A-Z]?[a-z]+|[0-9]+|[A-Z]+(?![a-z])|[^\W\d_]+")


def words(text: str) -> list[str]:
    """Split text into words on case, digit and punctuation boundaries."""
    return _WORDS.findall(text)


def kebab_case(text: str | Iterable[str]) -> str:
    """
    Lower-case words joined by hyphens.

    Accepts a string or a token path; path segments are joined with
    spaces first. `{text.Heading H1}` -> `text-heading-h-1`.
    """
    if not isinstance(text, str):
        text = " ".join(text)
    return "-".join(word.lower() for word in words(text))


def reference_to_var(value: str) -> str:
    """Replace every `{a.b}` reference with `var(--a-b)`."""
    return BRACE_EXPRESSION.sub(lambda m: f"var(--{kebab_case(m.group(0)[1:-1])})", value)
