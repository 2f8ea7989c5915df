"""
Reference rewriter - moves alias paths into the target namespaces.

The export refers to other tokens with brace expressions such as
`{Color Primitives.Gray.900}`. The generated theme names the same token
`{color.Gray.900}`. Every brace expression in a value is rewritten on its
own through an ordered rule table; expressions no rule matches pass
through untouched.

Every rule matches only a source-side namespace (`Theme`, `Size`,
`Color Primitives`, `Typography Primitives`) right after the opening
brace, and every replacement starts with a target namespace, so a
rewritten expression never matches again: the rewrite is idempotent.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from chuk_mcp_tokens.constants import SourceGroup
from chuk_mcp_tokens.models.token import Token

logger = logging.getLogger(__name__)

BRACE_EXPRESSION = re.compile(r"\{[^{}]*\}")

# Ordered (pattern, replacement) rules, applied to each brace expression
REWRITE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^\{Theme\.([^{}]+)\.Font Family( [^{}]+)?\}$"), r"{font.\1\2}"),
    (re.compile(r"^\{Theme\.([^{}]+)\.Font Size( [^{}]+)?\}$"), r"{text.\1\2}"),
    (re.compile(r"^\{Theme\.([^{}]+)\.Letter Spacing( [^{}]+)?\}$"), r"{tracking.\1\2}"),
    (re.compile(r"^\{Theme\.([^{}]+)\.Line Height( [^{}]+)?\}$"), r"{leading.\1\2}"),
    (re.compile(r"^\{Size\.Depth\."), "{spacing.Depth."),
    (re.compile(r"^\{Color Primitives\."), "{color."),
    (re.compile(r"^\{Typography Primitives\.Scale\.Scale "), "{text."),
    (re.compile(r"^\{Typography Primitives\.Weight\.Weight "), "{font-weight."),
    (re.compile(r"^\{Typography Primitives\.([^{}]+)\.Family "), r"{font.\1."),
)

# Namespaces that only exist on the export side
_SOURCE_NAMESPACES: tuple[str, ...] = tuple(
    f"{{{group.value}." for group in SourceGroup
)


def is_reference(value: Any) -> bool:
    """Whether a value is a string carrying at least one brace expression."""
    return isinstance(value, str) and BRACE_EXPRESSION.search(value) is not None


def rewrite_expression(expression: str) -> str:
    """Rewrite a single `{...}` expression through the rule table."""
    for pattern, replacement in REWRITE_RULES:
        expression = pattern.sub(replacement, expression)
    return expression


def rewrite_references(value: str) -> str:
    """
    Rewrite every brace expression in a string.

    Args:
        value: Any string; text outside braces is never touched

    Returns:
        The rewritten string
    """
    if "{" not in value:
        return value

    def _replace(match: re.Match[str]) -> str:
        rewritten = rewrite_expression(match.group(0))
        if rewritten.startswith(_SOURCE_NAMESPACES):
            logger.debug("No rewrite rule for reference %s", rewritten)
        return rewritten

    return BRACE_EXPRESSION.sub(_replace, value)


def find_unrecognized_references(value: str) -> list[str]:
    """
    Brace expressions that still use a source namespace after rewriting.

    These are references no rule knows about. They pass through the
    pipeline unchanged; this helper only reports them.
    """
    rewritten = rewrite_references(value)
    return [
        match.group(0)
        for match in BRACE_EXPRESSION.finditer(rewritten)
        if match.group(0).startswith(_SOURCE_NAMESPACES)
    ]


def rewrite_value(value: Any) -> Any:
    """Rewrite references in a value, descending into lists and dicts."""
    if isinstance(value, str):
        return rewrite_references(value)
    if isinstance(value, list):
        return [rewrite_value(item) for item in value]
    if isinstance(value, dict):
        return {key: rewrite_value(item) for key, item in value.items()}
    return value


def rewrite_token(token: Token) -> Token:
    """
    Rewrite references in a token's value and in each of its modes.

    Composite values (shadows, typography) are rewritten field by field.
    """
    updated = token.evolve(value=rewrite_value(token.value))

    modes = token.modes
    if modes:
        updated = updated.with_modes(rewrite_value(modes))

    return updated
