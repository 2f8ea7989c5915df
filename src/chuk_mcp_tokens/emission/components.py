"""
Utility-class backend - one class per typography style.

Each typography composite becomes a class whose body applies the
matching Tailwind utilities:

    .typography-heading-h-1 {
      @apply font-heading text-heading-h-1 leading-heading-h-1 font-bold uppercase;
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_tokens.constants import GENERATED_FILE_HEADER
from chuk_mcp_tokens.emission.dictionary import FlatToken
from chuk_mcp_tokens.emission.naming import kebab_case
from chuk_mcp_tokens.models.config import PlatformOptions
from chuk_mcp_tokens.transforms.modes import css_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Facet:
    """
    How one typography field maps to a utility class.

    `class_map` maps known enum values to a class suffix, or to None
    when the value needs no class at all.
    """

    prop: str
    class_root: str | None = None
    class_map: dict[str, str | None] = field(default_factory=dict)

    @property
    def prefix(self) -> str:
        return f"{self.class_root}-" if self.class_root else ""


TYPOGRAPHY_FACETS: tuple[Facet, ...] = (
    Facet("fontFamily", class_root="font"),
    Facet("fontSize", class_root="text"),
    Facet("lineHeight", class_root="leading"),
    Facet("fontWeight", class_root="font"),
    Facet("letterSpacing", class_root="tracking"),
    Facet(
        "textCase",
        class_map={
            "ORIGINAL": None,
            "UPPER": "uppercase",
            "LOWER": "lowercase",
            "TITLE": None,
        },
    ),
    Facet(
        "fontStyle",
        class_map={
            "normal": None,
            "italic": "italic",
        },
    ),
    Facet(
        "textDecoration",
        class_map={
            "NONE": None,
            "UNDERLINE": "underline",
            "STRIKETHROUGH": "line-through",
        },
    ),
)


def facet_class(facet: Facet, value: Any) -> str | None:
    """
    The utility class for one facet value, or None when none applies.

    Table values map through the table; references become the kebab-cased
    reference (`{font.Heading}` -> `font-heading`); anything else becomes
    an arbitrary-value class (`font-[600]`).
    """
    if isinstance(value, str) and value in facet.class_map:
        suffix = facet.class_map[value]
        return facet.prefix + suffix if suffix else None

    if isinstance(value, str) and "{" in value:
        return kebab_case(value)

    return f"{facet.prefix}[{css_text(value)}]"


def utility_classes(composite: dict[str, Any]) -> list[str]:
    """Ordered, de-duplicated utility classes for a typography composite."""
    classes: list[str] = []

    for facet in TYPOGRAPHY_FACETS:
        value = composite.get(facet.prop)
        if value is None:
            continue
        class_name = facet_class(facet, value)
        if class_name and class_name not in classes:
            classes.append(class_name)

    return classes


def class_block(name: str, classes: list[str]) -> str:
    return f".{name} {{\n  @apply {' '.join(classes)};\n}}"


def format_components(tokens: list[FlatToken], options: PlatformOptions) -> str:
    """
    `custom/components` - an `@apply` class per typography token.

    Classes are derived from the token's untransformed composite value,
    so references keep their token-path form.
    """
    blocks = []

    for token in tokens:
        composite = token.original.value
        if not isinstance(composite, dict):
            logger.debug("Skipping non-composite token %s", token.name)
            continue
        blocks.append(class_block(token.name, utility_classes(composite)))

    return GENERATED_FILE_HEADER + "\n\n".join(blocks) + "\n"
