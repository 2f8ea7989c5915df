"""
Theme assembler - re-keys the export into Tailwind theme namespaces.

The export is organised the way designers think (a `Theme` group with
Background/Text/Border colors and per-style typography, primitive
palettes, a `Size` scale). The theme tree is organised the way Tailwind
reads theme variables (`color`, `spacing`, `text`, `leading`, ...).
This module is a pure function from one to the other.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import (
    FONT_FAMILY_FALLBACKS,
    UTILITIES_GROUP,
    Namespace,
    SourceGroup,
    TokenType,
)
from chuk_mcp_tokens.models.token import Group, Node, Token, require_group, require_token
from chuk_mcp_tokens.transforms.units import convert_token_units
from chuk_mcp_tokens.tree.mapper import SKIP, MapResult, map_tokens

# Theme sub-groups that hold colors rather than typography
COLOR_GROUPS: tuple[str, ...] = ("Background", "Text", "Icon", "Border")

# Size sub-groups exposed as spacing
SPACING_GROUPS: tuple[str, ...] = ("Space", "Depth", "Icon")

# Typography prefixes inside the theme group
FONT_FAMILY_PREFIX = "Font Family"
FONT_SIZE_PREFIX = "Font Size"
FONT_WEIGHT_PREFIX = "Font Weight"
LETTER_SPACING_PREFIX = "Letter Spacing"
LINE_HEIGHT_PREFIX = "Line Height"


def extract_prefixed_tokens(typography: Group, prefix: str) -> Group:
    """
    Collect typography tokens whose key starts with `prefix`.

    `Heading` / `Font Size Large` becomes `Heading Large`; the group key
    is kept and the prefix dropped.
    """
    result: dict[str, Node] = {}

    for group_key, group in typography.items():
        if not isinstance(group, Group):
            continue
        for token_key, node in group.items():
            if token_key.startswith(prefix):
                result[f"{group_key}{token_key.replace(prefix, '', 1)}"] = node

    return Group(result)


def _to_rem(key: str, token: Token) -> MapResult:
    return key, convert_token_units(token)


def _font_family(key: str, token: Token) -> MapResult:
    value = token.value
    fallback = FONT_FAMILY_FALLBACKS.get(key)
    if fallback is not None:
        value = [value, fallback]

    new_key = key[len("Family ") :] if key.startswith("Family ") else key
    return new_key, token.evolve(type=TokenType.FONT_FAMILY.value, value=value)


def _scale(key: str, token: Token) -> MapResult:
    return key.replace("Scale ", "", 1), token


def _weight(key: str, token: Token) -> MapResult:
    if key.endswith(" Italic"):
        return SKIP
    new_key = key[len("Weight ") :] if key.startswith("Weight ") else key
    return new_key, token


def assemble_theme(source: Group, theme_group: str = SourceGroup.THEME.value) -> Group:
    """
    Build the theme tree for one theme group of the export.

    Args:
        source: The parsed export
        theme_group: Name of the theme group (`Theme`, or a brand variant)

    Returns:
        Group keyed by theme namespace

    Raises:
        MalformedSourceError: If a group the theme needs is missing
    """
    theme = require_group(source, theme_group)
    color_primitives = require_group(source, SourceGroup.COLOR_PRIMITIVES.value)
    typography_primitives = require_group(source, SourceGroup.TYPOGRAPHY_PRIMITIVES.value)
    size = require_group(source, SourceGroup.SIZE.value)
    effects = require_group(source, SourceGroup.EFFECT_STYLES.value)

    background = require_group(theme, "Background")
    text = require_group(theme, "Text")
    icon = require_group(theme, "Icon")
    border = require_group(theme, "Border")

    typography = theme.omit(COLOR_GROUPS)

    def prefixed(prefix: str) -> Group:
        return extract_prefixed_tokens(typography, prefix)

    font = map_tokens(
        typography_primitives.omit(["Weight", "Scale"]),
        _font_family,
    ).merged(prefixed(FONT_FAMILY_PREFIX))

    font_size = map_tokens(
        map_tokens(require_group(typography_primitives, "Scale"), _scale).merged(
            prefixed(FONT_SIZE_PREFIX)
        ),
        _to_rem,
    )

    font_weight = map_tokens(
        require_group(typography_primitives, "Weight"),
        _weight,
    ).merged(prefixed(FONT_WEIGHT_PREFIX))

    children: dict[str, Node] = {
        Namespace.COLOR.value: Group(dict(color_primitives.children)),
        Namespace.BACKGROUND_COLOR.value: background.omit([UTILITIES_GROUP]),
        Namespace.TEXT_COLOR.value: text.omit([UTILITIES_GROUP]).merged(
            {"icon": icon.omit([UTILITIES_GROUP])}
        ),
        Namespace.BORDER_COLOR.value: border.omit([UTILITIES_GROUP]),
        Namespace.RING_COLOR.value: border.omit([UTILITIES_GROUP]),
        Namespace.SPACING.value: size.pick(SPACING_GROUPS),
        Namespace.FONT.value: font,
        Namespace.TEXT.value: font_size,
        Namespace.FONT_WEIGHT.value: font_weight,
        Namespace.TRACKING.value: map_tokens(prefixed(LETTER_SPACING_PREFIX), _to_rem),
        Namespace.LEADING.value: map_tokens(prefixed(LINE_HEIGHT_PREFIX), _to_rem),
        Namespace.RADIUS.value: Group(dict(require_group(size, "Radius").children)),
        Namespace.SHADOW.value: Group(dict(require_group(effects, "Drop Shadow").children)),
        Namespace.INSET_SHADOW.value: Group(dict(require_group(effects, "Inner Shadow").children)),
        Namespace.BLUR.value: Group(dict(require_group(size, "Blur").children)),
        Namespace.DEFAULT_BORDER_WIDTH.value: require_token(size, "Stroke", "Border"),
        Namespace.DEFAULT_RING_WIDTH.value: require_token(size, "Stroke", "Focus Ring"),
    }

    return Group(children)
