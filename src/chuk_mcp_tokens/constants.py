"""
Constants and enums for the token pipeline.

No magic strings - use enums and named constants for constrained values.
"""

from enum import Enum


class Namespace(str, Enum):
    """
    Top-level namespaces of an assembled theme tree.

    These mirror the Tailwind theme variable namespaces the generated
    stylesheets feed.
    """

    COLOR = "color"
    BACKGROUND_COLOR = "background-color"
    TEXT_COLOR = "text-color"
    BORDER_COLOR = "border-color"
    RING_COLOR = "ring-color"
    SPACING = "spacing"
    FONT = "font"
    TEXT = "text"
    FONT_WEIGHT = "font-weight"
    TRACKING = "tracking"
    LEADING = "leading"
    RADIUS = "radius"
    SHADOW = "shadow"
    INSET_SHADOW = "inset-shadow"
    DROP_SHADOW = "drop-shadow"
    BLUR = "blur"
    DEFAULT_BORDER_WIDTH = "default-border-width"
    DEFAULT_RING_WIDTH = "default-ring-width"


class SourceGroup(str, Enum):
    """Top-level groups of the design-tool export."""

    THEME = "Theme"
    COLOR_PRIMITIVES = "Color Primitives"
    TYPOGRAPHY_PRIMITIVES = "Typography Primitives"
    TYPOGRAPHY_STYLES = "Typography-styles"
    EFFECT_STYLES = "Effect-styles"
    SIZE = "Size"


class TokenType(str, Enum):
    """Token `$type` tags the pipeline acts on."""

    COLOR = "color"
    DIMENSION = "dimension"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    SHADOW = "shadow"
    TYPOGRAPHY = "typography"


# Mode partitions recognized by the mode embedder
SCHEME_MODES: tuple[str, str] = ("Light", "Dark")
DENSITY_MODES: tuple[str, str, str] = ("Base", "Compact", "Comfortable")

# Boolean flag variables the embedded expressions are gated on
SCHEME_FLAGS: dict[str, str] = {
    "Light": "--is-light",
    "Dark": "--is-dark",
}
DENSITY_FLAGS: dict[str, str] = {
    "Base": "--is-size-base",
    "Compact": "--is-size-compact",
    "Comfortable": "--is-size-comfortable",
}

# Root font size used for px -> rem conversion
BASE_FONT_SIZE_PX = 16

# Group names stripped from the export before assembly
UTILITIES_GROUP = "Utilities"
COMPONENT_UTILITIES_GROUP = ".Utilities"

# Generic family appended to the primitive font families
FONT_FAMILY_FALLBACKS: dict[str, str] = {
    "Family Sans": "sans-serif",
    "Family Serif": "serif",
    "Family Mono": "monospace",
}

# Class-merge buckets by namespace
OVERRIDE_NAMESPACES: frozenset[str] = frozenset(
    {
        Namespace.BLUR.value,
        Namespace.DROP_SHADOW.value,
        Namespace.FONT_WEIGHT.value,
        Namespace.INSET_SHADOW.value,
        Namespace.LEADING.value,
        Namespace.RADIUS.value,
        Namespace.SHADOW.value,
        Namespace.TEXT.value,
        Namespace.TRACKING.value,
    }
)
EXTEND_NAMESPACES: frozenset[str] = frozenset({Namespace.SPACING.value})

GENERATED_FILE_HEADER = "/**\n * Do not edit directly, this file was auto-generated.\n */\n\n"


class ErrorMessages:
    """Standardized error messages."""

    MISSING_GROUP = "Source is missing required group '{path}'."
    NOT_A_GROUP = "Expected a group at '{path}', found a token."
    NOT_A_TOKEN = "Expected a token at '{path}', found a group."
    UNKNOWN_TRANSFORM = "Unknown transform '{name}'. Registered: {known}."
    UNKNOWN_FORMAT = "Unknown format '{name}'. Registered: {known}."
    WRITE_FAILED = "Failed to write '{path}': {reason}"


class SuccessMessages:
    """Standardized success messages."""

    FILE_WRITTEN = "Wrote {path}."
    BUILD_COMPLETE = "Built {count} file(s) from '{source}'."
