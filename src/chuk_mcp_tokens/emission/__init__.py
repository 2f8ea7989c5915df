"""
Emission - turns flattened token sets into output text.

The stage:
    source set (token file -> tree)
    → FlatToken list (filtered by source file)
    → named transforms (name, font stacks, shadows)
    → named format (CSS variables, utility classes, class-merge config)
"""

from chuk_mcp_tokens.emission.class_merge import classify, format_class_merge
from chuk_mcp_tokens.emission.components import (
    TYPOGRAPHY_FACETS,
    Facet,
    format_components,
    utility_classes,
)
from chuk_mcp_tokens.emission.css_variables import format_css_variables
from chuk_mcp_tokens.emission.dictionary import FlatToken, flatten
from chuk_mcp_tokens.emission.naming import kebab_case, reference_to_var
from chuk_mcp_tokens.emission.registry import (
    Format,
    FormatRegistry,
    Transform,
    TransformRegistry,
    default_formats,
    default_registries,
    default_transforms,
)
from chuk_mcp_tokens.emission.transforms import (
    font_family,
    name_kebab,
    shadow,
    stringify_shadow,
)

__all__ = [
    # Registry
    "Format",
    "FormatRegistry",
    "Transform",
    "TransformRegistry",
    "default_formats",
    "default_registries",
    "default_transforms",
    # Tokens
    "FlatToken",
    "flatten",
    # Naming
    "kebab_case",
    "reference_to_var",
    # Transforms
    "font_family",
    "name_kebab",
    "shadow",
    "stringify_shadow",
    # Formats
    "Facet",
    "TYPOGRAPHY_FACETS",
    "classify",
    "format_class_merge",
    "format_components",
    "format_css_variables",
    "utility_classes",
]
