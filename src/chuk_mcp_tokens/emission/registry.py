"""
Emission registries - named transforms and formats.

Registries are plain objects built at start-up and handed to the
orchestrator; nothing registers into global state.
"""

from __future__ import annotations

from collections.abc import Callable

from chuk_mcp_tokens.emission.class_merge import format_class_merge
from chuk_mcp_tokens.emission.components import format_components
from chuk_mcp_tokens.emission.css_variables import format_css_variables
from chuk_mcp_tokens.emission.dictionary import FlatToken
from chuk_mcp_tokens.emission.transforms import font_family, name_kebab, shadow
from chuk_mcp_tokens.errors import UnknownFormatError, UnknownTransformError
from chuk_mcp_tokens.models.config import PlatformOptions

Transform = Callable[[FlatToken], FlatToken]
Format = Callable[[list[FlatToken], PlatformOptions], str]


class TransformRegistry:
    """Name -> token transform."""

    def __init__(self, transforms: dict[str, Transform] | None = None):
        self._transforms: dict[str, Transform] = dict(transforms or {})

    def register(self, name: str, transform: Transform) -> str:
        """
        Register a transform, replacing any with the same name.

        Returns:
            The name
        """
        self._transforms[name] = transform
        return name

    def get(self, name: str) -> Transform:
        """
        Look up a transform.

        Raises:
            UnknownTransformError: If nothing is registered under `name`
        """
        if name not in self._transforms:
            raise UnknownTransformError(name, self.names())
        return self._transforms[name]

    def names(self) -> list[str]:
        return sorted(self._transforms)

    def __contains__(self, name: object) -> bool:
        return name in self._transforms


class FormatRegistry:
    """Name -> format backend."""

    def __init__(self, formats: dict[str, Format] | None = None):
        self._formats: dict[str, Format] = dict(formats or {})

    def register(self, name: str, format_fn: Format) -> str:
        """
        Register a format, replacing any with the same name.

        Returns:
            The name
        """
        self._formats[name] = format_fn
        return name

    def get(self, name: str) -> Format:
        """
        Look up a format.

        Raises:
            UnknownFormatError: If nothing is registered under `name`
        """
        if name not in self._formats:
            raise UnknownFormatError(name, self.names())
        return self._formats[name]

    def names(self) -> list[str]:
        return sorted(self._formats)

    def __contains__(self, name: object) -> bool:
        return name in self._formats


def default_transforms() -> TransformRegistry:
    """The built-in transforms."""
    return TransformRegistry(
        {
            "name/kebab": name_kebab,
            "fontFamily/css": font_family,
            "custom/shadow": shadow,
        }
    )


def default_formats() -> FormatRegistry:
    """The three built-in backends."""
    return FormatRegistry(
        {
            "css/variables": format_css_variables,
            "custom/components": format_components,
            "custom/tailwind-merge": format_class_merge,
        }
    )


def default_registries() -> tuple[TransformRegistry, FormatRegistry]:
    """Fresh built-in registries."""
    return default_transforms(), default_formats()
