"""
Build configuration models.

A build is a set of platforms. Each platform names an ordered list of
transforms and one or more output files; each file names a format and a
source-file filter, so several outputs can be cut from one source set.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Themes assembled from the export: theme key -> theme group name
DEFAULT_THEMES: dict[str, str] = {
    "default": "Theme",
}

COMPONENTS_TOKENS_PATH = "packages/ui/tokens/components.tokens.json"
COMPONENTS_STYLESHEET_PATH = "packages/ui/components.generated.css"
CLASS_MERGE_CONFIG_PATH = "packages/ui/src/tailwind-merge-config.json"

DEFAULT_SOURCE_GLOBS: list[str] = [
    "packages/ui/tokens/*.tokens.json",
    "packages/themes/*/tokens/*.tokens.json",
]


def theme_tokens_path(theme: str) -> str:
    """Token file the theme assembler writes for a theme."""
    return f"packages/themes/{theme}/tokens/theme.tokens.json"


def theme_stylesheet_path(theme: str) -> str:
    """Stylesheet generated for a theme."""
    return f"packages/themes/{theme}/theme.generated.css"


class FileConfig(BaseModel):
    """One generated output file."""

    destination: str = Field(..., description="Output path, relative to the build root")
    format: str = Field(..., description="Registered format name")
    filter: str | None = Field(
        default=None,
        description="Only tokens from this source file are emitted (all when unset)",
    )
    options: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class PlatformOptions(BaseModel):
    """Options shared by every file of a platform."""

    selector: list[str] = Field(
        default_factory=lambda: [":root"],
        description="Selectors / at-rules wrapping CSS variable blocks, outermost first",
    )
    output_references: bool = Field(
        default=False,
        alias="outputReferences",
        description="Emit references as var(--name) instead of raw text",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class PlatformConfig(BaseModel):
    """A group of files sharing one transform list."""

    transforms: list[str] = Field(default_factory=list)
    files: list[FileConfig] = Field(default_factory=list)
    options: PlatformOptions = Field(default_factory=PlatformOptions)

    model_config = {"frozen": True}


class BuildConfig(BaseModel):
    """
    The whole build.

    `source` lists glob patterns (relative to the build root) of token
    files to load; `platforms` is processed in declaration order.
    """

    source: list[str] = Field(default_factory=lambda: list(DEFAULT_SOURCE_GLOBS))
    platforms: dict[str, PlatformConfig] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def default(cls, themes: dict[str, str] | None = None) -> BuildConfig:
        """
        The stock build: one stylesheet per theme, the component
        stylesheet and the class-merge configuration.
        """
        themes = themes or DEFAULT_THEMES
        platforms: dict[str, PlatformConfig] = {}

        for theme in themes:
            platforms[f"theme/{theme}"] = PlatformConfig(
                transforms=["name/kebab", "fontFamily/css", "custom/shadow"],
                files=[
                    FileConfig(
                        destination=theme_stylesheet_path(theme),
                        format="css/variables",
                        filter=theme_tokens_path(theme),
                    )
                ],
                options=PlatformOptions(selector=["@theme"], output_references=True),
            )

        platforms["components"] = PlatformConfig(
            transforms=["name/kebab", "fontFamily/css"],
            files=[
                FileConfig(
                    destination=COMPONENTS_STYLESHEET_PATH,
                    format="custom/components",
                    filter=COMPONENTS_TOKENS_PATH,
                )
            ],
        )

        platforms["tailwindMerge"] = PlatformConfig(
            transforms=["name/kebab"],
            files=[
                FileConfig(
                    destination=CLASS_MERGE_CONFIG_PATH,
                    format="custom/tailwind-merge",
                    filter=theme_tokens_path(next(iter(themes))),
                )
            ],
        )

        return cls(platforms=platforms)
