"""
Orchestrator - runs every configured output of a build.

This is the central emission pipeline:
    BuildConfig + source set → per file: filter → transforms → format → write

The orchestrator:
1. Checks every transform and format name before anything is written
2. Iterates platforms, then files, in declaration order
3. Flattens the tokens of the file's source filter
4. Applies the platform's transforms in order, then the file's format
5. Writes the output, creating parent directories

A run either writes every file or stops at the first failure. Re-running
on the same input reproduces identical files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from chuk_mcp_tokens.assembly.builder import (
    SourceSet,
    build_token_files,
    write_token_files,
)
from chuk_mcp_tokens.constants import SuccessMessages
from chuk_mcp_tokens.emission.dictionary import FlatToken, flatten
from chuk_mcp_tokens.emission.registry import (
    FormatRegistry,
    TransformRegistry,
    default_registries,
)
from chuk_mcp_tokens.errors import DestinationWriteError
from chuk_mcp_tokens.models.config import (
    BuildConfig,
    FileConfig,
    PlatformConfig,
    PlatformOptions,
)
from chuk_mcp_tokens.pipeline.loader import load_source_document, load_source_set

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of a build run."""

    files_written: list[Path] = field(default_factory=list)
    token_files_written: list[Path] = field(default_factory=list)
    platforms_built: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files_written)


class Orchestrator:
    """
    Drives the emission stage for a build configuration.

    Registries are passed in, so callers decide which transforms and
    formats exist.
    """

    def __init__(
        self,
        transforms: TransformRegistry,
        formats: FormatRegistry,
        build_path: Path,
    ):
        """
        Initialize the orchestrator.

        Args:
            transforms: Registry of named transforms
            formats: Registry of named formats
            build_path: Root that destinations are relative to
        """
        self.transforms = transforms
        self.formats = formats
        self.build_path = build_path

    def validate(self, config: BuildConfig) -> None:
        """
        Check that every transform and format the config names exists.

        Raises:
            UnknownTransformError: For the first unregistered transform
            UnknownFormatError: For the first unregistered format
        """
        for platform in config.platforms.values():
            for name in platform.transforms:
                self.transforms.get(name)
            for file in platform.files:
                self.formats.get(file.format)

    def run(self, config: BuildConfig, sources: SourceSet) -> BuildResult:
        """
        Build every platform of the config.

        Args:
            config: The build configuration
            sources: Token file path -> tree

        Returns:
            BuildResult listing written files

        Raises:
            UnknownTransformOrFormatError: Before anything is written
            DestinationWriteError: If an output cannot be written
        """
        self.validate(config)
        result = BuildResult()

        for platform_name, platform in config.platforms.items():
            logger.debug("Building platform %s", platform_name)
            for file in platform.files:
                content = self.render_file(platform, file, sources)
                result.files_written.append(self.write(file.destination, content))
            result.platforms_built.append(platform_name)

        return result

    def render_file(self, platform: PlatformConfig, file: FileConfig, sources: SourceSet) -> str:
        """Render one output file to text without writing it."""
        tokens = self.apply_transforms(platform.transforms, flatten(sources, file.filter))
        format_fn = self.formats.get(file.format)
        return format_fn(tokens, self._file_options(platform, file))

    def apply_transforms(self, names: list[str], tokens: list[FlatToken]) -> list[FlatToken]:
        """Apply the named transforms, in order, to every token."""
        transforms = [self.transforms.get(name) for name in names]
        result = []
        for token in tokens:
            for transform in transforms:
                token = transform(token)
            result.append(token)
        return result

    def write(self, destination: str, content: str) -> Path:
        """
        Write an output file under the build path.

        Raises:
            DestinationWriteError: On any filesystem error
        """
        path = self.build_path / destination
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise DestinationWriteError(str(path), e) from e

        logger.info(SuccessMessages.FILE_WRITTEN.format(path=destination))
        return path

    def _file_options(self, platform: PlatformConfig, file: FileConfig) -> PlatformOptions:
        """Platform options with the file's own options layered on top."""
        if not file.options:
            return platform.options
        # Either spelling of a key is accepted; only keys the file sets win
        overrides = PlatformOptions.model_validate(file.options)
        return platform.options.model_copy(
            update={name: getattr(overrides, name) for name in overrides.model_fields_set}
        )


def build_all(
    source_path: Path | str,
    root: Path | str,
    config: BuildConfig | None = None,
    themes: dict[str, str] | None = None,
) -> BuildResult:
    """
    Convenience function for the whole pipeline.

    Assembles and writes the token files from the export, reloads the
    configured source set from `root`, then emits every output.

    Args:
        source_path: Design-tool export (JSON)
        root: Build root; token files and outputs are written below it
        config: Build configuration (defaults to the stock build)
        themes: Theme key -> theme group name

    Returns:
        BuildResult with every written path
    """
    root = Path(root)
    config = config or BuildConfig.default(themes)

    # Check names before the token files are touched
    transforms, formats = default_registries()
    orchestrator = Orchestrator(transforms, formats, root)
    orchestrator.validate(config)

    source = load_source_document(Path(source_path))
    token_files_written = write_token_files(build_token_files(source, themes), root)

    result = orchestrator.run(config, load_source_set(root, config.source))
    result.token_files_written = token_files_written

    logger.info(SuccessMessages.BUILD_COMPLETE.format(count=result.count, source=source_path))
    return result
