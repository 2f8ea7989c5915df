"""
Error taxonomy for the token pipeline.

Every fatal pipeline error derives from TokenPipelineError, which is a
ValueError so callers that already guard on ValueError keep working.
Unrecognized reference patterns are not errors; they pass through.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import ErrorMessages


class TokenPipelineError(ValueError):
    """Base class for pipeline failures."""


class MalformedSourceError(TokenPipelineError):
    """An expected namespace, group or field is missing from the source."""

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        super().__init__(message or ErrorMessages.MISSING_GROUP.format(path=path))


class UnknownTransformOrFormatError(TokenPipelineError):
    """The build configuration names something that is not registered."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class UnknownTransformError(UnknownTransformOrFormatError):
    """A platform references an unregistered transform."""

    def __init__(self, name: str, known: list[str]):
        super().__init__(
            name,
            ErrorMessages.UNKNOWN_TRANSFORM.format(name=name, known=", ".join(sorted(known))),
        )


class UnknownFormatError(UnknownTransformOrFormatError):
    """A file entry references an unregistered format."""

    def __init__(self, name: str, known: list[str]):
        super().__init__(
            name,
            ErrorMessages.UNKNOWN_FORMAT.format(name=name, known=", ".join(sorted(known))),
        )


class DestinationWriteError(TokenPipelineError):
    """Writing a generated file failed."""

    def __init__(self, path: str, reason: OSError):
        self.path = path
        self.reason = reason
        super().__init__(ErrorMessages.WRITE_FAILED.format(path=path, reason=reason))
