"""
Build pipeline - loading inputs and driving the emission stage.
"""

from chuk_mcp_tokens.pipeline.loader import (
    load_config,
    load_source_document,
    load_source_set,
)
from chuk_mcp_tokens.pipeline.orchestrator import BuildResult, Orchestrator, build_all

__all__ = [
    "BuildResult",
    "Orchestrator",
    "build_all",
    "load_config",
    "load_source_document",
    "load_source_set",
]
