"""
Lokstra CLI - project scaffolding and lint checks for Lokstra backend apps.

Generates new server, module, service, middleware and plugin projects
from template trees, and checks projects for malformed service URIs
and YAML.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# Re-export commonly used types for convenience
from .core.errors import (
    ExternalCommandError,
    InitError,
    LokstraError,
    RenderError,
    TemplateNotFoundError,
)

try:
    __version__ = version("lokstra-cli")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "LokstraError",
    "InitError",
    "TemplateNotFoundError",
    "RenderError",
    "ExternalCommandError",
]
