"""
Scaffolding configuration for the Lokstra CLI.

The LOKSTRA_TEMPLATE environment variable names the template used when
``lokstra init`` is run without an explicit template. It is read once per
resolution and handed to the resolver as an explicit settings value, so
library callers (and tests) can bypass the process environment entirely.

Resolution of the default template name:
    1. ``ScaffoldSettings.default_template_name`` when set
    2. otherwise the literal name ``"default"``

Usage:
    from lokstra_cli.core.environment import ScaffoldSettings

    settings = ScaffoldSettings.from_env()
    settings.effective_template_name()  # "default" unless LOKSTRA_TEMPLATE is set
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

# Environment variable supplying the organisation-wide default template
LOKSTRA_TEMPLATE_VAR = "LOKSTRA_TEMPLATE"

# Used when neither the caller nor the environment names a template
DEFAULT_TEMPLATE_NAME = "default"

# Built-in template roots live under ./scaffold/<name>/
BUILTIN_TEMPLATES_DIR = "scaffold"


@dataclass(frozen=True)
class ScaffoldSettings:
    """Configuration consumed by the template resolver."""

    default_template_name: str | None = None
    builtin_root: Path = field(default_factory=lambda: Path(BUILTIN_TEMPLATES_DIR))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ScaffoldSettings:
        """Build settings from LOKSTRA_TEMPLATE.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``).
                Blank values are treated as unset.

        Returns:
            ScaffoldSettings with the built-in root at ``./scaffold``.
        """
        if environ is None:
            environ = os.environ

        value = environ.get(LOKSTRA_TEMPLATE_VAR, "").strip()
        if value:
            logger.debug("Default template from %s: %s", LOKSTRA_TEMPLATE_VAR, value)
        return cls(default_template_name=value or None)

    def effective_template_name(self) -> str:
        """Template name used when the caller does not request one."""
        return self.default_template_name or DEFAULT_TEMPLATE_NAME
