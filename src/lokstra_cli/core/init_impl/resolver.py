"""
Template root resolution.

Turns a template hint (a path, a built-in name, or nothing) into one
template root directory. Tiers are tried in order and the first that
names an existing directory wins:

    1. empty hint  -> LOKSTRA_TEMPLATE, else "default"
    2. hint is a directory (absolute or relative to CWD) -> its absolute path,
       cleaned lexically without following symlinks
    3. ./scaffold/<hint>/ is a directory -> returned as-is
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..environment import ScaffoldSettings
from ..errors import TemplateNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedTemplate:
    """A template root found on disk, with the name used to find it."""

    name: str
    path: Path

    def type_dir(self, project_type: str) -> Path:
        """Subdirectory holding the files for one project type."""
        return self.path / project_type


def resolve_template_path(
    template: str | None = None,
    settings: ScaffoldSettings | None = None,
) -> ResolvedTemplate:
    """
    Resolve a template hint to a template root directory.

    Args:
        template: Directory path or built-in template name (may be empty)
        settings: Scaffold settings (defaults to ``ScaffoldSettings.from_env()``)

    Returns:
        ResolvedTemplate pointing at an existing directory

    Raises:
        TemplateNotFoundError: If no tier yields an existing directory
    """
    if settings is None:
        settings = ScaffoldSettings.from_env()

    if not template:
        template = settings.effective_template_name()
        logger.debug("No template requested, using '%s'", template)

    direct = Path(template)
    if direct.is_dir():
        logger.debug("Template '%s' resolved as a directory path", template)
        return ResolvedTemplate(name=template, path=Path(os.path.abspath(direct)))

    builtin = settings.builtin_root / template
    if builtin.is_dir():
        logger.debug("Template '%s' resolved under %s", template, settings.builtin_root)
        return ResolvedTemplate(name=template, path=builtin)

    raise TemplateNotFoundError(
        f"Template '{template}' not found "
        f"(searched: direct path '{direct}' and {builtin}/)"
    )


def list_templates(settings: ScaffoldSettings | None = None) -> list[str]:
    """
    List built-in template names.

    Args:
        settings: Scaffold settings (defaults to ``ScaffoldSettings.from_env()``)

    Returns:
        Sorted names of directories under the built-in templates root
    """
    if settings is None:
        settings = ScaffoldSettings.from_env()

    root = settings.builtin_root
    if not root.is_dir():
        return []

    return sorted(item.name for item in root.iterdir() if item.is_dir())
