"""
Project initialization utilities for Lokstra.

This package contains modular implementations for project initialization:
- validation.py - Project type and name validation
- resolver.py - Template root resolution
- templates.py - Template tree rendering
- project.py - Main init_project logic
"""

from __future__ import annotations

from .validation import (
    InitError,
    ProjectType,
    default_module_path,
    validate_project_name,
    validate_project_type,
)
from .resolver import ResolvedTemplate, list_templates, resolve_template_path
from .templates import (
    TEMPLATE_SUFFIX,
    EntryKind,
    TemplateContext,
    TemplateEntry,
    classify_entry,
    copy_static_file,
    iter_template_entries,
    render_template_file,
    render_tree,
)
from .project import GO_VERSION, CommandStep, init_project, write_manifest

__all__ = [
    # Errors
    "InitError",
    # Validation
    "ProjectType",
    "validate_project_type",
    "validate_project_name",
    "default_module_path",
    # Resolution
    "ResolvedTemplate",
    "resolve_template_path",
    "list_templates",
    # Rendering
    "TEMPLATE_SUFFIX",
    "EntryKind",
    "TemplateContext",
    "TemplateEntry",
    "classify_entry",
    "iter_template_entries",
    "render_template_file",
    "copy_static_file",
    "render_tree",
    # Project init
    "GO_VERSION",
    "CommandStep",
    "write_manifest",
    "init_project",
]
