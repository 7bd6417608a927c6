"""Core Lokstra CLI functionality: template resolution and rendering, project init, lint."""

from .environment import ScaffoldSettings
from .errors import (
    ErrorContext,
    ExternalCommandError,
    InitError,
    LokstraError,
    RenderError,
    TemplateNotFoundError,
)
from .init_impl import (
    CommandStep,
    ProjectType,
    TemplateContext,
    init_project,
    list_templates,
    render_tree,
    resolve_template_path,
)
from .lint import LintIssue, LintReport, check_service_uri_format, check_yaml_syntax, lint_files
from .uri import ServiceURI, parse_service_uri, validate_service_uri

__all__ = [
    "LokstraError",
    "InitError",
    "TemplateNotFoundError",
    "RenderError",
    "ExternalCommandError",
    "ErrorContext",
    "ScaffoldSettings",
    "ProjectType",
    "TemplateContext",
    "CommandStep",
    "resolve_template_path",
    "list_templates",
    "render_tree",
    "init_project",
    "ServiceURI",
    "parse_service_uri",
    "validate_service_uri",
    "LintIssue",
    "LintReport",
    "check_service_uri_format",
    "check_yaml_syntax",
    "lint_files",
]
