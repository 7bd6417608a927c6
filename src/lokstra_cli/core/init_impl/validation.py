"""
Project type and name validation.

Handles the closed set of project kinds a template root provides and the
check applied to a project name before it becomes a directory.
"""

from __future__ import annotations

from enum import StrEnum

from ..errors import InitError

__all__ = [
    "InitError",
    "ProjectType",
    "default_module_path",
    "validate_project_name",
    "validate_project_type",
]

# Go module prefix used when the caller gives no --module
DEFAULT_MODULE_PREFIX = "github.com/example/"


class ProjectType(StrEnum):
    """Project kinds; each maps to a subdirectory of a template root."""

    SERVER = "server"
    MODULE = "module"
    SERVICE = "service"
    MIDDLEWARE = "middleware"
    PLUGIN = "plugin"


def validate_project_type(value: str) -> tuple[bool, str | None]:
    """
    Validate a project type name.

    Args:
        value: Requested project kind

    Returns:
        (is_valid, error_message)

    Examples:
        validate_project_type("server")  # -> (True, None)
        validate_project_type("app")  # -> (False, "Invalid project type: app ...")
    """
    if value in {t.value for t in ProjectType}:
        return (True, None)

    valid = ", ".join(t.value for t in ProjectType)
    return (False, f"Invalid project type: {value}. Valid types are: {valid}")


def validate_project_name(name: str) -> tuple[bool, str | None]:
    """
    Validate a project name, which becomes the project directory.

    The name is joined onto the output directory as given, so nested names
    such as ``apps/billing`` create intermediate directories.

    Args:
        name: Project name to validate

    Returns:
        (is_valid, error_message)
    """
    if not name:
        return (False, "Project name cannot be empty")

    return (True, None)


def default_module_path(name: str) -> str:
    """
    Go module path used when none is given.

    Examples:
        "my-app" -> "github.com/example/my-app"
    """
    return f"{DEFAULT_MODULE_PREFIX}{name}"
