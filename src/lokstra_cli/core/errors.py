"""
Error types for Lokstra project generation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class LokstraError(Exception):
    """Base exception for all Lokstra CLI errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if not self.context:
            return self.message
        formatted = f"{self.context.format()}: {self.message}"
        if self.context.snippet:
            formatted += f"\n{self.context.line or 1:4d} | {self.context.snippet}"
        return formatted


class InitError(LokstraError):
    """Raised when project initialization fails."""

    pass


class TemplateNotFoundError(InitError):
    """
    Raised when no template root can be resolved.

    Examples:
    - Explicit path that does not exist
    - Name with no matching directory under scaffold/
    - Resolved root missing the requested project type
    """

    pass


class RenderError(InitError):
    """
    Raised when a template tree cannot be rendered.

    Examples:
    - Template syntax errors
    - References to undefined variables
    - Read/write failures on template or output files
    """

    pass


class ExternalCommandError(InitError):
    """Raised when a post-render command exits non-zero or cannot be started."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        output: str = "",
    ):
        self.command = command or []
        self.returncode = returncode
        self.output = output
        super().__init__(message)


@dataclass
class ErrorContext:
    """
    Location of an error inside a template tree.

    Attributes:
        file: Path to the file where the error occurred
        line: Line number (1-indexed), when known
        column: Column number (1-indexed), when known
        snippet: Optional source line shown under the location
    """

    file: Path
    line: int | None = None
    column: int | None = None
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "server/main.go.tpl:10:5"
        """
        location = str(self.file)
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"

        return location


def make_render_error(
    message: str,
    file: Path,
    line: int | None = None,
    snippet: str | None = None,
) -> RenderError:
    """
    Helper to create a RenderError with context.

    Args:
        message: Error description
        file: Template file being rendered
        line: Line number reported by the template engine
        snippet: Offending source line

    Returns:
        RenderError with context
    """
    context = ErrorContext(file=file, line=line, snippet=snippet)
    return RenderError(message, context)
