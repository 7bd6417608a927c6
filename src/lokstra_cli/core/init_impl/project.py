"""
Main project initialization logic.

Creates a new Lokstra project from a template root: writes go.mod, renders
the per-type template tree, then runs any post-render steps (dependency
fetch, tidy) supplied by the caller.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..environment import ScaffoldSettings
from ..errors import ExternalCommandError, TemplateNotFoundError
from .resolver import resolve_template_path
from .templates import TemplateContext, render_tree
from .validation import (
    InitError,
    default_module_path,
    validate_project_name,
    validate_project_type,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    PostStep = Callable[[Path], None]

logger = logging.getLogger(__name__)

# Go toolchain version declared in generated go.mod files
GO_VERSION = "1.24"

MANIFEST_FILE = "go.mod"


@dataclass(frozen=True)
class CommandStep:
    """
    External command run in the generated project after rendering.

    Attributes:
        args: Command and arguments, e.g. ["go", "mod", "tidy"]
        description: Label used in progress and error messages
    """

    args: tuple[str, ...]
    description: str = ""

    @property
    def label(self) -> str:
        return self.description or " ".join(self.args)

    def __call__(self, project_dir: Path) -> None:
        """
        Run the command with project_dir as working directory.

        Raises:
            ExternalCommandError: If the command exits non-zero or is missing
        """
        try:
            result = subprocess.run(
                list(self.args),
                cwd=project_dir,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise ExternalCommandError(
                f"failed to run '{self.label}': {e}", command=list(self.args)
            ) from e

        if result.returncode != 0:
            output = result.stderr or result.stdout
            raise ExternalCommandError(
                f"failed to run '{self.label}': exit status {result.returncode}\n{output}".rstrip(),
                command=list(self.args),
                returncode=result.returncode,
                output=output,
            )


def project_root_for(name: str, output_dir: str | Path | None = None) -> Path:
    """Directory a project named ``name`` is created in (``./name`` by default)."""
    return Path(output_dir or ".") / name


def write_manifest(project_dir: Path, module_path: str) -> Path:
    """
    Write the go.mod module declaration.

    Args:
        project_dir: Project root
        module_path: Go module path

    Returns:
        Path to the written manifest
    """
    manifest_path = project_dir / MANIFEST_FILE
    manifest_path.write_text(f"module {module_path}\n\ngo {GO_VERSION}\n", encoding="utf-8")
    return manifest_path


def init_project(
    project_type: str,
    name: str,
    module_path: str | None = None,
    template: str | None = None,
    output_dir: str | Path | None = None,
    settings: ScaffoldSettings | None = None,
    post_steps: Sequence[PostStep] = (),
    progress_callback: Callable[[str], None] | None = None,
) -> Path:
    """
    Initialize a new Lokstra project.

    Args:
        project_type: One of server, module, service, middleware, plugin
        name: Project name; the project is created in ``output_dir/name``
        module_path: Go module path (defaults to github.com/example/<name>)
        template: Template directory path or built-in name
        output_dir: Parent directory (defaults to the current directory)
        settings: Scaffold settings (defaults to ``ScaffoldSettings.from_env()``)
        post_steps: Callables run with the project root after rendering,
            e.g. ``CommandStep(("go", "mod", "tidy"))``
        progress_callback: Optional callback for progress messages

    Returns:
        Path to the project root

    Raises:
        InitError: If initialization fails. Subclasses identify the cause:
            TemplateNotFoundError, RenderError, ExternalCommandError
    """

    def log(msg: str) -> None:
        """Log progress message if callback provided."""
        logger.debug(msg.strip())
        if progress_callback:
            progress_callback(msg)

    is_valid, error_msg = validate_project_type(project_type)
    if not is_valid:
        raise InitError(error_msg or f"Invalid project type: {project_type}")

    is_valid, error_msg = validate_project_name(name)
    if not is_valid:
        raise InitError(error_msg or f"Invalid project name: {name}")

    if not module_path:
        module_path = default_module_path(name)

    root = project_root_for(name, output_dir)
    log(f"Initializing {project_type} project '{name}' in {root}...")

    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise InitError(f"failed to create project directory: {e}") from e

    resolved = resolve_template_path(template, settings)
    log(f"  Template: {resolved.name} ({resolved.path})")

    template_root = resolved.type_dir(project_type)
    if not template_root.is_dir():
        raise TemplateNotFoundError(
            f"Template '{resolved.name}' has no '{project_type}' directory: {template_root}"
        )

    try:
        write_manifest(root, module_path)
    except OSError as e:
        raise InitError(f"failed to write {MANIFEST_FILE}: {e}") from e
    log(f"  Module: {module_path}")

    context = TemplateContext(app_name=name, module_name=module_path)
    written = render_tree(template_root, root, context)
    log(f"  Rendered {len(written)} files")

    for step in post_steps:
        log(f"  Running {getattr(step, 'label', step)}...")
        step(root)

    logger.info("Created %s project at %s", project_type, root)
    return root
