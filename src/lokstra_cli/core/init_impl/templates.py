"""
Template tree rendering.

Walks a template directory and reproduces it under an output root. Files
ending in ``.tpl`` are Jinja2 templates rendered against a TemplateContext
(with the suffix dropped from the output name); every other file is copied
byte for byte.

The first failure aborts the walk. Files already written stay on disk.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError, TemplateSyntaxError
from pydantic import BaseModel, ConfigDict, Field

from ..errors import RenderError, TemplateNotFoundError, make_render_error

logger = logging.getLogger(__name__)

# Marks a file as a template; stripped from the rendered file's name
TEMPLATE_SUFFIX = ".tpl"


class TemplateContext(BaseModel):
    """
    Variables available to ``.tpl`` files.

    Attributes:
        app_name: Project name (``{{ app_name }}``)
        module_name: Go module path (``{{ module_name }}``)
        extra: Additional named variables
    """

    app_name: str
    module_name: str
    extra: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def variables(self) -> dict[str, str]:
        """Flat mapping handed to the template engine."""
        return {**self.extra, "app_name": self.app_name, "module_name": self.module_name}


class EntryKind(StrEnum):
    """How a file from the template tree is materialized."""

    TEMPLATE_FILE = "template"
    STATIC_FILE = "static"


@dataclass(frozen=True)
class TemplateEntry:
    """One regular file found under a template root."""

    kind: EntryKind
    source: Path
    relative: Path

    @property
    def output_relative(self) -> Path:
        """Path under the output root, with the template suffix removed."""
        if self.kind is EntryKind.TEMPLATE_FILE:
            return self.relative.with_name(self.relative.name[: -len(TEMPLATE_SUFFIX)])
        return self.relative


def classify_entry(source: Path, template_root: Path) -> TemplateEntry:
    """Decide once whether a file is rendered or copied."""
    relative = source.relative_to(template_root)
    if source.name.endswith(TEMPLATE_SUFFIX) and source.name != TEMPLATE_SUFFIX:
        return TemplateEntry(EntryKind.TEMPLATE_FILE, source, relative)
    return TemplateEntry(EntryKind.STATIC_FILE, source, relative)


def iter_template_entries(template_root: Path) -> Iterator[TemplateEntry]:
    """
    Yield every regular file under a template root exactly once.

    Directories are traversed but not yielded. Order is sorted by path so
    output is stable, though callers should not depend on it.
    """
    for src_path in sorted(template_root.rglob("*")):
        if src_path.is_file():
            yield classify_entry(src_path, template_root)


def create_template_env() -> Environment:
    """Jinja2 environment that refuses undefined variables."""
    return Environment(
        loader=BaseLoader(),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )


def render_template_file(
    entry: TemplateEntry,
    output_root: Path,
    context: TemplateContext,
    env: Environment | None = None,
) -> Path:
    """
    Render one ``.tpl`` file to its mirrored output path.

    Args:
        entry: Entry of kind TEMPLATE_FILE
        output_root: Destination root
        context: Substitution variables
        env: Jinja2 environment (defaults to ``create_template_env()``)

    Returns:
        Path of the written file

    Raises:
        RenderError: On syntax errors, undefined variables, or I/O failure
    """
    env = env or create_template_env()
    dst_path = output_root / entry.output_relative

    try:
        source = entry.source.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise make_render_error(f"Failed to read template: {e}", entry.source) from e

    # Jinja2 normalizes line endings to the environment's newline_sequence
    if "\r\n" in source:
        env = env.overlay(newline_sequence="\r\n")

    try:
        template = env.from_string(source)
        rendered = template.render(context.variables())
    except TemplateSyntaxError as e:
        lines = source.splitlines()
        snippet = lines[e.lineno - 1] if 0 < e.lineno <= len(lines) else None
        raise make_render_error(e.message or str(e), entry.source, e.lineno, snippet) from e
    except TemplateError as e:
        raise make_render_error(str(e), entry.source) from e

    try:
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        dst_path.write_bytes(rendered.encode("utf-8"))
    except OSError as e:
        raise RenderError(f"Failed to write {dst_path}: {e}") from e

    logger.debug("Rendered %s -> %s", entry.relative, entry.output_relative)
    return dst_path


def copy_static_file(entry: TemplateEntry, output_root: Path) -> Path:
    """
    Copy a non-template file verbatim (content only, no metadata).

    Raises:
        RenderError: On I/O failure
    """
    dst_path = output_root / entry.output_relative
    try:
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(entry.source, dst_path)
    except OSError as e:
        raise RenderError(f"Failed to copy {entry.relative} to {dst_path}: {e}") from e

    logger.debug("Copied %s", entry.relative)
    return dst_path


def render_tree(
    template_root: Path,
    output_root: Path,
    context: TemplateContext,
) -> list[Path]:
    """
    Render or copy every file of a template tree under an output root.

    Args:
        template_root: Directory to walk
        output_root: Destination root (created on demand)
        context: Substitution variables for ``.tpl`` files

    Returns:
        Output paths written, relative to output_root

    Raises:
        TemplateNotFoundError: If template_root is not a directory
        RenderError: On the first file that fails; remaining files are skipped
    """
    if not template_root.is_dir():
        raise TemplateNotFoundError(f"Template directory not found: {template_root}")

    env = create_template_env()
    written: list[Path] = []

    for entry in iter_template_entries(template_root):
        if entry.kind is EntryKind.TEMPLATE_FILE:
            render_template_file(entry, output_root, context, env)
        else:
            copy_static_file(entry, output_root)
        written.append(entry.output_relative)

    logger.debug("Rendered %d files from %s into %s", len(written), template_root, output_root)
    return written
