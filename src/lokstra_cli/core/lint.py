"""
Static lint checks for Lokstra projects.

Two checks, both pure over file content:
- service URIs: every ``lokstra://`` token in a source file must satisfy
  the service URI grammar (see ``lokstra_cli.core.uri``)
- YAML: every YAML file must parse to a top-level mapping, and mappings
  must not repeat keys

Checks never raise on bad input; each violation becomes a LintIssue and
the scan always runs to completion.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .uri import find_service_uris, validate_service_uri

logger = logging.getLogger(__name__)

NULL_TAG = "tag:yaml.org,2002:null"


@dataclass(frozen=True)
class LintIssue:
    """A single reported violation."""

    file: str
    message: str

    def __str__(self) -> str:
        return f"{self.file}: {self.message}"


@dataclass
class LintReport:
    """Issues accumulated over one scan, in the order found."""

    issues: list[LintIssue] = field(default_factory=list)
    files_checked: int = 0

    @property
    def passed(self) -> bool:
        return not self.issues

    def add_file(self, issues: Iterable[LintIssue]) -> None:
        """Record one checked file and its issues."""
        self.issues.extend(issues)
        self.files_checked += 1


def _decode(content: str | bytes) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def check_service_uri_format(file_path: str | Path, content: str | bytes) -> list[LintIssue]:
    """
    Validate every service URI found in a file's content.

    Args:
        file_path: Path reported in issues
        content: File content

    Returns:
        One issue per invalid URI, in order of appearance
    """
    issues: list[LintIssue] = []
    for match in find_service_uris(_decode(content)):
        is_valid, error_msg = validate_service_uri(match)
        if not is_valid:
            issues.append(LintIssue(str(file_path), error_msg or f"invalid service URI: {match}"))
    return issues


def _duplicate_keys(node: yaml.Node) -> list[str]:
    """Report mapping keys defined more than once, depth first."""
    problems: list[str] = []
    seen_nodes: set[int] = set()
    stack = [node]

    while stack:
        current = stack.pop()
        # Aliases make the graph shared; visit each node once
        if id(current) in seen_nodes:
            continue
        seen_nodes.add(id(current))

        if isinstance(current, yaml.MappingNode):
            seen_keys: dict[str, int] = {}
            for key_node, value_node in current.value:
                if isinstance(key_node, yaml.ScalarNode):
                    line = key_node.start_mark.line + 1
                    if key_node.value in seen_keys:
                        problems.append(
                            f'line {line}: mapping key "{key_node.value}" already defined '
                            f"at line {seen_keys[key_node.value]}"
                        )
                    else:
                        seen_keys[key_node.value] = line
                stack.extend((value_node, key_node))
        elif isinstance(current, yaml.SequenceNode):
            stack.extend(reversed(current.value))

    return problems


def _is_mapping_or_null(node: yaml.Node | None) -> bool:
    if node is None or isinstance(node, yaml.MappingNode):
        return True
    return isinstance(node, yaml.ScalarNode) and node.tag == NULL_TAG


def check_yaml_syntax(file_path: str | Path, content: str | bytes) -> list[LintIssue]:
    """
    Check that content is well-formed YAML.

    Every document is composed (structure only, tags are not resolved to
    Python objects), so custom tags such as ``!Ref`` are accepted. The first
    document must be a mapping (or empty), as a config file is.

    Args:
        file_path: Path reported in issues
        content: File content

    Returns:
        Empty list for valid YAML, otherwise the issues found
    """
    issues: list[LintIssue] = []
    try:
        documents = list(yaml.compose_all(content, Loader=yaml.SafeLoader))
    except yaml.YAMLError as e:
        return [LintIssue(str(file_path), f"Invalid YAML syntax: {e}")]

    # Config files decode into a mapping; only the first document is read
    if documents and not _is_mapping_or_null(documents[0]):
        first = documents[0]
        issues.append(
            LintIssue(
                str(file_path),
                f"Invalid YAML syntax: line {first.start_mark.line + 1}: "
                f"top-level value must be a mapping, found {first.id}",
            )
        )

    for document in documents:
        if document is None:
            continue
        for problem in _duplicate_keys(document):
            issues.append(LintIssue(str(file_path), f"Invalid YAML syntax: {problem}"))
    return issues


def lint_source_file(path: str | Path) -> list[LintIssue]:
    """Read a source file and check its service URIs."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        return [LintIssue(str(path), f"Failed to read: {e}")]
    return check_service_uri_format(path, data)


def lint_yaml_file(path: str | Path) -> list[LintIssue]:
    """Read a YAML file and check its syntax."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        return [LintIssue(str(path), f"Failed to read YAML: {e}")]
    return check_yaml_syntax(path, data)


def lint_files(
    source_files: Iterable[str | Path] = (),
    yaml_files: Iterable[str | Path] = (),
) -> LintReport:
    """
    Lint the given files.

    Source files are checked for service URIs, YAML files for syntax.
    Finding files is the caller's job.

    Args:
        source_files: Files to scan for ``lokstra://`` references
        yaml_files: Files to parse as YAML

    Returns:
        LintReport with every issue found, in order
    """
    report = LintReport()

    for path in source_files:
        issues = lint_source_file(path)
        logger.debug("%s: %d service URI issues", path, len(issues))
        report.add_file(issues)

    for path in yaml_files:
        issues = lint_yaml_file(path)
        logger.debug("%s: %d YAML issues", path, len(issues))
        report.add_file(issues)

    logger.info(
        "Lint checked %d files, found %d issues", report.files_checked, len(report.issues)
    )
    return report
