"""Shared pytest fixtures for Lokstra CLI tests."""

from pathlib import Path

import pytest

from lokstra_cli.core.environment import LOKSTRA_TEMPLATE_VAR, ScaffoldSettings
from lokstra_cli.core.init_impl.templates import TemplateContext

PROJECT_TYPES = ("server", "module", "service", "middleware", "plugin")


@pytest.fixture(autouse=True)
def _clear_template_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's LOKSTRA_TEMPLATE out of the tests."""
    monkeypatch.delenv(LOKSTRA_TEMPLATE_VAR, raising=False)


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Template root with one directory per project type.

    server/ holds a rendered file, a nested rendered file and two static files.
    """
    root = tmp_path / "templates" / "acme"
    for project_type in PROJECT_TYPES:
        (root / project_type).mkdir(parents=True)

    server = root / "server"
    (server / "main.go.tpl").write_text(
        'package main\n\n// {{ app_name }}\nimport _ "{{ module_name }}/internal"\n'
    )
    (server / "internal").mkdir()
    (server / "internal" / "app.go.tpl").write_text("package internal // {{ app_name }}\n")
    (server / "config.yaml").write_text("name: {{ app_name }}\n")
    (server / "logo.bin").write_bytes(bytes(range(256)))

    (root / "module" / "module.go.tpl").write_text("package {{ app_name }}\n")
    return root


@pytest.fixture
def builtin_settings(tmp_path: Path) -> ScaffoldSettings:
    """Settings whose built-in root is an empty tmp directory."""
    builtin_root = tmp_path / "scaffold"
    builtin_root.mkdir()
    return ScaffoldSettings(builtin_root=builtin_root)


@pytest.fixture
def context() -> TemplateContext:
    return TemplateContext(app_name="my-app", module_name="github.com/acme/my-app")
