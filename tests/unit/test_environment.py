"""Tests for scaffold settings read from the environment."""

from __future__ import annotations

from pathlib import Path

import pytest

from lokstra_cli.core.environment import (
    BUILTIN_TEMPLATES_DIR,
    DEFAULT_TEMPLATE_NAME,
    LOKSTRA_TEMPLATE_VAR,
    ScaffoldSettings,
)


class TestScaffoldSettings:
    def test_defaults(self) -> None:
        settings = ScaffoldSettings()
        assert settings.default_template_name is None
        assert settings.builtin_root == Path(BUILTIN_TEMPLATES_DIR)
        assert settings.effective_template_name() == DEFAULT_TEMPLATE_NAME == "default"

    def test_from_env_reads_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOKSTRA_TEMPLATE_VAR, "corp")
        settings = ScaffoldSettings.from_env()
        assert settings.default_template_name == "corp"
        assert settings.effective_template_name() == "corp"

    def test_from_env_unset(self) -> None:
        assert ScaffoldSettings.from_env().default_template_name is None

    def test_from_explicit_mapping(self) -> None:
        settings = ScaffoldSettings.from_env({"LOKSTRA_TEMPLATE": "/opt/templates/go"})
        assert settings.effective_template_name() == "/opt/templates/go"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_is_unset(self, value: str) -> None:
        settings = ScaffoldSettings.from_env({LOKSTRA_TEMPLATE_VAR: value})
        assert settings.effective_template_name() == "default"

    def test_frozen(self) -> None:
        settings = ScaffoldSettings()
        with pytest.raises(AttributeError):
            settings.default_template_name = "x"  # type: ignore[misc]
