"""End-to-end checks against the scaffold/default template shipped in the repository."""

from __future__ import annotations

from pathlib import Path

import pytest

from lokstra_cli.core.environment import ScaffoldSettings
from lokstra_cli.core.init_impl import ProjectType, init_project
from lokstra_cli.core.lint import lint_files

REPO_SCAFFOLD = Path(__file__).parent.parent.parent / "scaffold"


@pytest.fixture
def repo_settings() -> ScaffoldSettings:
    return ScaffoldSettings(builtin_root=REPO_SCAFFOLD)


@pytest.mark.parametrize("project_type", [t.value for t in ProjectType])
def test_every_type_renders(
    project_type: str, tmp_path: Path, repo_settings: ScaffoldSettings
) -> None:
    root = init_project(project_type, "demo-app", output_dir=tmp_path, settings=repo_settings)

    assert (root / "go.mod").exists()
    rendered = [p for p in root.rglob("*") if p.is_file()]
    assert len(rendered) >= 2
    assert not any(p.name.endswith(".tpl") for p in rendered)


def test_server_layout(tmp_path: Path, repo_settings: ScaffoldSettings) -> None:
    root = init_project(
        "server",
        "shop",
        module_path="github.com/acme/shop",
        output_dir=tmp_path,
        settings=repo_settings,
    )

    assert (root / "cmd" / "main.go").exists()
    assert (root / "internal" / "app" / "app.go").exists()
    assert (root / "config" / "server.yaml").exists()
    assert (root / ".gitignore").exists()
    assert '"github.com/acme/shop/internal/app"' in (root / "cmd" / "main.go").read_text()
    assert (root / "README.md").read_text().startswith("# shop\n")


def test_generated_project_lints_clean(tmp_path: Path, repo_settings: ScaffoldSettings) -> None:
    for project_type in ("server", "service"):
        init_project(
            project_type, f"demo-{project_type}", output_dir=tmp_path, settings=repo_settings
        )

    report = lint_files(
        source_files=sorted(tmp_path.rglob("*.go")),
        yaml_files=sorted(tmp_path.rglob("*.yaml")),
    )
    assert report.passed, [str(issue) for issue in report.issues]
    assert report.files_checked >= 4
