"""Unit tests for fn-export CLI commands.

Tests the command surface:
- export: Print or write a CI pipeline manifest
- source: Materialize stdin into a package
- version: Show version information
"""

import json

import pytest
import yaml
from typer.testing import CliRunner

from fnexport.cli.commands.export import to_workspace_relative
from fnexport.cli.main import app
from fnexport.export.domain.models import PipelineConfig
from fnexport.export.orchestrators import GitLabCIGenerator, TektonPipelineGenerator
from fnexport.shared.domain.exceptions import ValidationError


@pytest.fixture
def cli_runner():
    """Fixture providing Typer CLI test runner."""
    return CliRunner()


class TestExportCommand:
    def test_prints_tekton_manifest(self, cli_runner):
        result = cli_runner.invoke(
            app,
            ["export", "resources", "--workflow", "tekton", "--image", "gcr.io/example/fn:v1"],
        )

        assert result.exit_code == 0, result.output
        config = PipelineConfig(dir="resources", image="gcr.io/example/fn:v1")
        assert result.stdout == TektonPipelineGenerator().init(config).generate().decode("utf-8")

    def test_fn_paths_keep_order(self, cli_runner):
        result = cli_runner.invoke(
            app,
            ["export", ".", "-w", "tekton", "--fn-path", "functions", "--fn-path", "extra/fns"],
        )

        assert result.exit_code == 0, result.output
        task = next(yaml.safe_load_all(result.stdout))
        assert task["spec"]["steps"][0]["args"][1:] == [
            "$(workspaces.source.path)",
            "--fn-path",
            "$(workspaces.source.path)/functions",
            "--fn-path",
            "$(workspaces.source.path)/extra/fns",
        ]

    def test_writes_output_file(self, cli_runner, tmp_path):
        target = tmp_path / ".gitlab-ci.yml"
        result = cli_runner.invoke(
            app,
            ["export", "resources", "-w", "gitlab-ci", "--image", "img:1", "-o", str(target)],
        )

        assert result.exit_code == 0, result.output
        config = PipelineConfig(dir="resources", image="img:1")
        assert target.read_bytes() == GitLabCIGenerator().init(config).generate()

    def test_unknown_workflow_fails(self, cli_runner):
        result = cli_runner.invoke(app, ["export", "resources", "-w", "jenkins"])

        assert result.exit_code == 1
        assert "Validation Error" in result.output

    def test_escaping_dir_fails(self, cli_runner):
        result = cli_runner.invoke(app, ["export", "../elsewhere"])

        assert result.exit_code == 1
        assert "Export failed" in result.output


class TestToWorkspaceRelative:
    def test_relative_paths_pass_through(self):
        assert to_workspace_relative("resources") == "resources"

    def test_absolute_path_inside_workspace(self, tmp_path):
        assert to_workspace_relative(str(tmp_path / "a" / "b"), workspace=tmp_path) == "a/b"

    def test_absolute_path_outside_workspace_raises(self, tmp_path):
        with pytest.raises(ValidationError):
            to_workspace_relative("/definitely/elsewhere", workspace=tmp_path)


class TestSourceCommand:
    def test_materializes_stdin(self, cli_runner, tmp_path, sample_resources):
        package = tmp_path / "pkg"
        result = cli_runner.invoke(
            app,
            ["source", str(package), "--output-format", "json"],
            input=sample_resources,
        )

        assert result.exit_code == 0, result.output
        records = [json.loads(line) for line in result.stdout.splitlines()]
        assert [r["type"] for r in records] == ["resource_written", "resource_written", "kptfile_written"]
        assert (package / "web_deployment.yaml").exists()
        assert (package / "Kptfile").exists()

    def test_unknown_output_format_falls_back(self, cli_runner, tmp_path, sample_resources):
        result = cli_runner.invoke(
            app,
            ["source", str(tmp_path / "pkg"), "-f", "xml"],
            input=sample_resources,
        )

        assert result.exit_code == 0, result.output
        assert "resource_written: app-config_configmap.yaml" in result.stdout

    def test_invalid_stream_fails(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["source", str(tmp_path / "pkg")], input="- a\n- b\n")

        assert result.exit_code == 1
        assert "Source failed" in result.output


def test_version(cli_runner):
    result = cli_runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
