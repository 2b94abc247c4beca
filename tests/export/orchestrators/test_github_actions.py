"""
Tests for the GitHub Actions workflow generator.
"""

import pytest

from fnexport.export.domain.models import PipelineConfig
from fnexport.export.orchestrators.github_actions import GitHubActionsGenerator, build_command
from fnexport.shared.domain.exceptions import GeneratorNotInitializedError


class TestGitHubActionsGenerator:
    def test_single_document_without_separator(self, pipeline_config, load_documents):
        output = GitHubActionsGenerator().init(pipeline_config).generate()

        assert b"---" not in output
        assert len(load_documents(output)) == 1

    def test_workflow_shape(self, pipeline_config, load_documents):
        (workflow,) = load_documents(GitHubActionsGenerator().init(pipeline_config).generate())

        assert workflow["name"] == "kpt"
        assert workflow["on"] == {"push": {"branches": ["master"]}}
        job = workflow["jobs"]["Kpt"]
        assert job["runs-on"] == "ubuntu-latest"
        checkout, run = job["steps"]
        assert checkout == {"name": "Checkout", "uses": "actions/checkout@v2"}
        assert run["uses"] == "docker://gcr.io/example/fn:v1"
        assert run["with"] == {"args": "run resources"}

    def test_fn_paths_in_order(self, config_with_fn_paths):
        assert build_command(config_with_fn_paths) == "run . --fn-path functions --fn-path extra/fns"

    def test_custom_branches(self, pipeline_config, load_documents):
        generator = GitHubActionsGenerator(branches=("main", "release"))
        (workflow,) = load_documents(generator.init(pipeline_config).generate())
        assert workflow["on"]["push"]["branches"] == ["main", "release"]

    def test_reinit_replaces_workflow(self, pipeline_config, load_documents):
        generator = GitHubActionsGenerator().init(pipeline_config)
        generator.init(PipelineConfig(dir="other", image="img:2"))
        (workflow,) = load_documents(generator.generate())

        run = workflow["jobs"]["Kpt"]["steps"][1]
        assert run["uses"] == "docker://img:2"
        assert run["with"]["args"] == "run other"

    def test_generate_before_init_raises(self):
        with pytest.raises(GeneratorNotInitializedError):
            GitHubActionsGenerator().generate()
