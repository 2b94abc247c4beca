"""
Tests for the GitLab CI pipeline generator.
"""

import pytest

from fnexport.export.orchestrators.gitlab_ci import GitLabCIGenerator, build_script
from fnexport.shared.domain.exceptions import GeneratorNotInitializedError, ValidationError


class TestGitLabCIGenerator:
    def test_pipeline_shape(self, pipeline_config, load_documents):
        output = GitLabCIGenerator().init(pipeline_config).generate()
        (pipeline,) = load_documents(output)

        assert list(pipeline.keys()) == ["stages", "kpt"]
        assert pipeline["stages"] == ["run-kpt-functions"]
        job = pipeline["kpt"]
        assert job["stage"] == "run-kpt-functions"
        assert job["image"] == "docker"
        assert job["services"] == ["docker:dind"]
        assert job["script"] == [
            "docker run -v $PWD:/app -v /var/run/docker.sock:/var/run/docker.sock "
            "gcr.io/example/fn:v1 run /app/resources"
        ]

    def test_fn_paths_in_order(self, config_with_fn_paths):
        script = build_script(config_with_fn_paths)
        assert script.endswith("run /app --fn-path /app/functions --fn-path /app/extra/fns")

    def test_custom_stage_and_job(self, pipeline_config, load_documents):
        generator = GitLabCIGenerator(stage="fns", job_id="render")
        (pipeline,) = load_documents(generator.init(pipeline_config).generate())

        assert pipeline["stages"] == ["fns"]
        assert pipeline["render"]["stage"] == "fns"

    def test_generate_before_init_raises(self):
        with pytest.raises(GeneratorNotInitializedError):
            GitLabCIGenerator().generate()

    @pytest.mark.parametrize("job_id", ["stages", "variables", "default", ""])
    def test_reserved_job_id_raises(self, job_id):
        with pytest.raises(ValidationError) as exc_info:
            GitLabCIGenerator(job_id=job_id)
        assert exc_info.value.context["job_id"] == job_id

