"""Shared test fixtures for fn-export test suite."""

import pytest
import yaml


@pytest.fixture
def project_root(tmp_path):
    """Create a temporary project root directory."""
    return tmp_path


@pytest.fixture
def pipeline_config():
    """Create a default PipelineConfig for testing."""
    from fnexport.export.domain.models import PipelineConfig

    return PipelineConfig(dir="resources", image="gcr.io/example/fn:v1")


@pytest.fixture
def config_with_fn_paths():
    """PipelineConfig with an empty dir and two fn paths."""
    from fnexport.export.domain.models import PipelineConfig

    return PipelineConfig(
        dir="",
        fn_paths=["functions", "extra/fns"],
        image="gcr.io/example/fn:v1",
    )


@pytest.fixture
def load_documents():
    """Parse multi-document YAML bytes into a list of mappings."""

    def _load(output: bytes) -> list:
        return list(yaml.safe_load_all(output.decode("utf-8")))

    return _load


@pytest.fixture
def sample_resources():
    """A small multi-document resource stream."""
    return """apiVersion: v1
kind: ConfigMap
metadata:
  name: App-Config
  namespace: prod
data:
  key: value
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
spec:
  replicas: 2
"""
