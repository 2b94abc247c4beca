"""
fn-export - generate CI pipeline manifests that run containerized
functions against a directory of configuration.
"""

__version__ = "0.1.0"
