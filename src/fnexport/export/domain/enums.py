"""
Export domain enums.
"""

from __future__ import annotations

from enum import Enum

from fnexport.shared.domain.exceptions import UnsupportedOrchestratorError


class Orchestrator(Enum):
    """Supported CI engines."""

    TEKTON = "tekton"
    GITHUB_ACTIONS = "github-actions"
    GITLAB_CI = "gitlab-ci"

    @classmethod
    def from_string(cls, value: str) -> Orchestrator:
        """
        Safe conversion from string with fail-fast validation.

        Raises:
            UnsupportedOrchestratorError: If value is not a known engine
        """
        if not value or not isinstance(value, str):
            raise UnsupportedOrchestratorError("Orchestrator must be a non-empty string")

        normalized = value.lower().strip()
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(o.value for o in cls)
            raise UnsupportedOrchestratorError(
                f"Invalid orchestrator: '{value}'. Valid: {valid}",
                {"orchestrator": value},
            )
