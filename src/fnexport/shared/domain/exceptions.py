"""
Domain exceptions for fn-export.

Follows the "Fail Fast" and "Strict Types" principles.
All application errors should inherit from FnExportError.
"""


class FnExportError(Exception):
    """Base class for all fn-export exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class ValidationError(FnExportError):
    """Input validation failed."""

    pass


class SecurityError(FnExportError):
    """Raised when a path escapes the root it must stay within."""

    pass


class UnsupportedOrchestratorError(ValidationError):
    """Raised when no pipeline generator is registered for an engine name."""

    pass


class GeneratorNotInitializedError(FnExportError):
    """Raised when generate() is called on a builder that was never init()-ed."""

    pass


class ManifestSerializationError(FnExportError):
    """Raised when the manifest tree holds a value YAML cannot represent."""

    pass


class MaterializeError(FnExportError):
    """Raised when a resource stream cannot be read into a package."""

    pass


class FileOperationError(FnExportError):
    """File system operation failed."""

    pass
