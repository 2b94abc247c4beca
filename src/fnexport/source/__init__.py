"""
Source module - materialize a resource stream into a local package.
"""

from fnexport.source.kptfile import KPTFILE_NAME, Kptfile
from fnexport.source.materializer import (
    DEFAULT_FILENAME_PATTERN,
    MaterializeResult,
    expand_filename_pattern,
    materialize,
)

__all__ = [
    "materialize",
    "MaterializeResult",
    "expand_filename_pattern",
    "DEFAULT_FILENAME_PATTERN",
    "Kptfile",
    "KPTFILE_NAME",
]
