"""
Utility modules for the i18n generator
"""

from .code_buffer import CodeBuffer
from .file_utils import FileManager
from .exceptions import (
    GeneratorError,
    ConfigurationError,
    CatalogStructureError,
    EmptyCatalogError,
    KeyConsistencyError,
    NestedPathError,
)

__all__ = [
    'CodeBuffer',
    'FileManager',
    'GeneratorError',
    'ConfigurationError',
    'CatalogStructureError',
    'EmptyCatalogError',
    'KeyConsistencyError',
    'NestedPathError',
]
