"""
Compiler Service
Builds and runs Go snippets submitted from the editor.
"""

from .service import CompilerService, get_compiler_service, rewrite_output
from .normalizer import normalize, is_complete_unit
from .uniq import UniqueNameGenerator, get_unique_names

__all__ = [
    "CompilerService",
    "get_compiler_service",
    "rewrite_output",
    "normalize",
    "is_complete_unit",
    "UniqueNameGenerator",
    "get_unique_names",
]
