"""Service layer for SlideREPL."""

from .compiler import CompilerService, get_compiler_service
from .slides import SlideDeckService, get_slide_deck_service

__all__ = [
    "CompilerService",
    "get_compiler_service",
    "SlideDeckService",
    "get_slide_deck_service",
]
