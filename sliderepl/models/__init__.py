"""Pydantic models and schemas for type-safe data handling."""

from .slide import Slide, PageData
from .compile import CompileOutcome, CompileResponse

__all__ = [
    # Slide models
    "Slide",
    "PageData",
    # Compile models
    "CompileOutcome",
    "CompileResponse",
]
