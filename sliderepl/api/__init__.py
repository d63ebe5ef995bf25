"""API routes for SlideREPL."""

from .routes import compiler, slides

__all__ = [
    "compiler",
    "slides",
]
